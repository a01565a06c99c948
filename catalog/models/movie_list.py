from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base_class import Base

# The cache holds a single list snapshot; its row always uses this key.
SNAPSHOT_SLOT = 1


class MovieListSnapshot(Base):
    __tablename__ = "movie_list_snapshots"

    slot: Mapped[int] = mapped_column(sa.Integer, primary_key=True, default=SNAPSHOT_SLOT)

    page: Mapped[int] = mapped_column(sa.Integer, nullable=False)
    total_pages: Mapped[int] = mapped_column(sa.Integer, nullable=False)
    total_results: Mapped[int] = mapped_column(sa.Integer, nullable=False)

    fetched_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )

    __table_args__ = (
        sa.CheckConstraint(f"slot = {SNAPSHOT_SLOT}", name="ck_movie_list_snapshots_single_slot"),
    )


class MovieListItem(Base):
    __tablename__ = "movie_list_items"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=False)

    # order of the entry inside the fetched page
    position: Mapped[int] = mapped_column(sa.Integer, nullable=False)
    # page the entry was fetched with
    page: Mapped[int] = mapped_column(sa.Integer, nullable=False)

    title: Mapped[str | None] = mapped_column(sa.String(500), nullable=True)
    original_title: Mapped[str | None] = mapped_column(sa.String(500), nullable=True)
    original_language: Mapped[str | None] = mapped_column(sa.String(20), nullable=True)
    overview: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    popularity: Mapped[float | None] = mapped_column(sa.Float, nullable=True)
    poster_path: Mapped[str | None] = mapped_column(sa.String(500), nullable=True)
    backdrop_path: Mapped[str | None] = mapped_column(sa.String(500), nullable=True)
    release_date: Mapped[str | None] = mapped_column(sa.String(20), nullable=True)
    genre_ids: Mapped[list[int] | None] = mapped_column(sa.JSON, nullable=True)
    adult: Mapped[bool | None] = mapped_column(sa.Boolean, nullable=True)
    video: Mapped[bool | None] = mapped_column(sa.Boolean, nullable=True)
    vote_average: Mapped[float | None] = mapped_column(sa.Float, nullable=True)
    vote_count: Mapped[int | None] = mapped_column(sa.Integer, nullable=True)

    __table_args__ = (
        sa.Index("ix_movie_list_items_position", "position"),
    )
