"""create movie list cache

Revision ID: 3a7c1e9b2d40
Revises:
Create Date: 2026-10-19 10:12:08.412377

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a7c1e9b2d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "movie_list_snapshots",
        sa.Column("slot", sa.Integer(), primary_key=True),
        sa.Column("page", sa.Integer(), nullable=False),
        sa.Column("total_pages", sa.Integer(), nullable=False),
        sa.Column("total_results", sa.Integer(), nullable=False),
        sa.Column(
            "fetched_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("slot = 1", name="ck_movie_list_snapshots_single_slot"),
    )

    op.create_table(
        "movie_list_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("page", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=True),
        sa.Column("original_title", sa.String(length=500), nullable=True),
        sa.Column("original_language", sa.String(length=20), nullable=True),
        sa.Column("overview", sa.Text(), nullable=True),
        sa.Column("popularity", sa.Float(), nullable=True),
        sa.Column("poster_path", sa.String(length=500), nullable=True),
        sa.Column("backdrop_path", sa.String(length=500), nullable=True),
        sa.Column("release_date", sa.String(length=20), nullable=True),
        sa.Column("genre_ids", sa.JSON(), nullable=True),
        sa.Column("adult", sa.Boolean(), nullable=True),
        sa.Column("video", sa.Boolean(), nullable=True),
        sa.Column("vote_average", sa.Float(), nullable=True),
        sa.Column("vote_count", sa.Integer(), nullable=True),
    )

    op.create_index("ix_movie_list_items_position", "movie_list_items", ["position"])


def downgrade():
    op.drop_index("ix_movie_list_items_position", table_name="movie_list_items")
    op.drop_table("movie_list_items")
    op.drop_table("movie_list_snapshots")
