from __future__ import annotations

import asyncio
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog.core.errors import NotFoundError, StorageError
from catalog.models.movie_list import SNAPSHOT_SLOT, MovieListItem, MovieListSnapshot
from catalog.services.mapping import StoredSnapshot

logger = logging.getLogger(__name__)


def _collect_replace_outcome(task: asyncio.Future) -> None:
    # A caller cancelled mid-replace never awaits the write; retrieve its
    # failure here so it is not reported as an unretrieved task exception.
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("movie cache replace finished with %r", exc)


class SqlLocalStore:
    """Single-slot cache of the latest movie list page.

    ``replace_snapshot`` clears and rewrites the snapshot row and its items in
    one transaction, so readers observe either the previous page or the new
    one. An in-process lock keeps reads from interleaving with a replace, and
    the replace is shielded from caller cancellation once started.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._lock = asyncio.Lock()

    async def has_snapshot(self) -> bool:
        try:
            async with self._session_factory() as db:
                q = select(func.count()).select_from(MovieListSnapshot).where(
                    MovieListSnapshot.slot == SNAPSHOT_SLOT
                )
                return (await db.execute(q)).scalar_one() > 0
        except SQLAlchemyError as exc:
            raise StorageError("Could not check the local movie cache") from exc

    async def read_snapshot(self) -> StoredSnapshot:
        async with self._lock:
            try:
                async with self._session_factory() as db:
                    snapshot = await db.get(MovieListSnapshot, SNAPSHOT_SLOT)
                    if snapshot is None:
                        raise NotFoundError("No movie list snapshot has been stored")
                    q = select(MovieListItem).order_by(MovieListItem.position.asc())
                    items = list((await db.execute(q)).scalars())
            except SQLAlchemyError as exc:
                raise StorageError("Could not read the local movie cache") from exc
        return StoredSnapshot(snapshot=snapshot, items=items)

    async def replace_snapshot(
        self,
        snapshot: MovieListSnapshot,
        items: list[MovieListItem],
    ) -> None:
        task = asyncio.ensure_future(self._replace(snapshot, items))
        task.add_done_callback(_collect_replace_outcome)
        await asyncio.shield(task)

    async def _replace(self, snapshot: MovieListSnapshot, items: list[MovieListItem]) -> None:
        async with self._lock:
            async with self._session_factory() as db:
                try:
                    await db.execute(delete(MovieListItem))
                    await db.execute(delete(MovieListSnapshot))
                    await self._write_snapshot(db, snapshot)
                    await self._write_items(db, items)
                    await db.commit()
                except SQLAlchemyError as exc:
                    await db.rollback()
                    logger.exception("movie cache replace failed page=%s items=%s", snapshot.page, len(items))
                    raise StorageError("Could not write the local movie cache") from exc
        logger.debug("movie cache replaced page=%s items=%s", snapshot.page, len(items))

    async def _write_snapshot(self, db: AsyncSession, snapshot: MovieListSnapshot) -> None:
        db.add(snapshot)
        await db.flush()

    async def _write_items(self, db: AsyncSession, items: list[MovieListItem]) -> None:
        db.add_all(items)
        await db.flush()
