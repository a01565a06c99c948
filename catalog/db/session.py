import catalog.db.base  # noqa: F401

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from catalog.core.config import settings
from catalog.db.base_class import Base


def make_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    engine_kwargs: dict[str, object] = {"echo": echo}
    if database_url.startswith("sqlite"):
        # aiosqlite connections are cheap; keep none around between sessions.
        engine_kwargs["poolclass"] = NullPool
    else:
        engine_kwargs["pool_pre_ping"] = True
    return create_async_engine(database_url, **engine_kwargs)


def make_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        expire_on_commit=False,
        class_=AsyncSession,
    )


engine = make_engine(settings.database_url, echo=settings.env == "local" and settings.log_level == "DEBUG")

AsyncSessionLocal = make_sessionmaker(engine)


async def init_db(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
