from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings

engine = create_async_engine(settings.db_url)


async def get_db() -> AsyncGenerator[AsyncSession]:
    async with AsyncSession(
        engine, autocommit=False, autoflush=False, expire_on_commit=False
    ) as session:
        yield session


async def create_db_and_tables(db_engine: AsyncEngine = engine) -> None:
    import app.models  # noqa: F401, PLC0415

    async with db_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
