"""
Engine and session factory construction for the async transaction store.

Nothing here is created at import time: the application lifespan builds the
engine from StoreConfig and hands the session factory to the repository.
"""
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker

# Import all models to ensure they're registered before create_all
from infrastructure.db.models import Base, TransactionModel  # noqa: F401
from domain.config import StoreConfig


def create_store_engine(config: StoreConfig) -> AsyncEngine:
    """Create the async engine for the configured DATABASE_URL."""
    return create_async_engine(
        config.database_url,
        echo=config.echo,  # Set DB_ECHO=1 for SQL query logging
        future=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create missing tables. There is no migration tooling; existing tables are left as they are."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
