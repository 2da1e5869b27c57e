"""
Shared fixtures: an on-disk SQLite store (aiosqlite) and transaction builders.
"""
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from domain.entities import Transaction
from infrastructure.db.database import create_session_factory, init_models
from infrastructure.db.repositories.transaction_repo_sqlalchemy import TransactionRepoSqlalchemy


def make_transaction(
    title: str = "Item",
    price: float = 10.0,
    date_of_sale: str = "2021-03-05T10:00:00+05:30",
    sold: bool = True,
    category: str = "electronics",
    description: str = "A product",
) -> Transaction:
    return Transaction(
        title=title,
        description=description,
        price=price,
        date_of_sale=date_of_sale,
        sold=sold,
        category=category,
    )


@pytest.fixture
def transaction_factory():
    return make_transaction


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'transactions.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def repo(sqlite_engine):
    return TransactionRepoSqlalchemy(create_session_factory(sqlite_engine))
