from datetime import datetime

import pytest

from ledger.session import Session
from ledger.storage import LedgerStore, MemoryKeyValueStore
from models import TransactionRecord, UserRecord
from routes.dependencies import reset_dependencies
from sqlalchemy_db import DatabaseEngine


def make_transaction(id, type, amount, date, category="Other", user_id=1, description=None):
    return TransactionRecord(
        id=id,
        user_id=user_id,
        type=type,
        amount=amount,
        description=description or f"{type} {amount}",
        category=category,
        date=date,
        created_at=datetime(2024, 3, 1, 12, 0, id % 60),
    )


@pytest.fixture
def scenario_transactions():
    """User A's ledger, newest added first."""
    return [
        make_transaction(1, "income", "1000", "2024-01-15", category="Salary"),
        make_transaction(2, "expense", "200", "2024-01-20", category="Food"),
        make_transaction(3, "expense", "50", "2024-02-01", category="Bills"),
    ]


@pytest.fixture
def kv_store():
    return MemoryKeyValueStore()


@pytest.fixture
def ledger_store(kv_store):
    return LedgerStore(kv_store)


@pytest.fixture
def session(kv_store):
    return Session(kv_store)


@pytest.fixture
def user():
    return UserRecord(id=1, name="Ada", email="ada@example.com", created_at=datetime(2024, 1, 1))


@pytest.fixture
def db_engine():
    previous = DatabaseEngine._instance
    engine = DatabaseEngine("sqlite://")
    DatabaseEngine._instance = engine
    reset_dependencies()
    yield engine
    engine.drop_tables()
    DatabaseEngine._instance = previous
    reset_dependencies()


@pytest.fixture
def client(db_engine):
    from fastapi.testclient import TestClient

    from api import app

    with TestClient(app) as test_client:
        yield test_client
