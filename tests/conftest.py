import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from expense_tracker.client.store import StoreAccessor
from expense_tracker.db import get_db, init_db, make_engine
from expense_tracker.main import app


def _client_for(db_path, create_tables=True):
    engine = make_engine(f"sqlite:///{db_path}")
    if create_tables:
        init_db(engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return engine, TestClient(app)


@pytest.fixture
def client(tmp_path):
    engine, test_client = _client_for(tmp_path / "expenses.db")
    yield test_client
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def broken_client(tmp_path):
    # No tables: every store call fails inside the database driver
    engine, test_client = _client_for(tmp_path / "empty.db", create_tables=False)
    yield test_client
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def store(client):
    return StoreAccessor(base_url="", session=client)


@pytest.fixture
def coffee():
    return {
        "label": "Coffee",
        "amount": 4.5,
        "date": "2024-01-01",
        "category": "Food",
        "type": "expense",
    }


@pytest.fixture
def paycheck():
    return {
        "label": "Paycheck",
        "amount": 2000,
        "date": "2024-01-02",
        "category": "Salary",
        "type": "income",
    }
