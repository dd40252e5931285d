"""
Pytest configuration and fixtures

Every test gets its own SQLite file under tmp_path, so nothing leaks
between tests and the real data directory is never touched.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from api_main import create_app
from habitgrid.bridge import Bridge
from habitgrid.store import HabitStore

TODAY = date(2024, 1, 6)


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'habits.db'}"


@pytest.fixture
def store(db_url):
    store = HabitStore.open(db_url)
    yield store
    store.close()


@pytest.fixture
def strict_store(tmp_path):
    store = HabitStore.open(f"sqlite:///{tmp_path / 'strict.db'}", strict=True)
    yield store
    store.close()


@pytest.fixture
def bridge(store):
    return Bridge(store, clock=lambda: TODAY)


@pytest.fixture
def client(store):
    app = create_app(store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def exercise(store):
    """Boolean habit with five completed days and a miss on the sixth."""
    habit = store.add_habit("Exercise", "boolean", "#3b82f6")
    for day in range(1, 6):
        store.upsert_record(habit.id, date(2024, 1, day), "completed")
    store.upsert_record(habit.id, date(2024, 1, 6), "missed")
    return habit
