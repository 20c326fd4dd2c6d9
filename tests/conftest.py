"""Shared fixtures for live-filter tests."""

from __future__ import annotations

import pytest
from models import TASKS, Base, TaskRecord
from sqlalchemy import create_engine
from sqlalchemy.orm import Session


@pytest.fixture
def session():
    """In-memory SQLite session seeded with ``TASKS``."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(TaskRecord(id=i, **row) for i, row in enumerate(TASKS, 1))
        session.commit()
        yield session
    engine.dispose()
