"""Shared fixtures: a fresh in-memory SQLite database per test."""

import random

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from db import init_db, make_engine


@pytest.fixture
def engine():
    """In-memory database with every table created."""
    engine = make_engine("sqlite://", echo=False, poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def rng():
    return random.Random(1234)
