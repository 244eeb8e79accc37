"""Tests for database configuration helpers."""

import pytest

from db import make_engine, normalize_url, random_seed


@pytest.mark.parametrize(
    "url",
    ["postgres://u:p@host:5432/lingo", "postgresql://u:p@host:5432/lingo"],
)
def test_normalize_url_uses_psycopg(url):
    assert normalize_url(url) == "postgresql+psycopg://u:p@host:5432/lingo"


def test_normalize_url_keeps_other_urls():
    assert normalize_url("sqlite:///./lingo.db") == "sqlite:///./lingo.db"
    assert normalize_url("postgresql+psycopg2://u@h/db") == "postgresql+psycopg2://u@h/db"


def test_make_engine_sqlite():
    engine = make_engine("sqlite://")
    assert engine.dialect.name == "sqlite"
    engine.dispose()


def test_random_seed_from_env(monkeypatch):
    monkeypatch.setenv("SEED_RANDOM_SEED", " 42 ")
    assert random_seed() == 42

    monkeypatch.delenv("SEED_RANDOM_SEED")
    assert random_seed() is None
