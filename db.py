import os

from dotenv import load_dotenv
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

load_dotenv()

DB_URL = os.getenv("DATABASE_URL", "sqlite:///./lingo.db")
SQL_ECHO = os.getenv("SQL_ECHO", "0") == "1"

# bare postgres URLs (as the web app writes them) go through psycopg 3
PG_PREFIXES = ("postgres://", "postgresql://")
PG_DRIVER_PREFIX = "postgresql+psycopg://"


def normalize_url(url: str) -> str:
    for prefix in PG_PREFIXES:
        if url.startswith(prefix):
            return PG_DRIVER_PREFIX + url[len(prefix):]
    return url


def make_engine(url: str = DB_URL, echo: bool = SQL_ECHO, **kwargs) -> Engine:
    url = normalize_url(url)
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=echo, **kwargs)


engine = make_engine()


def random_seed():
    """Integer seed for the option shuffler, or None for an unseeded run."""
    raw = os.getenv("SEED_RANDOM_SEED", "").strip()
    return int(raw) if raw else None


def init_db(bind: Engine = engine) -> None:
    # registers the tables on SQLModel.metadata
    import models  # noqa: F401

    SQLModel.metadata.create_all(bind)
