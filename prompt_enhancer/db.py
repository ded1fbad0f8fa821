"""
Database adapter: abstract interface + SQLite implementation.

Allows swapping the backing store (e.g. PostgreSQL) by providing a different
adapter implementation while keeping the same interface.
"""

import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from constants import DATA_DIR
from .models.base import Base


class DBAdapter(ABC):
    """Abstract database adapter. Implement this to swap backends (e.g. PostgreSQL)."""

    @abstractmethod
    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Yield a session; commits on exit, rolls back on exception."""
        ...

    @abstractmethod
    def create_tables(self) -> None:
        """Create all tables defined in models."""
        ...


class SQLiteAdapter(DBAdapter):
    """SQLite implementation of the DB adapter."""

    def __init__(self, url: str = "sqlite:///data/guides.db", *, echo: bool = False):
        self._url = url
        self._engine = create_engine(url, echo=echo, connect_args={"check_same_thread": False})
        self._session_factory = sessionmaker(
            self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self._engine)


def get_default_adapter() -> DBAdapter:
    """Build the default adapter from environment/config."""
    url = os.environ.get("DATABASE_URL")
    if url:
        if url.startswith("sqlite"):
            return SQLiteAdapter(url)
        raise ValueError("Only sqlite:// URLs are supported. Set DATABASE_URL to a sqlite path.")

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    db_path = DATA_DIR / "guides.db"
    return SQLiteAdapter(f"sqlite:///{db_path}")
