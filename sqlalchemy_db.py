"""
SQLModel database configuration and session management.
"""

from typing import Optional

from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from config import get_config

# Import the table models so their metadata is registered before create_all
import models  # noqa: F401


class DatabaseEngine:
    """SQLModel database engine for managing connections and sessions."""

    _instance = None

    def __init__(self, database_url: Optional[str] = None):
        """
        Initialize the database engine and create missing tables.

        Args:
            database_url: SQLAlchemy URL, defaults to the DATABASE_URL setting
        """
        self.database_url = database_url or self._get_database_url()
        self.engine = self._create_engine()
        self.session_local = self._create_session_local()
        self.create_tables()

    @classmethod
    def instance(cls) -> "DatabaseEngine":
        """Return the process-wide engine, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _get_database_url(self) -> str:
        """Get database URL from the environment configuration."""
        return get_config().database_url

    def _create_engine(self):
        """Create the SQLAlchemy engine."""
        if self.database_url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            if self.database_url in ("sqlite://", "sqlite:///:memory:"):
                # A single shared connection keeps the in-memory database alive
                kwargs["poolclass"] = StaticPool
            return create_engine(self.database_url, echo=False, **kwargs)

        return create_engine(
            self.database_url,
            pool_pre_ping=True,
            pool_recycle=300,
            echo=False,  # Set to True for SQL query logging
        )

    def _create_session_local(self):
        """Create SessionLocal class."""
        return sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
            class_=Session,
        )

    def get_session(self) -> Session:
        """Get a single database session."""
        return self.session_local()

    def create_tables(self):
        """Create all tables in the database."""
        SQLModel.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """Drop all tables in the database."""
        SQLModel.metadata.drop_all(bind=self.engine)
