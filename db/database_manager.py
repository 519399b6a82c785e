"""
Database Connection Manager for the content intelligence engine.

SQLAlchemy engine + session factory over DATABASE_URL. SQLite URLs
(including in-memory databases used by tests) get a single shared
connection; other backends get a pre-pinged connection pool.
"""

import os
from contextlib import contextmanager
from typing import Generator, Optional

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from content_intelligence.exceptions import ConfigurationError
from db.models import Base
from runner.logging_setup import get_logger

# Load environment
load_dotenv()

logger = get_logger("database_manager")


class DatabaseManager:
    """Manages the database engine and sessions."""

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or os.getenv("DATABASE_URL")
        if not self.database_url:
            raise ConfigurationError("DATABASE_URL not set in environment")

        self.engine = None
        self.SessionLocal = None
        self._initialize_engine()

    def _initialize_engine(self):
        """Initialize the SQLAlchemy engine for the configured database."""
        try:
            if self.database_url.startswith("sqlite"):
                self.engine = create_engine(
                    self.database_url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                    echo=False
                )
            else:
                self.engine = create_engine(
                    self.database_url,
                    pool_pre_ping=True,  # Verify connections before using
                    pool_recycle=3600,
                    echo=False
                )

            self.SessionLocal = sessionmaker(
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
                bind=self.engine
            )
            logger.info("Database engine initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database engine: {e}")
            raise

    def init_db(self):
        """Create all tables defined in db.models."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions

        Usage:
            with db_manager.get_session() as session:
                record = session.get(WebsiteAnalysisRecord, analysis_id)

        Yields:
            Database session
        """
        session = self.SessionLocal()

        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        finally:
            session.close()

    def close(self):
        """Close all database connections"""
        if self.engine:
            self.engine.dispose()
            logger.info("Database engine closed")
