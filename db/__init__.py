"""
Database module for the content intelligence engine.

This module handles:
- Database connection management
- SQLAlchemy models
- Loading and storing crawl snapshots
"""

from db.models import Base, WebsiteAnalysisRecord, CrawledPageRecord
from db.database_manager import DatabaseManager
from db.repository import CrawlRepository

__version__ = "0.1.0"

__all__ = [
    "Base",
    "WebsiteAnalysisRecord",
    "CrawledPageRecord",
    "DatabaseManager",
    "CrawlRepository",
]
