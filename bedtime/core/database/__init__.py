"""
Database Module
SQLAlchemy 비동기 데이터베이스 설정
"""

from .session import get_db, AsyncSessionLocal, engine
from .base import Base

__all__ = ["get_db", "AsyncSessionLocal", "engine", "Base"]
