"""
Domain Repositories
"""

from .base import AbstractRepository, OwnedRepository

__all__ = ["AbstractRepository", "OwnedRepository"]
