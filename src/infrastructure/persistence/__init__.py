"""Database persistence infrastructure.

This module provides:
- Base model for all database entities
- Database connection and session management
- Repository implementations (see repositories/)
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
