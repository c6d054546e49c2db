"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, Page
from repositories.vet_repository import VetRepository

__all__ = [
    "BaseRepository",
    "Page",
    "VetRepository",
]
