"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.vet_mapper import VetMapper

__all__ = ["VetMapper"]
