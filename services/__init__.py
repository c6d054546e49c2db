"""Services package - Business logic layer"""

from services.vet_service import VetService

__all__ = [
    "VetService",
]
