"""API routes package"""

from . import vets, health

__all__ = ["vets", "health"]
