"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.vet_schemas import (
    VetForm,
    VetFormData,
    SpecialtyForm,
    DayForm,
    SpecialtyResponse,
    DayResponse,
    VetResponse,
    VetsResponse,
    VetListModel,
    VetDetailModel,
    VetFormModel,
    SpecialtyFormModel,
    DayFormModel,
)

__all__ = [
    # Forms
    "VetForm",
    "VetFormData",
    "SpecialtyForm",
    "DayForm",
    # Responses
    "SpecialtyResponse",
    "DayResponse",
    "VetResponse",
    "VetsResponse",
    # View models
    "VetListModel",
    "VetDetailModel",
    "VetFormModel",
    "SpecialtyFormModel",
    "DayFormModel",
]
