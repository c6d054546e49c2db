"""
Vet domain mappers.
Handles transformation between ORM models and DTOs for vet-related entities.
"""

from typing import Any, Dict, Mapping, Optional, Tuple
from pydantic import ValidationError

from domain.models import Vet
from domain.schemas.vet_schemas import (
    VetForm,
    VetFormData,
    VetResponse,
    SpecialtyResponse,
    DayResponse,
)


class VetMapper:
    """Mapper for vet-related transformations."""

    @staticmethod
    def to_response(vet: Vet) -> VetResponse:
        """
        Convert Vet ORM model to VetResponse DTO.

        Specialties are ordered by name and days by id (week order), so the
        output is stable even though the model holds them as sets.

        Args:
            vet: Vet ORM instance with relationships loaded

        Returns:
            VetResponse DTO
        """
        return VetResponse(
            id=vet.id,
            first_name=vet.first_name,
            last_name=vet.last_name,
            specialties=[
                SpecialtyResponse.model_validate(s) for s in vet.sorted_specialties
            ],
            available_days=[DayResponse.model_validate(d) for d in vet.sorted_days],
            nr_of_specialties=vet.nr_of_specialties,
        )

    @staticmethod
    def to_form_data(vet: Optional[Vet] = None) -> VetFormData:
        """Form values for a vet, or a blank form when no vet is given."""
        if vet is None:
            return VetFormData()
        return VetFormData.model_validate(vet)

    @staticmethod
    def bind_form(
        payload: Mapping[str, Any], vet_id: Optional[int] = None
    ) -> Tuple[Optional[VetForm], VetFormData, Dict[str, str]]:
        """
        Bind a submitted vet form.

        Returns the validated form (None on failure), the values to show if the
        form has to be displayed again, and a field -> message mapping of errors.
        """
        submitted = VetFormData(
            id=vet_id,
            first_name=_as_text(payload.get("first_name")),
            last_name=_as_text(payload.get("last_name")),
        )
        try:
            form = VetForm.model_validate(payload)
        except ValidationError as exc:
            errors: Dict[str, str] = {}
            for err in exc.errors():
                field = ".".join(str(p) for p in err["loc"]) or "__root__"
                errors.setdefault(field, _message_for(err))
            return None, submitted, errors
        return form, submitted, {}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _message_for(err: Mapping[str, Any]) -> str:
    if err["type"] in ("missing", "string_too_short"):
        return "must not be empty"
    return err["msg"]
