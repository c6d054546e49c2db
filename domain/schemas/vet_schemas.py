from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class VetForm(BaseModel):
    """Submitted vet create/edit form. Both names are required and non-blank."""

    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)

    model_config = ConfigDict(str_strip_whitespace=True)


class VetFormData(BaseModel):
    """Values shown in the vet form (blank, pre-filled, or as submitted)"""

    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = {"from_attributes": True}


class SpecialtyForm(BaseModel):
    specialty: str = Field(..., min_length=1, description="Name of the specialty")

    model_config = ConfigDict(str_strip_whitespace=True)


class DayForm(BaseModel):
    day: str = Field(..., min_length=1, description="Name of the day")

    model_config = ConfigDict(str_strip_whitespace=True)


class SpecialtyResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class DayResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class VetResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    specialties: List[SpecialtyResponse]
    available_days: List[DayResponse]
    nr_of_specialties: int

    model_config = {"from_attributes": True}


class VetsResponse(BaseModel):
    """Unpaginated vet list, wrapped for serialization"""

    vet_list: List[VetResponse]


# View models: the data each view receives from its handler


class VetListModel(BaseModel):
    list_vets: List[VetResponse]
    current_page: int
    total_pages: int
    total_items: int


class VetDetailModel(BaseModel):
    vet: VetResponse


class VetFormModel(BaseModel):
    vet: VetFormData


class SpecialtyFormModel(BaseModel):
    vet: VetResponse
    specialties: List[SpecialtyResponse]


class DayFormModel(BaseModel):
    vet: VetResponse
    days: List[DayResponse]
