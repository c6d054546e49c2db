"""Vet management routes"""

from typing import Any, Dict, Union

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import ErrorResponse, ViewResponse, redirect_to
from app.config import settings
from domain.mappers import VetMapper
from domain.schemas.vet_schemas import (
    VetFormData,
    SpecialtyForm,
    DayForm,
    SpecialtyResponse,
    DayResponse,
    VetsResponse,
    VetListModel,
    VetDetailModel,
    VetFormModel,
    SpecialtyFormModel,
    DayFormModel,
)
from services.vet_service import VetService

router = APIRouter(tags=["Vets"], responses={404: {"model": ErrorResponse}})
logger = logging.getLogger("vetclinic.api.vets")

VIEW_VET_LIST = "vets/vetList"
VIEW_VET_DETAILS = "vets/vetDetails"
VIEW_VET_CREATE_OR_UPDATE_FORM = "vets/createOrUpdateVetForm"
VIEW_ADD_SPECIALTY = "vets/createOrUpdateSpecialtyForm"
VIEW_ADD_AVAILABLE_DAY = "vets/createOrUpdateAvailableDayForm"


def _vet_detail_path(vet_id: int) -> str:
    return f"{settings.api_prefix}/vets/{vet_id}"


def _vet_form_view(
    vet: VetFormData, errors: Dict[str, str] = None
) -> ViewResponse[VetFormModel]:
    return ViewResponse[VetFormModel](
        view=VIEW_VET_CREATE_OR_UPDATE_FORM,
        model=VetFormModel(vet=vet),
        errors=errors or None,
    )


@router.get("/vets.html", response_model=ViewResponse[VetListModel])
def show_vet_list(
    page: int = Query(1, ge=1, description="1-based page number"),
    db: Session = Depends(get_db),
):
    """Paginated vet list. A page past the end has an empty list_vets."""
    paginated = VetService.get_vet_page(db, page)
    return ViewResponse[VetListModel](
        view=VIEW_VET_LIST,
        model=VetListModel(
            list_vets=[VetMapper.to_response(v) for v in paginated.content],
            current_page=page,
            total_pages=paginated.total_pages,
            total_items=paginated.total_elements,
        ),
    )


@router.get("/vets", response_model=VetsResponse)
def show_resources_vet_list(db: Session = Depends(get_db)):
    """Every vet in one payload, for programmatic clients."""
    vets = VetService.get_all_vets(db)
    return VetsResponse(vet_list=[VetMapper.to_response(v) for v in vets])


@router.get("/vets/new", response_model=ViewResponse[VetFormModel])
def init_creation_form():
    """Blank vet creation form"""
    return _vet_form_view(VetMapper.to_form_data())


@router.post("/vets/new", response_model=None)
def process_creation_form(
    payload: Dict[str, Any] = Body(default={}),
    db: Session = Depends(get_db),
) -> Union[ViewResponse[VetFormModel], RedirectResponse]:
    """Create a vet, or redisplay the form with field errors."""
    form, submitted, errors = VetMapper.bind_form(payload)
    if form is None:
        logger.info(f"Vet creation form rejected: {sorted(errors)}")
        return _vet_form_view(submitted, errors)

    vet = VetService.create_vet(db, form)
    return redirect_to(_vet_detail_path(vet.id))


@router.get("/vets/{vet_id}", response_model=ViewResponse[VetDetailModel])
def show_vet(vet_id: int, db: Session = Depends(get_db)):
    vet = VetService.get_vet(db, vet_id)
    return ViewResponse[VetDetailModel](
        view=VIEW_VET_DETAILS, model=VetDetailModel(vet=VetMapper.to_response(vet))
    )


@router.get("/vets/{vet_id}/edit", response_model=ViewResponse[VetFormModel])
def init_update_form(vet_id: int, db: Session = Depends(get_db)):
    """Vet form pre-filled with the stored names"""
    vet = VetService.get_vet(db, vet_id)
    return _vet_form_view(VetMapper.to_form_data(vet))


@router.post("/vets/{vet_id}/edit", response_model=None)
def process_update_form(
    vet_id: int,
    payload: Dict[str, Any] = Body(default={}),
    db: Session = Depends(get_db),
) -> Union[ViewResponse[VetFormModel], RedirectResponse]:
    """
    Update a vet's names.

    Only first_name and last_name are touched; nothing is written when both
    are unchanged.
    """
    form, submitted, errors = VetMapper.bind_form(payload, vet_id=vet_id)
    if form is None:
        logger.info(f"Vet {vet_id} edit form rejected: {sorted(errors)}")
        return _vet_form_view(submitted, errors)

    VetService.update_vet(db, vet_id, form)
    return redirect_to(_vet_detail_path(vet_id))


# ----------------------------------------------------------------------------
# Specialties
# ----------------------------------------------------------------------------


@router.get(
    "/vets/{vet_id}/specialty/new", response_model=ViewResponse[SpecialtyFormModel]
)
def init_specialty_form(vet_id: int, db: Session = Depends(get_db)):
    """Specialty selection form, listing every known specialty"""
    vet = VetService.get_vet(db, vet_id)
    specialties = VetService.get_specialties(db)
    return ViewResponse[SpecialtyFormModel](
        view=VIEW_ADD_SPECIALTY,
        model=SpecialtyFormModel(
            vet=VetMapper.to_response(vet),
            specialties=[SpecialtyResponse.model_validate(s) for s in specialties],
        ),
    )


@router.post("/vets/{vet_id}/specialty/new")
def process_specialty_form(
    vet_id: int, specialty_form: SpecialtyForm, db: Session = Depends(get_db)
):
    VetService.add_specialty(db, vet_id, specialty_form.specialty)
    return redirect_to(_vet_detail_path(vet_id))


@router.post("/vets/{vet_id}/specialty/{specialty_id}/delete")
def process_remove_specialty(
    vet_id: int, specialty_id: int, db: Session = Depends(get_db)
):
    VetService.remove_specialty(db, vet_id, specialty_id)
    return redirect_to(_vet_detail_path(vet_id))


# ----------------------------------------------------------------------------
# Available days
# ----------------------------------------------------------------------------


@router.get(
    "/vets/{vet_id}/available-day/new", response_model=ViewResponse[DayFormModel]
)
def init_available_day_form(vet_id: int, db: Session = Depends(get_db)):
    """Day selection form, listing every day of the week"""
    vet = VetService.get_vet(db, vet_id)
    days = VetService.get_days(db)
    return ViewResponse[DayFormModel](
        view=VIEW_ADD_AVAILABLE_DAY,
        model=DayFormModel(
            vet=VetMapper.to_response(vet),
            days=[DayResponse.model_validate(d) for d in days],
        ),
    )


@router.post("/vets/{vet_id}/available-day/new")
def process_available_day_form(
    vet_id: int, day_form: DayForm, db: Session = Depends(get_db)
):
    VetService.add_day(db, vet_id, day_form.day)
    return redirect_to(_vet_detail_path(vet_id))


@router.post("/vets/{vet_id}/available-day/{day_id}/delete")
def process_remove_available_day(
    vet_id: int, day_id: int, db: Session = Depends(get_db)
):
    VetService.remove_day(db, vet_id, day_id)
    return redirect_to(_vet_detail_path(vet_id))
