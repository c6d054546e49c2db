from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from app.config import settings
from app.exceptions import NotFoundError
from domain.models import Vet, Specialty, Day
from domain.schemas.vet_schemas import VetForm
from repositories import Page, VetRepository

logger = logging.getLogger("vetclinic.vets")


class VetService:
    @staticmethod
    def get_vet_page(
        db: Session, page: int, page_size: Optional[int] = None
    ) -> Page[Vet]:
        """
        Get one page of vets for the list view.

        Args:
            db: Database session
            page: 1-based page number, validated by the route
            page_size: vets per page, defaults to the configured page size

        Returns:
            Page[Vet]: the requested page; empty when past the last page
        """
        size = page_size or settings.vets_page_size
        return VetRepository(db).get_page(page - 1, size)

    @staticmethod
    def get_all_vets(db: Session) -> List[Vet]:
        return VetRepository(db).get_all()

    @staticmethod
    def get_vet(db: Session, vet_id: int) -> Vet:
        vet = VetRepository(db).get_by_id(vet_id)
        if not vet:
            raise NotFoundError(f"Vet {vet_id} not found", details={"vet_id": vet_id})
        return vet

    @staticmethod
    def get_specialties(db: Session) -> List[Specialty]:
        return VetRepository(db).get_specialties()

    @staticmethod
    def get_days(db: Session) -> List[Day]:
        return VetRepository(db).get_days()

    @staticmethod
    def create_vet(db: Session, form: VetForm) -> Vet:
        """Persist a new vet with no specialties and no available days."""
        vet = Vet(first_name=form.first_name, last_name=form.last_name)
        saved = VetService._save(db, vet)
        logger.info(f"Created vet {saved.id} ({saved.first_name} {saved.last_name})")
        return saved

    @staticmethod
    def update_vet(db: Session, vet_id: int, form: VetForm) -> Tuple[Vet, bool]:
        """
        Apply edited names to a vet.

        The vet is only written when the first or last name actually changed;
        specialties and days are left as they are.

        Returns:
            Tuple of (vet, changed_flag)

        Raises:
            NotFoundError: If the vet does not exist
        """
        vet = VetService.get_vet(db, vet_id)
        if vet.first_name == form.first_name and vet.last_name == form.last_name:
            logger.debug(f"Vet {vet_id} unchanged; skipping save")
            return vet, False

        vet.first_name = form.first_name
        vet.last_name = form.last_name
        saved = VetService._save(db, vet)
        logger.info(f"Updated vet {vet_id} names")
        return saved, True

    @staticmethod
    def add_specialty(db: Session, vet_id: int, specialty_name: str) -> Vet:
        """
        Assign a specialty (looked up by name) to a vet.

        Adding a specialty the vet already has is a no-op.

        Raises:
            NotFoundError: If the vet or the specialty does not exist
        """
        repo = VetRepository(db)
        vet = VetService.get_vet(db, vet_id)
        specialty = repo.get_specialty_by_name(specialty_name)
        if not specialty:
            raise NotFoundError(
                f"Specialty '{specialty_name}' not found",
                details={"specialty": specialty_name},
            )

        if not vet.add_specialty(specialty):
            logger.debug(f"Vet {vet_id} already has specialty {specialty.name}")
            return vet
        saved = VetService._save(db, vet)
        logger.info(f"Added specialty {specialty.name} to vet {vet_id}")
        return saved

    @staticmethod
    def remove_specialty(db: Session, vet_id: int, specialty_id: int) -> Vet:
        """
        Unassign a specialty (looked up by id) from a vet.

        Removing a specialty the vet does not have leaves the vet untouched.

        Raises:
            NotFoundError: If the vet or the specialty does not exist
        """
        repo = VetRepository(db)
        vet = VetService.get_vet(db, vet_id)
        specialty = repo.get_specialty_by_id(specialty_id)
        if not specialty:
            raise NotFoundError(
                f"Specialty {specialty_id} not found",
                details={"specialty_id": specialty_id},
            )

        if not vet.remove_specialty(specialty):
            logger.debug(f"Vet {vet_id} has no specialty {specialty.name}")
            return vet
        saved = VetService._save(db, vet)
        logger.info(f"Removed specialty {specialty.name} from vet {vet_id}")
        return saved

    @staticmethod
    def add_day(db: Session, vet_id: int, day_name: str) -> Vet:
        """Mark a vet available on a day (looked up by name); idempotent."""
        repo = VetRepository(db)
        vet = VetService.get_vet(db, vet_id)
        day = repo.get_day_by_name(day_name)
        if not day:
            raise NotFoundError(
                f"Day '{day_name}' not found", details={"day": day_name}
            )

        if not vet.add_day(day):
            logger.debug(f"Vet {vet_id} already available on {day.name}")
            return vet
        saved = VetService._save(db, vet)
        logger.info(f"Added available day {day.name} to vet {vet_id}")
        return saved

    @staticmethod
    def remove_day(db: Session, vet_id: int, day_id: int) -> Vet:
        """Remove an available day (looked up by id) from a vet; idempotent."""
        repo = VetRepository(db)
        vet = VetService.get_vet(db, vet_id)
        day = repo.get_day_by_id(day_id)
        if not day:
            raise NotFoundError(f"Day {day_id} not found", details={"day_id": day_id})

        if not vet.remove_day(day):
            logger.debug(f"Vet {vet_id} not available on {day.name}")
            return vet
        saved = VetService._save(db, vet)
        logger.info(f"Removed available day {day.name} from vet {vet_id}")
        return saved

    @staticmethod
    def _save(db: Session, vet: Vet) -> Vet:
        try:
            return VetRepository(db).save(vet)
        except Exception:
            db.rollback()
            logger.exception("Error saving vet %s", vet.id)
            raise
