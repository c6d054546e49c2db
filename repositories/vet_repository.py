"""
Vet Repository - Data access layer for vets and their reference data
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository, Page, id_in_range
from domain.models import Vet, Specialty, Day


class VetRepository(BaseRepository[Vet]):
    """Repository for vet data access, including specialty and day lookups"""

    def __init__(self, db: Session):
        super().__init__(db, Vet)

    def _vets_query(self):
        return (
            self.db.query(Vet)
            .options(selectinload(Vet.specialties), selectinload(Vet.available_days))
            .order_by(Vet.id)
        )

    def get_by_id(self, vet_id: int) -> Optional[Vet]:
        """Get vet by ID with specialties and days loaded"""
        if not id_in_range(vet_id):
            return None
        return self._vets_query().filter(Vet.id == vet_id).first()

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Vet]:
        """Get vets ordered by id; every vet unless a limit is given"""
        query = self._vets_query().offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_page(self, page: int, size: int) -> Page[Vet]:
        """
        Get one page of vets.

        Args:
            page: 0-based page index
            size: page size

        Returns:
            Page with the vets of that page (empty past the last page)
        """
        total = self.count()
        if page * size >= total:
            # Past the last page; the offset may not even fit the column type
            return Page(content=[], number=page, size=size, total_elements=total)
        content = self._vets_query().offset(page * size).limit(size).all()
        return Page(content=content, number=page, size=size, total_elements=total)

    def get_specialties(self) -> List[Specialty]:
        """All known specialties, ordered by name"""
        return self.db.query(Specialty).order_by(Specialty.name).all()

    def get_specialty_by_id(self, specialty_id: int) -> Optional[Specialty]:
        if not id_in_range(specialty_id):
            return None
        return self.db.get(Specialty, specialty_id)

    def get_specialty_by_name(self, name: str) -> Optional[Specialty]:
        return (
            self.db.query(Specialty)
            .filter(func.lower(Specialty.name) == name.lower())
            .first()
        )

    def get_days(self) -> List[Day]:
        """All known days, in week order"""
        return self.db.query(Day).order_by(Day.id).all()

    def get_day_by_id(self, day_id: int) -> Optional[Day]:
        if not id_in_range(day_id):
            return None
        return self.db.get(Day, day_id)

    def get_day_by_name(self, name: str) -> Optional[Day]:
        return (
            self.db.query(Day)
            .filter(func.lower(Day.name) == name.lower())
            .first()
        )
