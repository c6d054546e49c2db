"""
Vet-related database models.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from domain.models.database import Base


vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column(
        "vet_id",
        Integer,
        ForeignKey("vets.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "specialty_id",
        Integer,
        ForeignKey("specialties.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

vet_available_days = Table(
    "vet_available_days",
    Base.metadata,
    Column(
        "vet_id",
        Integer,
        ForeignKey("vets.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "day_id",
        Integer,
        ForeignKey("days.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Specialty(Base):
    """Skill area a vet can be assigned to (shared reference data)"""

    __tablename__ = "specialties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(80), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Specialty id={self.id} name={self.name!r}>"


class Day(Base):
    """Day of the week a vet can be available on (shared reference data)"""

    __tablename__ = "days"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(80), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Day id={self.id} name={self.name!r}>"


class Vet(Base):
    """Veterinarian record"""

    __tablename__ = "vets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)

    # Set collections: the same Specialty/Day can only be held once
    specialties = relationship(
        "Specialty", secondary=vet_specialties, collection_class=set
    )
    available_days = relationship(
        "Day", secondary=vet_available_days, collection_class=set
    )

    def add_specialty(self, specialty: Specialty) -> bool:
        """Add a specialty; returns False when it was already assigned."""
        if specialty in self.specialties:
            return False
        self.specialties.add(specialty)
        return True

    def remove_specialty(self, specialty: Specialty) -> bool:
        """Remove a specialty; returns False when it was not assigned."""
        if specialty not in self.specialties:
            return False
        self.specialties.discard(specialty)
        return True

    def add_day(self, day: Day) -> bool:
        if day in self.available_days:
            return False
        self.available_days.add(day)
        return True

    def remove_day(self, day: Day) -> bool:
        if day not in self.available_days:
            return False
        self.available_days.discard(day)
        return True

    @property
    def sorted_specialties(self) -> list:
        return sorted(self.specialties, key=lambda s: s.name)

    @property
    def sorted_days(self) -> list:
        return sorted(self.available_days, key=lambda d: d.id)

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)

    def __repr__(self) -> str:
        return f"<Vet id={self.id} name={self.first_name!r} {self.last_name!r}>"
