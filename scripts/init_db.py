#!/usr/bin/env python3
"""
Initialize the VetClinic database
Creates tables and optionally seeds specialties, week days and sample vets
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Dict

from sqlalchemy.orm import Session

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.models import Vet, Specialty, Day  # noqa: E402

logger = logging.getLogger("init_db")

SPECIALTIES = ["radiology", "surgery", "dentistry"]

DAYS = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]

# (first_name, last_name, specialties)
SAMPLE_VETS = [
    ("James", "Carter", []),
    ("Helen", "Leary", ["radiology"]),
    ("Linda", "Douglas", ["surgery", "dentistry"]),
    ("Rafael", "Ortega", ["surgery"]),
    ("Henry", "Stevens", ["radiology"]),
    ("Sharon", "Jenkins", []),
]


def seed(db: Session, with_vets: bool = True) -> Dict[str, int]:
    """
    Insert reference data that is missing. Safe to run repeatedly.

    Returns:
        Dict with how many specialties, days and vets were inserted
    """
    inserted = {"specialties": 0, "days": 0, "vets": 0}

    specialties = {s.name: s for s in db.query(Specialty).all()}
    for name in SPECIALTIES:
        if name not in specialties:
            specialties[name] = Specialty(name=name)
            db.add(specialties[name])
            inserted["specialties"] += 1

    existing_days = {d.name for d in db.query(Day).all()}
    for name in DAYS:
        if name not in existing_days:
            db.add(Day(name=name))
            inserted["days"] += 1

    if with_vets and db.query(Vet).count() == 0:
        for first_name, last_name, vet_specialties in SAMPLE_VETS:
            vet = Vet(first_name=first_name, last_name=last_name)
            for name in vet_specialties:
                vet.add_specialty(specialties[name])
            db.add(vet)
            inserted["vets"] += 1

    db.commit()
    return inserted


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Create and seed the VetClinic database"
    )
    parser.add_argument(
        "--no-seed", action="store_true", help="Only create tables, insert no data"
    )
    parser.add_argument(
        "--no-vets", action="store_true", help="Seed reference data but no sample vets"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from domain.models.database import SessionLocal, engine, init_database
    from sqlalchemy import inspect

    try:
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"✓ Tables ready: {', '.join(tables)}")

        if args.no_seed:
            return 0

        with SessionLocal() as db:
            counts = seed(db, with_vets=not args.no_vets)
        logger.info(
            "✓ Seeded %d specialties, %d days, %d vets",
            counts["specialties"],
            counts["days"],
            counts["vets"],
        )
        return 0
    except Exception as e:
        logger.exception(f"✗ Failed to initialize database: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
