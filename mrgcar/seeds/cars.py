# =============================================================================
# File: mrgcar/seeds/cars.py
# Purpose: Load data/cars.yml and upsert every record into the cars table,
#          keyed on (make, model, variant).
# Usage:   python -m mrgcar.seeds.cars   (needs DATABASE_URL)
# =============================================================================
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mrgcar.db import SessionLocal
from mrgcar.models import Car

from .base import SeedReport, load_dataset, print_report, run_script

log = logging.getLogger(__name__)

CARS_FILE = "cars.yml"

# style keyword -> body type, first match wins
STYLE_BODY_TYPES = [
    (("suv",), "SUV"),
    (("sedan",), "Sedan"),
    (("coupe",), "Coupe"),
    (("wagon",), "Wagon"),
    (("hatchback",), "Hatchback"),
    (("truck", "pickup"), "Pickup"),
    (("van",), "Van"),
    (("convertible",), "Convertible"),
]

DATA_KEYS = (
    "year", "price", "summary", "style", "trim", "vehicle", "dimensions",
    "specifications", "engine", "fuel_economy", "safety", "warranty",
)


def flatten_cars(records: list[Any]) -> list[dict]:
    """Exports sometimes wrap the list once or twice: [[...]] or [[[...]]]."""
    if records and isinstance(records[0], list):
        if records[0] and isinstance(records[0][0], list):
            return records[0][0]
        return records[0]
    return records


def extract_body_type(car: dict) -> str | None:
    vehicle = car.get("vehicle") or {}
    body_type = vehicle.get("body_type") if isinstance(vehicle, dict) else None
    if isinstance(body_type, str) and body_type.strip():
        return body_type

    style = (car.get("style") or "").lower()
    if style:
        for keywords, label in STYLE_BODY_TYPES:
            if any(k in style for k in keywords):
                return label
    return None


def build_data(car: dict) -> dict:
    """Everything that is not a column goes into the JSON ``data`` document."""
    return {key: car[key] for key in DATA_KEYS if car.get(key)}


def upsert_car(
    s: Session, make: str, model: str, variant: str, body_type: str | None, data: dict
) -> bool:
    """Insert or refresh one car. Return True when a new row was inserted.

    The caller commits; status is only set on insert.
    """
    row = s.query(Car).filter_by(make=make, model=model, variant=variant).first()
    if row is None:
        s.add(
            Car(
                make=make,
                model=model,
                variant=variant,
                body_type=body_type,
                status="published",
                data=data,
            )
        )
        s.flush()
        return True

    row.body_type = body_type
    row.data = data
    row.updated_at = func.now()
    return False


def seed_cars(cars: list[Any] | None = None) -> SeedReport:
    print("🚗 Starting car seed...")
    if cars is None:
        cars = load_dataset(CARS_FILE, "cars")
    cars = flatten_cars(cars)
    print(f"📊 Found {len(cars)} cars in data source")

    report = SeedReport()
    with SessionLocal() as s:
        for car in cars:
            if not isinstance(car, dict):
                log.warning("Skipping malformed car record: %r", car)
                report.errors += 1
                continue

            make = car.get("make") or car.get("brand")
            model = car.get("model")
            # '' keeps the (make, model, variant) constraint meaningful
            variant = car.get("trim_and_style") or car.get("trim") or ""

            if not make or not model:
                log.warning("Skipping car without make/model: %r", car)
                report.errors += 1
                continue

            try:
                inserted = upsert_car(s, make, model, variant, extract_body_type(car), build_data(car))
                s.commit()
            except SQLAlchemyError as exc:
                s.rollback()
                log.error("Error with %s %s: %s", make, model, exc)
                report.errors += 1
                continue

            if inserted:
                report.inserted += 1
                print(f"📥 Inserted: {make} {model} {variant}".rstrip())
            else:
                report.updated += 1
                print(f"🔄 Updated: {make} {model} {variant}".rstrip())

        print("\n✅ Seed completed!")
        print_report(report)
        total = s.query(func.count(Car.id)).scalar()
        print(f"\n📈 Total cars in DB: {total}")

    return report


def main() -> None:
    run_script(seed_cars, "Car seed")


if __name__ == "__main__":
    main()
