# =============================================================================
# File: mrgcar/seeds/cars_turkish.py
# Purpose: Upsert the Turkish-market catalogue (data/cars_turkish.yml) into
#          the cars table, same (make, model, variant) key as seed_cars.
# Usage:   python -m mrgcar.seeds.cars_turkish
# =============================================================================
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from mrgcar.db import SessionLocal
from mrgcar.models import Car

from .base import SeedReport, load_dataset, print_report, run_script
from .cars import upsert_car

log = logging.getLogger(__name__)

CARS_TURKISH_FILE = "cars_turkish.yml"
DEFAULT_BODY_TYPE = "Sedan"

# the mobile app reads these keys as-is (camelCase included)
DATA_KEYS = (
    "year", "price", "summary", "style", "trim", "specifications",
    "imageUrls", "performanceData", "efficiencyData",
)


def build_turkish_data(car: dict) -> dict:
    return {key: car.get(key) for key in DATA_KEYS}


def seed_cars_turkish(cars: list[Any] | None = None) -> SeedReport:
    print("🚗 Starting Turkish car seed...")
    if cars is None:
        cars = load_dataset(CARS_TURKISH_FILE, "cars")
    print(f"📊 Found {len(cars)} Turkish cars")

    report = SeedReport()
    with SessionLocal() as s:
        for car in cars:
            if not isinstance(car, dict):
                log.warning("Skipping malformed car record: %r", car)
                report.errors += 1
                continue

            make = car.get("make")
            model = car.get("model")
            variant = car.get("trim_and_style") or ""
            body_type = (car.get("vehicle") or {}).get("body_type") or DEFAULT_BODY_TYPE

            try:
                inserted = upsert_car(s, make, model, variant, body_type, build_turkish_data(car))
                s.commit()
            except SQLAlchemyError as exc:
                s.rollback()
                log.error("Error with %s %s: %s", make, model, exc)
                report.errors += 1
                continue

            if inserted:
                report.inserted += 1
                print(f"📥 Inserted: {make} {model}")
            else:
                report.updated += 1
                print(f"🔄 Updated: {make} {model}")

        print("\n✅ Turkish car seed completed!")
        print_report(report)
        total = s.query(func.count(Car.id)).scalar()
        print(f"\n📈 Total cars in DB: {total}")

    return report


def main() -> None:
    run_script(seed_cars_turkish, "Turkish car seed")


if __name__ == "__main__":
    main()
