# =============================================================================
# File: mrgcar/seeds/base.py
# Purpose: Pieces shared by the seed scripts: dataset loading, outcome
#          counting and the command-line wrapper (exit code 1 on failure).
# =============================================================================
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import yaml

from mrgcar import db
from mrgcar.logger import setup_logging

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@dataclass
class SeedReport:
    inserted: int = 0
    updated: int = 0
    errors: int = 0

    @property
    def processed(self) -> int:
        return self.inserted + self.updated + self.errors


def load_dataset(filename: str, key: str) -> list[Any]:
    """Load ``mrgcar/data/<filename>`` and return the list stored under ``key``.

    Unlike a row failure, a missing or malformed dataset is fatal: the
    error propagates and the script exits with status 1.
    """
    path = DATA_DIR / filename
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    items = raw.get(key) if isinstance(raw, dict) else None
    if not isinstance(items, list):
        raise ValueError(f"{path.name}: '{key}' is not a list")
    return items


def print_report(report: SeedReport) -> None:
    print(f"   📥 Inserted: {report.inserted}")
    print(f"   🔄 Updated: {report.updated}")
    print(f"   ❌ Errors: {report.errors}")
    print(f"   📊 Total processed: {report.processed}")


def run_script(seed: Callable[[], Any], name: str) -> None:
    """Run a seed from the command line.

    Per-row errors are the seed's business; anything escaping it
    (no database, unreadable dataset...) ends the process with status 1.
    """
    setup_logging()
    try:
        seed()
    except Exception as exc:  # noqa: BLE001
        log.exception("%s failed", name)
        print(f"❌ {name} failed: {exc}")
        sys.exit(1)
    finally:
        db.engine.dispose()
