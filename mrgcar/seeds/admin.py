# =============================================================================
# File: mrgcar/seeds/admin.py
# Purpose: Create the admin account, or reset its password when it exists.
# Usage:   ADMIN_EMAIL=... ADMIN_PASSWORD=... python -m mrgcar.seeds.admin
# =============================================================================
from __future__ import annotations

import logging

from sqlalchemy import func
from werkzeug.security import generate_password_hash

from mrgcar import db
from mrgcar.config import DEFAULT_ADMIN_PASSWORD, get_settings
from mrgcar.models import AdminUser

from .base import run_script

log = logging.getLogger(__name__)


def seed_admin(email: str | None = None, password: str | None = None) -> bool:
    """Upsert the admin user keyed on email. Return True when it was created."""
    settings = get_settings()
    email = (email or settings.admin_email).strip().lower()
    password = password or settings.admin_password
    if not password:
        log.warning("ADMIN_PASSWORD is not set, using the default password. Change it after login.")
        password = DEFAULT_ADMIN_PASSWORD

    print("🔐 Admin user seeding started...")
    print(f"📧 Email: {email}")

    # the table may predate migrations on older databases
    AdminUser.__table__.create(bind=db.engine, checkfirst=True)

    password_hash = generate_password_hash(password)
    with db.SessionLocal() as s:
        existing = s.query(AdminUser).filter_by(email=email).first()
        if existing is not None:
            print("⚠️  Admin user already exists. Updating password...")
            existing.password_hash = password_hash
            existing.updated_at = func.now()
            s.commit()
            print("✅ Admin password updated!")
            created = False
        else:
            s.add(AdminUser(email=email, password_hash=password_hash, role="admin"))
            s.commit()
            print("✅ Admin user created!")
            created = True

    print("\n🎉 Seed completed successfully!")
    print(f"   Login: {email}")
    return created


def main() -> None:
    run_script(seed_admin, "Admin seed")


if __name__ == "__main__":
    main()
