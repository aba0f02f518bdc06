# guardshift/seed/seed_data.py
"""
Seed demo data for GuardShift.
ALWAYS clears users + shifts + events and inserts fresh data.

Run: python -m guardshift.seed.seed_data  (or the guardshift-seed script)
"""

import logging
import sys
from datetime import date, datetime, timedelta

from guardshift.db import close_db, get_db
from guardshift.models import Event, User
from guardshift.scheduler import generate_shifts, summarize_shifts
from guardshift.security import hash_password

logger = logging.getLogger(__name__)

ADMIN_PASSWORD = "admin123"
GUARD_PASSWORD = "guard123"

ADMIN = {"name": "Administrador del Sistema", "email": "admin@security.com"}

GUARDS = [
    {"name": "Juan Pérez",     "email": "juan.perez@security.com"},
    {"name": "María López",    "email": "maria.lopez@security.com"},
    {"name": "Carlos García",  "email": "carlos.garcia@security.com"},
    {"name": "Ana Fernández",  "email": "ana.fernandez@security.com"},
    {"name": "Luis Rodríguez", "email": "luis.rodriguez@security.com"},
]

EVENTS = [
    (7,  "Security Training", "Mandatory monthly training for all security staff"),
    (14, "Emergency Drill",   "Evacuation drill and emergency procedures review"),
    (21, "Monthly Meeting",   "Monthly coordination meeting and procedures review"),
]

COLLECTIONS = ("users", "shifts", "events")


def clear_database(db):
    for name in COLLECTIONS:
        db[name].delete_many({})
    logger.info("Database cleared (%s)", ", ".join(COLLECTIONS))


def seed_users(db, salt_rounds=None):
    """Insert the admin and the guard roster; returns (admin_id, [guard_ids])."""
    users = db["users"]

    admin = User(**ADMIN, password=hash_password(ADMIN_PASSWORD, salt_rounds), role="admin")
    admin_id = users.insert_one(admin.model_dump()).inserted_id

    guards = [User(**g, password=hash_password(GUARD_PASSWORD, salt_rounds), role="guard") for g in GUARDS]
    guard_ids = list(users.insert_many([g.model_dump() for g in guards]).inserted_ids)

    logger.info("✅ Users created: 1 admin, %d guards", len(guard_ids))
    return admin_id, guard_ids


def seed_shifts(db, guard_ids, reference_date=None, rng=None):
    shifts = generate_shifts(guard_ids, reference_date or date.today(), rng=rng)
    if shifts:
        db["shifts"].insert_many([s.to_document() for s in shifts])
    logger.info("✅ %d shifts created for the current month", len(shifts))

    summary = summarize_shifts(shifts)
    if not summary.empty:
        logger.info("Shift summary per guard:\n%s", summary.to_string())
    return shifts


def seed_events(db, admin_id, now=None):
    now = now or datetime.now()
    events = [
        Event(title=title, date=now + timedelta(days=days), description=desc, createdBy=admin_id)
        for days, title, desc in EVENTS
    ]
    db["events"].insert_many([e.model_dump() for e in events])
    logger.info("✅ %d events created", len(events))
    return events


def seed_database(db=None):
    """
    connect -> clear -> users -> shifts -> events -> disconnect.
    Any failure aborts the run; returns the process exit code.
    """
    owns_connection = db is None
    try:
        if owns_connection:
            db = get_db()
            logger.info("Connected to MongoDB (%s)", db.name)

        clear_database(db)
        admin_id, guard_ids = seed_users(db)
        seed_shifts(db, guard_ids)
        seed_events(db, admin_id)
    except Exception:
        logger.exception("❌ Error seeding the database")
        return 1
    finally:
        if owns_connection:
            close_db()

    logger.info("✅ Database seeded")
    logger.info("🔑 Credentials:")
    logger.info("   Admin: %s / %s", ADMIN["email"], ADMIN_PASSWORD)
    logger.info("   Guards: [name]@security.com / %s", GUARD_PASSWORD)
    return 0


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    sys.exit(seed_database())


if __name__ == "__main__":
    main()
