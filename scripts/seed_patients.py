"""
scripts/seed_patients.py — CLI entry point for loading sample patients.

Usage:
    python scripts/seed_patients.py
    python scripts/seed_patients.py --create-schema
    DATABASE_URL=sqlite+aiosqlite:///./patients.db python scripts/seed_patients.py --create-schema
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from patient_registry.db.seed import seed_patients
from patient_registry.db.session import AsyncSessionLocal, engine, init_models

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


async def _run(create_schema: bool) -> None:
    if create_schema:
        await init_models()
        logger.info("Schema created")

    async with AsyncSessionLocal() as session:
        patients = await seed_patients(session)
        await session.commit()

    for p in patients:
        logger.info("  id=%-4d %-15s age=%d  %s", p.id, p.name, p.age, p.email)
    logger.info("Seeded %d patients", len(patients))
    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Load sample patients into the database.")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding (instead of running Alembic).",
    )
    args = parser.parse_args()
    asyncio.run(_run(args.create_schema))


if __name__ == "__main__":
    main()
