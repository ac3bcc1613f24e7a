"""
tests/unit/test_patient_repository.py — PatientRepository against an in-memory SQLite database.

Each test builds its own engine inside a single event loop so the aiosqlite
connection never crosses loops.
"""
from __future__ import annotations

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from patient_registry.db.models import Patient
from patient_registry.db.repository import PatientRepository
from patient_registry.db.seed import seed_patients
from patient_registry.db.session import build_engine, init_models


def run_with_repo(scenario):
    """Run ``scenario(repo, session)`` against a fresh schema and return its result."""

    async def _main():
        engine = build_engine("sqlite+aiosqlite://")
        try:
            await init_models(engine)
            factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
            async with factory() as session:
                return await scenario(PatientRepository(session), session)
        finally:
            await engine.dispose()

    return asyncio.run(_main())


class TestPatientRepository:
    def test_save_assigns_sequential_ids(self):
        async def scenario(repo, session):
            return [p.id for p in await seed_patients(session)]

        assert run_with_repo(scenario) == [1, 2, 3]

    def test_find_all_in_insertion_order(self):
        async def scenario(repo, session):
            await seed_patients(session)
            return [p.name for p in await repo.find_all()]

        assert run_with_repo(scenario) == ["Pepe Argento", "Juan Castro", "Felipe Melo"]

    def test_find_all_empty(self):
        async def scenario(repo, session):
            return list(await repo.find_all())

        assert run_with_repo(scenario) == []

    def test_find_by_id(self):
        async def scenario(repo, session):
            await seed_patients(session)
            return await repo.find_by_id(2), await repo.find_by_id(99)

        found, missing = run_with_repo(scenario)
        assert found.name == "Juan Castro"
        assert missing is None

    def test_save_with_id_overwrites_row(self):
        async def scenario(repo, session):
            await seed_patients(session)
            await repo.save(Patient(id=1, name="Pedro Argento", age=48, email="pepe@gmail.com"))
            session.expunge_all()
            return await repo.find_by_id(1), len(await repo.find_all())

        stored, count = run_with_repo(scenario)
        assert (stored.name, stored.age) == ("Pedro Argento", 48)
        assert count == 3

    def test_delete_by_id(self):
        async def scenario(repo, session):
            await seed_patients(session)
            await repo.delete_by_id(2)
            await repo.delete_by_id(99)  # no match is silent
            return [p.id for p in await repo.find_all()]

        assert run_with_repo(scenario) == [1, 3]
