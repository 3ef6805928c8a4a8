"""Unit tests for the YAML demo data seeder."""

from pathlib import Path

import pytest

from fakes import (
    FakeAgentRepository,
    FakeProgramRepository,
    FakeStudentRepository,
    FakeUniversityRepository,
    FakeUserRepository,
    PlainHasher,
)
from intered.application.services import DemoDataSeeder

SEED_FILE = Path(__file__).resolve().parents[2] / "data" / "seed.yaml"


def _seeder(seed_file: Path, repos: dict) -> DemoDataSeeder:
    return DemoDataSeeder(
        seed_file=str(seed_file),
        user_repository=repos["users"],
        university_repository=repos["universities"],
        program_repository=repos["programs"],
        agent_repository=repos["agents"],
        student_repository=repos["students"],
        hasher=PlainHasher(),
    )


@pytest.fixture
def repos() -> dict:
    return {
        "users": FakeUserRepository(),
        "universities": FakeUniversityRepository(),
        "programs": FakeProgramRepository(),
        "agents": FakeAgentRepository(),
        "students": FakeStudentRepository(),
    }


@pytest.mark.asyncio
async def test_seed_file_loads_every_section(repos):
    created = await _seeder(SEED_FILE, repos).seed()

    assert created["users"] >= 1
    assert created["universities"] >= 1
    admin = await repos["users"].get_by_username("admin")
    assert admin is not None
    assert admin.password == "plain$admin123"
    assert admin.is_admin
    assert await repos["programs"].get_all()


@pytest.mark.asyncio
async def test_seeding_twice_adds_nothing(repos):
    await _seeder(SEED_FILE, repos).seed()
    users_before = await repos["users"].count()

    second = await _seeder(SEED_FILE, repos).seed()
    assert set(second.values()) == {0}
    assert await repos["users"].count() == users_before


@pytest.mark.asyncio
async def test_missing_seed_file(tmp_path, repos):
    assert await _seeder(tmp_path / "missing.yaml", repos).seed() == {}


@pytest.mark.asyncio
async def test_nested_programs_are_linked(tmp_path, repos):
    seed = tmp_path / "seed.yaml"
    seed.write_text(
        "universities:\n"
        "  - name: Test University\n"
        "    country: Canada\n"
        "    programs:\n"
        "      - name: BEng\n"
        "        level: Bachelor\n",
        encoding="utf-8",
    )
    await _seeder(seed, repos).seed()

    [university] = await repos["universities"].get_all()
    [program] = await repos["programs"].get_all()
    assert program.university_id == university.id
