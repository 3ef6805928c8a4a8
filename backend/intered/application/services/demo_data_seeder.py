"""Demo data seeder: loads users, universities, agents and students from YAML.

Executed once at application startup via the FastAPI lifespan. Each
section is only applied when its table is empty, so restarting the app
never duplicates rows.
"""

import logging
from pathlib import Path

import yaml

from intered.application.interfaces import (
    AgentRepository,
    PasswordHasher,
    ProgramRepository,
    StudentRepository,
    UniversityRepository,
    UserRepository,
)
from intered.application.schemas import (
    AgentCreate,
    ProgramCreate,
    StudentCreate,
    UniversityCreate,
    UserCreate,
)
from intered.domain.entities import Agent, Program, Student, University, User

logger = logging.getLogger(__name__)


class DemoDataSeeder:
    """Seeds empty tables from a YAML file. Entries are validated with the API schemas."""

    def __init__(
        self,
        seed_file: str,
        user_repository: UserRepository,
        university_repository: UniversityRepository,
        program_repository: ProgramRepository,
        agent_repository: AgentRepository,
        student_repository: StudentRepository,
        hasher: PasswordHasher,
    ):
        self._seed_file = Path(seed_file)
        self._users = user_repository
        self._universities = university_repository
        self._programs = program_repository
        self._agents = agent_repository
        self._students = student_repository
        self._hasher = hasher

    async def seed(self) -> dict[str, int]:
        """Apply every section of the seed file. Returns rows created per section."""
        data = self._load_yaml()
        if data is None:
            return {}

        created = {
            "users": await self._seed_users(data.get("users") or []),
            "universities": await self._seed_universities(data.get("universities") or []),
            "agents": await self._seed_agents(data.get("agents") or []),
            "students": await self._seed_students(data.get("students") or []),
        }
        logger.info(
            "Demo data seeding complete: %s",
            ", ".join(f"{name}={count}" for name, count in created.items()),
        )
        return created

    async def _seed_users(self, entries: list[dict]) -> int:
        if await self._users.count() > 0:
            logger.debug("Users already exist, skipping")
            return 0

        for entry in entries:
            data = UserCreate.model_validate(entry)
            await self._users.create(
                User(
                    username=data.username,
                    password=self._hasher.hash(data.password),
                    full_name=data.full_name,
                    email=data.email,
                    role=data.role,
                )
            )
        return len(entries)

    async def _seed_universities(self, entries: list[dict]) -> int:
        if await self._universities.get_all(limit=1):
            logger.debug("Universities already exist, skipping")
            return 0

        for entry in entries:
            programs = entry.get("programs") or []
            fields = {k: v for k, v in entry.items() if k != "programs"}
            university = await self._universities.create(
                University(**UniversityCreate.model_validate(fields).model_dump())
            )
            for program in programs:
                data = ProgramCreate.model_validate({**program, "universityId": university.id})
                await self._programs.create(Program(**data.model_dump()))
        return len(entries)

    async def _seed_agents(self, entries: list[dict]) -> int:
        if await self._agents.get_all(limit=1):
            logger.debug("Agents already exist, skipping")
            return 0

        for entry in entries:
            await self._agents.create(Agent(**AgentCreate.model_validate(entry).model_dump()))
        return len(entries)

    async def _seed_students(self, entries: list[dict]) -> int:
        if await self._students.get_all(limit=1):
            logger.debug("Students already exist, skipping")
            return 0

        for entry in entries:
            await self._students.create(Student(**StudentCreate.model_validate(entry).model_dump()))
        return len(entries)

    def _load_yaml(self) -> dict | None:
        if not self._seed_file.exists():
            logger.warning("Seed file not found: %s", self._seed_file)
            return None
        with open(self._seed_file, encoding="utf-8") as f:
            return yaml.safe_load(f)
