"""In-memory repositories shared by the service tests."""

from intered.application.interfaces import (
    AgentRepository,
    ApplicationRepository,
    CardRepository,
    EventRepository,
    PasswordHasher,
    ProgramRepository,
    StudentRepository,
    UniversityRepository,
    UserRepository,
)


class _MemoryStore:
    def __init__(self):
        self._items: dict[int, object] = {}
        self._next_id = 1

    async def get_by_id(self, entity_id: int):
        return self._items.get(entity_id)

    async def get_all(self, skip: int = 0, limit: int = 1000):
        return list(self._items.values())[skip : skip + limit]

    async def create(self, entity):
        entity.id = self._next_id
        self._next_id += 1
        self._items[entity.id] = entity
        return entity

    async def update(self, entity):
        if entity.id not in self._items:
            raise ValueError(f"{entity.id} not found")
        self._items[entity.id] = entity
        return entity

    async def delete(self, entity_id: int) -> bool:
        return self._items.pop(entity_id, None) is not None


def _counts(items, attr: str) -> dict[str, int]:
    counts: dict[str, int] = {}
    for item in items:
        value = getattr(item, attr).value
        counts[value] = counts.get(value, 0) + 1
    return counts


class FakeStudentRepository(_MemoryStore, StudentRepository):
    async def get_by_stage(self, stage: str):
        return [s for s in self._items.values() if s.stage == stage]

    async def get_existing_emails(self) -> set[str]:
        return {s.email.lower() for s in self._items.values()}

    async def count_by_stage(self) -> dict[str, int]:
        return _counts(self._items.values(), "stage")


class FakeUniversityRepository(_MemoryStore, UniversityRepository):
    pass


class FakeProgramRepository(_MemoryStore, ProgramRepository):
    async def get_by_university(self, university_id: int):
        return [p for p in self._items.values() if p.university_id == university_id]


class FakeAgentRepository(_MemoryStore, AgentRepository):
    pass


class FakeApplicationRepository(_MemoryStore, ApplicationRepository):
    async def get_filtered(self, *, stage=None, student_id=None, university_id=None, program_id=None):
        result = []
        for a in self._items.values():
            if stage is not None and a.stage != stage:
                continue
            if student_id is not None and a.student_id != student_id:
                continue
            if university_id is not None and a.university_id != university_id:
                continue
            if program_id is not None and a.program_id != program_id:
                continue
            result.append(a)
        return result

    async def count_by_stage(self) -> dict[str, int]:
        return _counts(self._items.values(), "stage")


class FakeCardRepository(_MemoryStore, CardRepository):
    async def get_by_student(self, student_id: int):
        return [c for c in self._items.values() if c.student_id == student_id]

    async def get_by_card_number(self, card_number: str):
        return next((c for c in self._items.values() if c.card_number == card_number), None)


class FakeEventRepository(_MemoryStore, EventRepository):
    async def get_by_student(self, student_id: int):
        return [e for e in self._items.values() if e.student_id == student_id]


class FakeUserRepository(_MemoryStore, UserRepository):
    async def get_by_username(self, username: str):
        return next((u for u in self._items.values() if u.username == username), None)

    async def count(self) -> int:
        return len(self._items)


class PlainHasher(PasswordHasher):
    """Reversible "hash" so tests can assert on stored values."""

    def hash(self, password: str) -> str:
        return f"plain${password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"plain${password}"
