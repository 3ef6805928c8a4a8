"""Unit tests for the services that check references between entities."""

from datetime import date

import pytest

from fakes import (
    FakeAgentRepository,
    FakeApplicationRepository,
    FakeCardRepository,
    FakeEventRepository,
    FakeProgramRepository,
    FakeStudentRepository,
    FakeUniversityRepository,
)
from intered.application.schemas import (
    AgentCreate,
    AgentUpdate,
    ApplicationCreate,
    ApplicationUpdate,
    CardCreate,
    EventCreate,
    ProgramCreate,
    UniversityCreate,
    UniversityUpdate,
)
from intered.application.services import (
    AgentService,
    ApplicationService,
    CardService,
    EventService,
    StatsService,
    UniversityService,
)
from intered.domain.entities import ApplicationStage, Student, StudentStage
from intered.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidReferenceError,
)


@pytest.fixture
def repos() -> dict:
    return {
        "students": FakeStudentRepository(),
        "universities": FakeUniversityRepository(),
        "programs": FakeProgramRepository(),
        "agents": FakeAgentRepository(),
        "applications": FakeApplicationRepository(),
        "cards": FakeCardRepository(),
        "events": FakeEventRepository(),
    }


@pytest.fixture
def universities(repos) -> UniversityService:
    return UniversityService(repos["universities"], repos["programs"])


@pytest.fixture
def applications(repos) -> ApplicationService:
    return ApplicationService(
        repos["applications"],
        repos["students"],
        repos["universities"],
        repos["programs"],
        repos["agents"],
    )


async def _student(repos, email="amara@example.com", stage=StudentStage.INQUIRY) -> Student:
    return await repos["students"].create(Student(first_name="Amara", last_name="Okafor", email=email, stage=stage))


async def _university_with_program(universities: UniversityService):
    university = await universities.create_university(UniversityCreate(name="University of Leeds", country="United Kingdom"))
    program = await universities.create_program(
        ProgramCreate(name="MSc Data Science", university_id=university.id, level="Masters")
    )
    return university, program


# ── Universities & programs ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_university_update_and_delete(universities: UniversityService):
    created = await universities.create_university(UniversityCreate(name="Leeds", country="UK"))
    updated = await universities.update_university(created.id, UniversityUpdate(tier="tier1"))
    assert updated.tier.value == "tier1"
    assert updated.country == "UK"

    assert await universities.delete_university(created.id) is True
    with pytest.raises(EntityNotFoundError):
        await universities.get_university(created.id)


@pytest.mark.asyncio
async def test_program_requires_existing_university(universities: UniversityService):
    with pytest.raises(InvalidReferenceError) as exc_info:
        await universities.create_program(ProgramCreate(name="BSc", university_id=77, level="Bachelor"))
    assert exc_info.value.field == "universityId"


@pytest.mark.asyncio
async def test_programs_for_university(universities: UniversityService):
    university, program = await _university_with_program(universities)
    other = await universities.create_university(UniversityCreate(name="Other", country="UK"))
    await universities.create_program(ProgramCreate(name="BA", university_id=other.id, level="Bachelor"))

    listed = await universities.list_programs_for_university(university.id)
    assert [p.id for p in listed] == [program.id]


# ── Agents ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_agent_crud(repos):
    service = AgentService(repos["agents"])
    agent = await service.create_agent(AgentCreate(name="Global Pathways", email="gp@example.com"))
    assert agent.is_featured is False

    featured = await service.update_agent(agent.id, AgentUpdate(is_featured=True))
    assert featured.is_featured is True
    assert featured.email == "gp@example.com"

    await service.delete_agent(agent.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_agent(agent.id)


# ── Applications ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_application_checks_every_reference(repos, universities, applications):
    student = await _student(repos)
    university, program = await _university_with_program(universities)

    created = await applications.create_application(
        ApplicationCreate(student_id=student.id, university_id=university.id, program_id=program.id)
    )
    assert created.stage == ApplicationStage.DOCUMENT_COLLECTION

    with pytest.raises(InvalidReferenceError) as exc_info:
        await applications.create_application(
            ApplicationCreate(student_id=student.id, university_id=university.id, program_id=999)
        )
    assert exc_info.value.field == "programId"

    with pytest.raises(InvalidReferenceError) as exc_info:
        await applications.create_application(
            ApplicationCreate(
                student_id=student.id, university_id=university.id, program_id=program.id, agent_id=5
            )
        )
    assert exc_info.value.field == "agentId"


@pytest.mark.asyncio
async def test_blank_agent_placeholder_is_stored_as_null(repos, universities, applications):
    student = await _student(repos)
    university, program = await _university_with_program(universities)
    data = ApplicationCreate.model_validate(
        {"studentId": student.id, "universityId": university.id, "programId": program.id, "agentId": "none"}
    )
    created = await applications.create_application(data)
    assert created.agent_id is None


@pytest.mark.asyncio
async def test_application_update_and_stage_filter(repos, universities, applications):
    student = await _student(repos)
    university, program = await _university_with_program(universities)
    created = await applications.create_application(
        ApplicationCreate(student_id=student.id, university_id=university.id, program_id=program.id)
    )

    await applications.update_application(created.id, ApplicationUpdate(stage="conditional_offer"))

    assert [a.id for a in await applications.list_by_stage("conditional_offer")] == [created.id]
    assert await applications.list_by_stage("rejected") == []


@pytest.mark.asyncio
async def test_student_applications_carry_names(repos, universities, applications):
    student = await _student(repos)
    university, program = await _university_with_program(universities)
    await applications.create_application(
        ApplicationCreate(student_id=student.id, university_id=university.id, program_id=program.id)
    )

    enriched = await applications.list_for_student(student.id)
    assert len(enriched) == 1
    assert enriched[0].university_name == "University of Leeds"
    assert enriched[0].program_name == "MSc Data Science"


# ── Cards & events ──────────────────────────────────────────────────


def _card(student_id: int, number: str = "20230000000001") -> CardCreate:
    return CardCreate(student_id=student_id, card_number=number, expiry_date=date(2030, 1, 1))


@pytest.mark.asyncio
async def test_issue_card(repos):
    service = CardService(repos["cards"], repos["students"])
    student = await _student(repos)

    card = await service.issue_card(_card(student.id))
    assert card.plan.value == "standard"
    assert [c.id for c in await service.list_for_student(student.id)] == [card.id]


@pytest.mark.asyncio
async def test_issue_card_rejects_unknown_student_and_reused_number(repos):
    service = CardService(repos["cards"], repos["students"])
    student = await _student(repos)
    await service.issue_card(_card(student.id))

    with pytest.raises(InvalidReferenceError):
        await service.issue_card(_card(999, number="20230000000002"))
    with pytest.raises(DuplicateEntityError):
        await service.issue_card(_card(student.id))


@pytest.mark.asyncio
async def test_schedule_event(repos):
    service = EventService(repos["events"], repos["students"])
    student = await _student(repos)

    event = await service.schedule_event(
        EventCreate(title="Counseling Session with Amara", event_date=date(2030, 1, 1), student_id=student.id)
    )
    assert event.status.value == "scheduled"
    assert await service.list_for_student(student.id) == [event]

    with pytest.raises(InvalidReferenceError):
        await service.schedule_event(EventCreate(title="Orphan", event_date=date(2030, 1, 1), student_id=404))


@pytest.mark.asyncio
async def test_event_without_student(repos):
    service = EventService(repos["events"], repos["students"])
    event = await service.schedule_event(EventCreate(title="Open Day", event_date=date(2030, 5, 1)))
    assert event.student_id is None


# ── Stats ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_stage_counts_include_empty_stages(repos):
    await _student(repos, "a@example.com", StudentStage.VISA)
    await _student(repos, "b@example.com", StudentStage.VISA)
    await _student(repos, "c@example.com", StudentStage.ALUMNI)
    service = StatsService(repos["students"], repos["applications"])

    counts = await service.student_stage_counts()
    assert counts["visa"] == 2
    assert counts["alumni"] == 1
    assert counts["inquiry"] == 0
    assert set(counts) == {stage.value for stage in StudentStage}

    application_counts = await service.application_stage_counts()
    assert set(application_counts.values()) == {0}
