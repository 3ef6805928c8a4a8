"""Unit tests for the student workflow dialogs."""

import asyncio
import random
from datetime import date, datetime

import pytest

from client_fakes import FakeBackend, agent_json
from intered.client import DialogStateError
from intered.client.dialogs import (
    AssignAgentDialog,
    DialogState,
    ImportStudentsDialog,
    IssueCardDialog,
    ScheduleEventDialog,
    generate_card_number,
    is_spreadsheet,
    one_year_from,
)
from intered.client.dialogs.schedule_event import event_title
from intered.domain.entities import CardPlan, EventType


@pytest.fixture
def backend() -> FakeBackend:
    backend = FakeBackend()
    backend.add_student(1, first="Ana", last="Lopez")
    backend.agents[5] = agent_json(5, "Study Bridge")
    return backend


def _fixed_today():
    return date(2024, 3, 10)


# ── Helpers ──────────────────────────────────────────────────────────


def test_generated_card_number_has_prefix_and_ten_digits():
    number = generate_card_number(random.Random(7))
    assert number.startswith("2023")
    assert len(number) == 14
    assert number.isdigit()


def test_one_year_from_leap_day():
    assert one_year_from(date(2024, 2, 29)) == date(2025, 2, 28)
    assert one_year_from(date(2024, 3, 10)) == date(2025, 3, 10)


def test_event_title_per_type():
    assert event_title(EventType.INTERVIEW, "Ana Lopez") == "University Interview with Ana Lopez"
    assert event_title("other", "Ana Lopez") == "Student Meeting with Ana Lopez"


def test_is_spreadsheet():
    assert is_spreadsheet("students.csv")
    assert is_spreadsheet("students.XLSX")
    assert is_spreadsheet("s.xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
    assert is_spreadsheet("s.csv", "application/octet-stream")
    assert is_spreadsheet("s.csv", "application/vnd.ms-excel")
    assert is_spreadsheet("s.csv", "text/csv; charset=utf-8")
    assert not is_spreadsheet("blob", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
    assert not is_spreadsheet("students.xls")
    assert not is_spreadsheet("students.xls", "application/vnd.ms-excel")
    assert not is_spreadsheet("notes.pdf")
    assert not is_spreadsheet("students.csv", "application/pdf")


# ── State machine ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_fields_locked_while_closed(backend):
    async with backend.context() as ctx:
        dialog = IssueCardDialog(ctx, 1, "Ana Lopez", today=_fixed_today)
        assert dialog.state == DialogState.CLOSED
        with pytest.raises(DialogStateError):
            dialog.set("card_number", "2023")
        with pytest.raises(DialogStateError):
            await dialog.submit()


@pytest.mark.asyncio
async def test_open_resets_form(backend):
    async with backend.context() as ctx:
        dialog = IssueCardDialog(ctx, 1, "Ana Lopez", today=_fixed_today)
        dialog.open()
        dialog.set("card_number", "20230000000001")
        dialog.set("plan", CardPlan.PREMIUM)
        dialog.close()
        dialog.open()
        assert dialog.card_number == ""
        assert dialog.plan == CardPlan.STANDARD
        assert dialog.expiry_date == date(2025, 3, 10)


@pytest.mark.asyncio
async def test_unknown_field_rejected(backend):
    async with backend.context() as ctx:
        dialog = IssueCardDialog(ctx, 1, "Ana Lopez")
        dialog.open()
        with pytest.raises(AttributeError):
            dialog.set("colour", "blue")


@pytest.mark.asyncio
async def test_validation_failure_toasts_without_request(backend):
    async with backend.context() as ctx:
        dialog = IssueCardDialog(ctx, 1, "Ana Lopez", today=_fixed_today)
        dialog.open()

        result = await dialog.submit()

        assert result is None
        assert dialog.state == DialogState.IDLE
        assert ctx.toasts.destructive[-1].title == "Card number required"
        assert backend.count("POST", "/api/cards") == 0


@pytest.mark.asyncio
async def test_issue_card_success_closes_and_notifies(backend):
    seen = []
    async with backend.context() as ctx:
        dialog = IssueCardDialog(ctx, 1, "Ana Lopez", on_success=seen.append, today=_fixed_today)
        dialog.open()
        dialog.generate(random.Random(1))

        result = await dialog.submit()

        assert result.ok
        assert dialog.state == DialogState.CLOSED
        assert seen[0].card_number == dialog.card_number
        assert backend.cards[0]["expiryDate"] == "2025-03-10"
        assert ctx.toasts.toasts[-1].description == "InterPro card has been issued to Ana Lopez."


@pytest.mark.asyncio
async def test_issue_card_conflict_moves_to_error_and_can_retry(backend):
    backend.cards.append({"id": 1, "studentId": 1, "cardNumber": "20231111111111"})
    async with backend.context() as ctx:
        dialog = IssueCardDialog(ctx, 1, "Ana Lopez", today=_fixed_today)
        dialog.open()
        dialog.set("card_number", "20231111111111")

        result = await dialog.submit()

        assert not result.ok
        assert dialog.state == DialogState.ERROR
        assert dialog.error == "Card number already issued"
        assert ctx.toasts.destructive[-1].title == "Failed to issue card"

        dialog.set("card_number", "20232222222222")
        assert (await dialog.submit()).ok
        assert dialog.state == DialogState.CLOSED


@pytest.mark.asyncio
async def test_second_submit_while_submitting_is_rejected(backend):
    async with backend.context() as ctx:
        dialog = IssueCardDialog(ctx, 1, "Ana Lopez", today=_fixed_today)
        dialog.open()
        dialog.set("card_number", "20230000000009")

        backend.gate = asyncio.Event()
        task = asyncio.create_task(dialog.submit())
        await asyncio.sleep(0)

        assert dialog.is_disabled
        with pytest.raises(DialogStateError):
            await dialog.submit()
        with pytest.raises(DialogStateError):
            dialog.close()

        backend.gate.set()
        assert (await task).ok
        assert backend.count("POST", "/api/cards") == 1


# ── Schedule event ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_schedule_event_defaults_and_submit(backend):
    now = datetime(2024, 5, 1, 9, 30)
    async with backend.context() as ctx:
        dialog = ScheduleEventDialog(ctx, 1, "Ana Lopez", now=lambda: now)
        dialog.open()
        assert (dialog.start_time, dialog.end_time) == ("09:30", "10:30")

        dialog.set("event_type", EventType.ORIENTATION)
        assert dialog.generate_title() == "Orientation Meeting with Ana Lopez"

        result = await dialog.submit()

        assert result.ok
        assert backend.events[0]["eventDate"] == "2024-05-01"
        assert backend.events[0]["studentId"] == 1
        assert ctx.toasts.toasts[-1].title == "Event scheduled"


@pytest.mark.asyncio
async def test_schedule_event_requires_title(backend):
    async with backend.context() as ctx:
        dialog = ScheduleEventDialog(ctx, 1, "Ana Lopez")
        dialog.open()
        dialog.set("title", "   ")
        assert await dialog.submit() is None
        assert ctx.toasts.destructive[-1].title == "Event title required"


# ── Assign agent ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_assign_agent_loads_choices_only_when_open(backend):
    async with backend.context() as ctx:
        dialog = AssignAgentDialog(ctx, 1, "Ana Lopez")
        assert (await dialog.load_agents()).data is None
        assert backend.count("GET", "/api/agents") == 0

        dialog.open()
        agents = (await dialog.load_agents()).data
        assert [a.name for a in agents] == ["Study Bridge"]


@pytest.mark.asyncio
async def test_assign_agent_puts_agent_id(backend):
    async with backend.context() as ctx:
        dialog = AssignAgentDialog(ctx, 1, "Ana Lopez")
        dialog.open()
        assert await dialog.submit() is None
        assert ctx.toasts.destructive[-1].title == "Please select an agent"

        dialog.set("agent_id", 5)
        result = await dialog.submit()

        assert result.ok
        assert backend.students[1]["agent"] == "Study Bridge"
        assert ctx.toasts.toasts[-1].title == "Agent assigned"


@pytest.mark.asyncio
async def test_assign_unknown_agent_reports_server_message(backend):
    async with backend.context() as ctx:
        dialog = AssignAgentDialog(ctx, 1, "Ana Lopez")
        dialog.open()
        dialog.set("agent_id", 99)
        result = await dialog.submit()
        assert not result.ok
        assert dialog.state == DialogState.ERROR
        assert "unknown Agent" in dialog.error


# ── Import ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_import_refuses_non_spreadsheet(backend):
    async with backend.context() as ctx:
        dialog = ImportStudentsDialog(ctx)
        dialog.open()
        assert not dialog.choose_file("cv.pdf", b"%PDF", "application/pdf")
        assert ctx.toasts.destructive[-1].title == "Invalid File Type"
        assert await dialog.submit() is None
        assert ctx.toasts.destructive[-1].title == "No file selected"


@pytest.mark.asyncio
async def test_import_refuses_legacy_excel_without_upload(backend):
    async with backend.context() as ctx:
        dialog = ImportStudentsDialog(ctx)
        dialog.open()
        assert not dialog.choose_file("students.xls", b"\xd0\xcf\x11\xe0", "application/vnd.ms-excel")
        assert ctx.toasts.destructive[-1].title == "Invalid File Type"
        assert dialog.file is None
        assert backend.count("POST", "/api/students/import") == 0


@pytest.mark.asyncio
async def test_import_keeps_result_counts(backend):
    async with backend.context() as ctx:
        dialog = ImportStudentsDialog(ctx)
        dialog.open()
        assert dialog.choose_file("students.csv", b"firstName,lastName,email\n", "text/csv")

        result = await dialog.submit()

        assert result.ok
        assert dialog.state == DialogState.CLOSED
        assert dialog.last_result.imported == 8
        assert dialog.last_result.skipped == 2
        assert backend.count("POST", "/api/students/import") == 1
