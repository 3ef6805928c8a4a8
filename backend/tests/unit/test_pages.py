"""Unit tests for the page view models."""

import asyncio

import pytest

from client_fakes import FakeBackend, agent_json, application_json
from intered.application.schemas import StudentCreate
from intered.client.hooks import StudentMutations
from intered.client.hooks.keys import STUDENTS
from intered.client.pages import DashboardPage, StudentManagementPage


@pytest.fixture
def backend() -> FakeBackend:
    backend = FakeBackend()
    backend.add_student(1, first="Ana", stage="inquiry")
    backend.add_student(2, first="Ben", stage="enrollment", isHighPriority=True)
    backend.add_student(3, first="Cara", stage="alumni", status="inactive")
    backend.add_student(4, first="Dan", stage="visa", isHighPriority=True)
    return backend


@pytest.mark.asyncio
async def test_mount_fetches_and_unmount_releases(backend):
    async with backend.context() as ctx:
        page = StudentManagementPage(ctx)
        await page.mount()
        assert page.mounted
        assert len(page.students) == 4
        assert not page.is_loading

        page.unmount()
        await StudentMutations(ctx).create.mutate(
            StudentCreate(first_name="Eve", last_name="Stone", email="eve@example.com")
        )
        # no longer observed, so the list is only marked stale
        assert backend.count("GET", "/api/students") == 1
        assert len(page.students) == 4


@pytest.mark.asyncio
async def test_mutation_refreshes_mounted_page(backend):
    async with backend.context() as ctx:
        async with StudentManagementPage(ctx) as page:
            await StudentMutations(ctx).create.mutate(
                StudentCreate(first_name="Eve", last_name="Stone", email="eve@example.com")
            )
            assert len(page.students) == 5
            assert backend.count("GET", "/api/students") == 2


@pytest.mark.asyncio
async def test_result_arriving_after_unmount_is_ignored(backend):
    async with backend.context() as ctx:
        page = StudentManagementPage(ctx)
        backend.gate = asyncio.Event()
        mounting = asyncio.create_task(page.mount())
        await asyncio.sleep(0)

        page.unmount()
        backend.gate.set()
        await mounting

        assert page.data(STUDENTS) is None
        assert len(ctx.query_client.get_query_data(STUDENTS)) == 4


@pytest.mark.asyncio
async def test_failed_fetch_surfaces_error(backend):
    backend.fail_next("GET", "/api/students", status=500, body={"message": "boom"})
    backend.fail_next("GET", "/api/students", status=500, body={"message": "boom"})
    async with backend.context() as ctx:
        async with StudentManagementPage(ctx) as page:
            assert page.students == []
            assert page.errors[0].message == "boom"


@pytest.mark.asyncio
async def test_tabs_filter_and_search_compose(backend):
    async with backend.context() as ctx:
        async with StudentManagementPage(ctx) as page:
            page.set_tab("prospective")
            assert [s.first_name for s in page.students] == ["Ana", "Dan"]

            page.selected_filter = "high_priority"
            assert [s.first_name for s in page.students] == ["Dan"]

            page.selected_filter = "all"
            page.search_text = "ANA1@"
            assert [s.first_name for s in page.students] == ["Ana"]

            page.set_tab("alumni")
            page.search_text = ""
            assert [row.name for row in page.rows] == ["Cara Okafor"]
            assert page.rows[0].agent == "Unassigned"

            with pytest.raises(ValueError):
                page.set_tab("graduates")


@pytest.mark.asyncio
async def test_row_actions_open_dialogs(backend):
    opened = []
    async with backend.context() as ctx:
        async with StudentManagementPage(ctx) as page:
            student = page.students[0]
            menu = page.actions(student, open_dialog=opened.append)

            by_id = {entry.id: entry for entry in menu}
            assert "view" not in by_id
            by_id["issueCard"].select()
            assert opened[0].student_name == "Ana Okafor"

            await by_id["markAsPriority"].select()
            assert backend.students[1]["isHighPriority"] is True
            assert page.students[0].is_high_priority


@pytest.mark.asyncio
async def test_dashboard_counts(backend):
    backend.applications = [
        application_json(1, 1),
        application_json(2, 4, stage="conditional_offer"),
    ]
    backend.agents[1] = agent_json(1, "Alpha", createdAt="2024-01-01T00:00:00Z")
    backend.agents[2] = agent_json(2, "Beta", createdAt="2024-06-01T00:00:00Z")
    async with backend.context() as ctx:
        async with DashboardPage(ctx, agent_limit=1) as page:
            assert page.total_students == 4
            assert page.student_stage_counts["application"] == 0
            assert page.student_stage_counts["visa"] == 1
            assert page.application_stage_counts == {"document_collection": 1, "conditional_offer": 1}
            assert page.total_applications == 2
            assert page.high_priority_students == 2
            assert [a.id for a in page.recent_applications] == [2, 1]
            assert [a.name for a in page.newest_agents] == ["Beta"]
