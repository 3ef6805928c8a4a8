"""Student queries and mutations."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from intered.application.schemas import StudentImportResult, StudentResponse
from intered.client.filters import filter_students
from intered.client.mutations import Mutation
from intered.client.query_client import QueryState

from .base import UpdateVariables, disabled_query, item_fetcher, list_fetcher, to_payload
from .keys import STUDENT_STAGE_COUNTS, STUDENTS, student_key

if TYPE_CHECKING:
    from intered.client.context import AppContext


@dataclass(frozen=True)
class PriorityToggle:
    id: int
    is_high_priority: bool


@dataclass(frozen=True)
class ImportFile:
    filename: str
    content: bytes
    content_type: str | None = None


def students_query(ctx: "AppContext"):
    return STUDENTS, list_fetcher(ctx, STUDENTS, StudentResponse)


def student_query(ctx: "AppContext", student_id: int):
    key = student_key(student_id)
    return key, item_fetcher(ctx, key, StudentResponse)


async def use_students(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*students_query(ctx))


async def use_student(ctx: "AppContext", student_id: int | None) -> QueryState:
    """Fetch one student; disabled while ``student_id`` is empty."""
    if not student_id:
        return disabled_query()
    return await ctx.query_client.fetch_query(*student_query(ctx, student_id))


async def use_filtered_students(ctx: "AppContext", token: str) -> QueryState:
    """The student list passed through ``filter_students``. The cache keeps the full list."""
    state = await use_students(ctx)
    return QueryState(
        data=filter_students(state.data or [], token),
        error=state.error,
        is_loading=state.is_loading,
        is_stale=state.is_stale,
        updated_at=state.updated_at,
    )


class StudentMutations:
    def __init__(self, ctx: "AppContext"):
        api = ctx.api
        qc, toasts = ctx.query_client, ctx.toasts

        async def create(data) -> StudentResponse:
            return StudentResponse.model_validate(await api.request("POST", "/api/students", to_payload(data)))

        async def update(variables: UpdateVariables) -> StudentResponse:
            payload = await api.request("PUT", f"/api/students/{variables.id}", to_payload(variables.data))
            return StudentResponse.model_validate(payload)

        async def delete(student_id: int) -> int:
            await api.request("DELETE", f"/api/students/{student_id}")
            return student_id

        async def toggle(variables: PriorityToggle) -> StudentResponse:
            payload = await api.request(
                "PUT", f"/api/students/{variables.id}", {"isHighPriority": variables.is_high_priority}
            )
            return StudentResponse.model_validate(payload)

        async def import_file(variables: ImportFile) -> StudentImportResult:
            payload = await api.upload(
                "/api/students/import",
                variables.filename,
                variables.content,
                content_type=variables.content_type,
            )
            return StudentImportResult.model_validate(payload)

        self.create = Mutation(
            qc, toasts, create,
            success_toast=lambda s, _: ("Student Created", "Student was created successfully"),
            error_fallback="Failed to create student",
            invalidate=lambda s, _: [STUDENTS, STUDENT_STAGE_COUNTS],
        )
        self.update = Mutation(
            qc, toasts, update,
            success_toast=lambda s, _: ("Student Updated", "Student was updated successfully"),
            error_fallback="Failed to update student",
            invalidate=lambda s, v: [STUDENTS, student_key(v.id), STUDENT_STAGE_COUNTS],
        )
        self.delete = Mutation(
            qc, toasts, delete,
            success_toast=lambda _, __: ("Student Deleted", "Student was deleted successfully"),
            error_fallback="Failed to delete student",
            invalidate=lambda sid, _: [STUDENTS, student_key(sid), STUDENT_STAGE_COUNTS],
        )
        self.toggle_priority = Mutation(
            qc, toasts, toggle,
            success_toast=_priority_toast,
            error_fallback="Failed to update student priority",
            invalidate=lambda s, v: [STUDENTS, student_key(v.id)],
        )
        self.import_students = Mutation(
            qc, toasts, import_file,
            success_toast=lambda r, _: ("Import Successful", f"Successfully imported {r.imported} students"),
            error_title="Import Failed",
            error_fallback="Failed to import students",
            invalidate=lambda r, _: [STUDENTS, STUDENT_STAGE_COUNTS],
        )


def _priority_toast(student: StudentResponse, _) -> tuple[str, str]:
    name = f"{student.first_name} {student.last_name}"
    if student.is_high_priority:
        return "Marked as Priority", f"Student {name} was marked as priority"
    return "Priority Removed", f"Student {name} was removed from priority"


def use_student_mutations(ctx: "AppContext") -> StudentMutations:
    return StudentMutations(ctx)
