"""Application queries and mutations."""

from typing import TYPE_CHECKING

from intered.application.schemas import ApplicationResponse, StudentApplicationResponse
from intered.client.mutations import Mutation
from intered.client.query_client import QueryState

from .base import UpdateVariables, disabled_query, item_fetcher, list_fetcher, to_payload
from .keys import (
    APPLICATION_STAGE_COUNTS,
    APPLICATIONS,
    application_key,
    student_applications_key,
)

if TYPE_CHECKING:
    from intered.client.context import AppContext


def applications_query(ctx: "AppContext"):
    return APPLICATIONS, list_fetcher(ctx, APPLICATIONS, ApplicationResponse)


async def use_applications(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*applications_query(ctx))


async def use_application(ctx: "AppContext", application_id: int | None) -> QueryState:
    if not application_id:
        return disabled_query()
    key = application_key(application_id)
    return await ctx.query_client.fetch_query(key, item_fetcher(ctx, key, ApplicationResponse))


async def use_student_applications(ctx: "AppContext", student_id: int | None) -> QueryState:
    """Applications of one student, with university and program names."""
    if not student_id:
        return disabled_query()
    key = student_applications_key(student_id)
    return await ctx.query_client.fetch_query(key, list_fetcher(ctx, key, StudentApplicationResponse))


def _touched(application: ApplicationResponse, application_id: int) -> list[tuple]:
    return [
        APPLICATIONS,
        application_key(application_id),
        student_applications_key(application.student_id),
        APPLICATION_STAGE_COUNTS,
    ]


class ApplicationMutations:
    def __init__(self, ctx: "AppContext"):
        api = ctx.api
        qc, toasts = ctx.query_client, ctx.toasts

        async def create(data) -> ApplicationResponse:
            return ApplicationResponse.model_validate(
                await api.request("POST", "/api/applications", to_payload(data))
            )

        async def update(variables: UpdateVariables) -> ApplicationResponse:
            payload = await api.request(
                "PUT", f"/api/applications/{variables.id}", to_payload(variables.data)
            )
            return ApplicationResponse.model_validate(payload)

        async def delete(application_id: int) -> int:
            await api.request("DELETE", f"/api/applications/{application_id}")
            return application_id

        self.create = Mutation(
            qc, toasts, create,
            success_toast=lambda a, _: ("Application Created", "Application was created successfully"),
            error_fallback="Failed to create application",
            invalidate=lambda a, _: _touched(a, a.id),
        )
        self.update = Mutation(
            qc, toasts, update,
            success_toast=lambda a, _: ("Application Updated", "Application was updated successfully"),
            error_fallback="Failed to update application",
            invalidate=lambda a, v: _touched(a, v.id),
        )
        # The student of a deleted application is unknown here; the prefix covers all of them.
        self.delete = Mutation(
            qc, toasts, delete,
            success_toast=lambda _, __: ("Application Deleted", "Application was deleted successfully"),
            error_fallback="Failed to delete application",
            invalidate=lambda aid, _: [
                APPLICATIONS,
                application_key(aid),
                ("/api/applications/student",),
                APPLICATION_STAGE_COUNTS,
            ],
        )


def use_application_mutations(ctx: "AppContext") -> ApplicationMutations:
    return ApplicationMutations(ctx)
