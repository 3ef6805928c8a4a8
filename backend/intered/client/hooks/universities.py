"""University and program queries and mutations."""

from typing import TYPE_CHECKING

from intered.application.schemas import ProgramResponse, UniversityResponse
from intered.client.mutations import Mutation
from intered.client.query_client import QueryState

from .base import UpdateVariables, disabled_query, item_fetcher, list_fetcher, to_payload
from .keys import PROGRAMS, UNIVERSITIES, university_key, university_programs_key

if TYPE_CHECKING:
    from intered.client.context import AppContext


def universities_query(ctx: "AppContext"):
    return UNIVERSITIES, list_fetcher(ctx, UNIVERSITIES, UniversityResponse)


async def use_universities(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*universities_query(ctx))


async def use_university(ctx: "AppContext", university_id: int | None) -> QueryState:
    if not university_id:
        return disabled_query()
    key = university_key(university_id)
    return await ctx.query_client.fetch_query(key, item_fetcher(ctx, key, UniversityResponse))


async def use_programs(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(PROGRAMS, list_fetcher(ctx, PROGRAMS, ProgramResponse))


async def use_university_programs(ctx: "AppContext", university_id: int | None) -> QueryState:
    if not university_id:
        return disabled_query()
    key = university_programs_key(university_id)
    return await ctx.query_client.fetch_query(key, list_fetcher(ctx, key, ProgramResponse))


class UniversityMutations:
    def __init__(self, ctx: "AppContext"):
        api = ctx.api
        qc, toasts = ctx.query_client, ctx.toasts

        async def create(data) -> UniversityResponse:
            return UniversityResponse.model_validate(
                await api.request("POST", "/api/universities", to_payload(data))
            )

        async def update(variables: UpdateVariables) -> UniversityResponse:
            payload = await api.request(
                "PUT", f"/api/universities/{variables.id}", to_payload(variables.data)
            )
            return UniversityResponse.model_validate(payload)

        async def delete(university_id: int) -> int:
            await api.request("DELETE", f"/api/universities/{university_id}")
            return university_id

        async def create_program(data) -> ProgramResponse:
            return ProgramResponse.model_validate(
                await api.request("POST", "/api/programs", to_payload(data))
            )

        self.create = Mutation(
            qc, toasts, create,
            success_toast=lambda u, _: ("University Created", f"{u.name} was added"),
            error_title="University creation failed",
            error_fallback="Failed to create university",
            invalidate=lambda u, _: [UNIVERSITIES],
        )
        self.update = Mutation(
            qc, toasts, update,
            success_toast=lambda u, _: ("University Updated", f"{u.name} was updated"),
            error_title="University update failed",
            error_fallback="Failed to update university",
            invalidate=lambda u, v: [UNIVERSITIES, university_key(v.id)],
        )
        self.delete = Mutation(
            qc, toasts, delete,
            success_toast=lambda _, __: ("University Deleted", "University was deleted successfully"),
            error_title="University deletion failed",
            error_fallback="Failed to delete university",
            invalidate=lambda uid, _: [UNIVERSITIES, university_key(uid), university_programs_key(uid)],
        )
        self.create_program = Mutation(
            qc, toasts, create_program,
            success_toast=lambda p, _: ("Program Created", f"{p.name} was added"),
            error_title="Program creation failed",
            error_fallback="Failed to create program",
            invalidate=lambda p, _: [PROGRAMS, university_programs_key(p.university_id)],
        )


def use_university_mutations(ctx: "AppContext") -> UniversityMutations:
    return UniversityMutations(ctx)
