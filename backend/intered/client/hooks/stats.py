"""Stage-count queries for the dashboard."""

from typing import TYPE_CHECKING

from intered.client.query_client import QueryState

from .base import counts_fetcher
from .keys import APPLICATION_STAGE_COUNTS, STUDENT_STAGE_COUNTS

if TYPE_CHECKING:
    from intered.client.context import AppContext


def student_stage_counts_query(ctx: "AppContext"):
    return STUDENT_STAGE_COUNTS, counts_fetcher(ctx, STUDENT_STAGE_COUNTS)


def application_stage_counts_query(ctx: "AppContext"):
    return APPLICATION_STAGE_COUNTS, counts_fetcher(ctx, APPLICATION_STAGE_COUNTS)


async def use_student_stage_counts(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*student_stage_counts_query(ctx))


async def use_application_stage_counts(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*application_stage_counts_query(ctx))
