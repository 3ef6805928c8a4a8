"""Event queries and the schedule mutation."""

from typing import TYPE_CHECKING

from intered.application.schemas import EventResponse
from intered.client.mutations import Mutation
from intered.client.query_client import QueryState

from .base import list_fetcher, to_payload
from .keys import EVENTS, STUDENTS, student_key

if TYPE_CHECKING:
    from intered.client.context import AppContext


def events_query(ctx: "AppContext"):
    return EVENTS, list_fetcher(ctx, EVENTS, EventResponse)


async def use_events(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*events_query(ctx))


def _touched(event: EventResponse, _) -> list[tuple]:
    keys = [EVENTS]
    if event.student_id is not None:
        keys += [STUDENTS, student_key(event.student_id)]
    return keys


def schedule_event_mutation(ctx: "AppContext", **options) -> Mutation:
    api = ctx.api

    async def schedule(data) -> EventResponse:
        return EventResponse.model_validate(await api.request("POST", "/api/events", to_payload(data)))

    options.setdefault(
        "success_toast",
        lambda e, _: ("Event scheduled", f"{e.title} on {e.event_date.isoformat()}"),
    )
    options.setdefault("error_title", "Failed to schedule event")
    options.setdefault("error_fallback", "An error occurred while scheduling the event")
    options.setdefault("invalidate", _touched)
    return Mutation(ctx.query_client, ctx.toasts, schedule, **options)
