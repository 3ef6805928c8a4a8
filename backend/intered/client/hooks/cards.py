"""Card queries and the issue mutation."""

from typing import TYPE_CHECKING

from intered.application.schemas import CardResponse
from intered.client.mutations import Mutation
from intered.client.query_client import QueryState

from .base import list_fetcher, to_payload
from .keys import CARDS, STUDENTS, student_key

if TYPE_CHECKING:
    from intered.client.context import AppContext


def cards_query(ctx: "AppContext"):
    return CARDS, list_fetcher(ctx, CARDS, CardResponse)


async def use_cards(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*cards_query(ctx))


def issue_card_mutation(ctx: "AppContext", **options) -> Mutation:
    """POST /api/cards. ``options`` override the toast and callback defaults."""
    api = ctx.api

    async def issue(data) -> CardResponse:
        return CardResponse.model_validate(await api.request("POST", "/api/cards", to_payload(data)))

    options.setdefault(
        "success_toast",
        lambda c, _: ("Card issued", f"InterPro card {c.card_number} has been issued"),
    )
    options.setdefault("error_title", "Failed to issue card")
    options.setdefault("error_fallback", "An error occurred while issuing the card")
    options.setdefault("invalidate", lambda c, _: [CARDS, STUDENTS, student_key(c.student_id)])
    return Mutation(ctx.query_client, ctx.toasts, issue, **options)
