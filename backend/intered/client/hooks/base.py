"""Shared helpers for the per-entity query and mutation wrappers."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

from intered.client.query_client import Fetcher, QueryKey, QueryState, key_to_url

if TYPE_CHECKING:
    from intered.client.context import AppContext

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class UpdateVariables:
    """Partial update of one record: only the keys in ``data`` are sent."""

    id: int
    data: Any = field(default_factory=dict)


def to_payload(data: Any) -> Any:
    """Pydantic models go out camelCased with unset fields dropped; dicts as-is."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return data


def list_fetcher(ctx: "AppContext", key: QueryKey, schema: type[M]) -> Fetcher:
    url = key_to_url(key)

    async def fetch() -> list[M]:
        payload = await ctx.api.get(url) or []
        return [schema.model_validate(item) for item in payload]

    return fetch


def item_fetcher(ctx: "AppContext", key: QueryKey, schema: type[M]) -> Fetcher:
    url = key_to_url(key)

    async def fetch() -> M | None:
        payload = await ctx.api.get(url)
        return schema.model_validate(payload) if payload is not None else None

    return fetch


def counts_fetcher(ctx: "AppContext", key: QueryKey) -> Fetcher:
    url = key_to_url(key)

    async def fetch() -> dict[str, int]:
        payload = await ctx.api.get(url) or {}
        return {str(k): int(v) for k, v in payload.items()}

    return fetch


def disabled_query() -> QueryState:
    """State returned when a query is not enabled (e.g. no id yet)."""
    return QueryState(is_stale=False)
