"""Mutation wrapper: one HTTP write plus its toast and cache invalidation.

On success: a success toast, then the keys returned by ``invalidate`` are
invalidated (and observed queries refetched) before ``mutate`` returns. A
key under another returned prefix is covered by it and not invalidated twice.
On failure: exactly one destructive toast, the cache is left untouched,
and the call is not retried.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Generic, TypeVar

from .errors import ApiRequestError
from .notifications import ToastCenter
from .query_client import QueryClient, QueryKey, collapse_keys
from .result import Err, Ok

logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")

SuccessToast = Callable[[Any, Any], tuple[str, str]]
InvalidateKeys = Callable[[Any, Any], Iterable[QueryKey]]


def error_message(error: Exception, fallback: str) -> str:
    """The server-supplied message when there is one, else ``fallback``."""
    if isinstance(error, ApiRequestError):
        return error.message or fallback
    return str(error) or fallback


class Mutation(Generic[V, R]):
    def __init__(
        self,
        query_client: QueryClient,
        toasts: ToastCenter,
        mutation_fn: Callable[[V], Awaitable[R]],
        *,
        success_toast: SuccessToast | None = None,
        error_title: str = "Error",
        error_fallback: str = "Something went wrong",
        invalidate: InvalidateKeys | None = None,
        on_success: Callable[[R, V], None] | None = None,
    ):
        self._query_client = query_client
        self._toasts = toasts
        self._mutation_fn = mutation_fn
        self._success_toast = success_toast
        self._error_title = error_title
        self._error_fallback = error_fallback
        self._invalidate = invalidate
        self._on_success = on_success
        self._pending = 0

        self.data: R | None = None
        self.error: Exception | None = None

    @property
    def is_pending(self) -> bool:
        return self._pending > 0

    async def mutate(self, variables: V = None) -> Ok[R] | Err:
        self._pending += 1
        try:
            data = await self._mutation_fn(variables)
        except Exception as e:
            self.error = e
            message = error_message(e, self._error_fallback)
            logger.info("Mutation failed: %s", message)
            self._toasts.error(self._error_title, message)
            return Err(e)
        finally:
            self._pending -= 1

        self.data = data
        self.error = None

        if self._success_toast is not None:
            title, description = self._success_toast(data, variables)
            self._toasts.success(title, description)

        if self._invalidate is not None:
            for key in collapse_keys(self._invalidate(data, variables)):
                await self._query_client.invalidate_queries(key)

        if self._on_success is not None:
            self._on_success(data, variables)
        return Ok(data)

    def reset(self) -> None:
        self.data = None
        self.error = None
