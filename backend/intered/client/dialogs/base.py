"""Form dialog state machine shared by the student workflow dialogs.

    closed --open()--> idle --submit()--> submitting --ok--> closed
                                               |
                                               +--err--> error --submit()--> submitting

Fields can only be edited, and the form submitted, while the dialog is
idle or in error. A failed client-side check leaves the state unchanged.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from intered.client.errors import DialogStateError
from intered.client.mutations import Mutation
from intered.client.result import Err, Ok

if TYPE_CHECKING:
    from intered.client.context import AppContext

logger = logging.getLogger(__name__)


class DialogState(str, Enum):
    CLOSED = "closed"
    IDLE = "idle"
    SUBMITTING = "submitting"
    ERROR = "error"


_EDITABLE = (DialogState.IDLE, DialogState.ERROR)


class FormDialog:
    """Base class: subclasses build ``self.mutation`` and implement the hooks."""

    name = "dialog"

    def __init__(self, ctx: "AppContext", on_success: Callable[[Any], None] | None = None):
        self.ctx = ctx
        self.on_success = on_success
        self.state = DialogState.CLOSED
        self.error: str | None = None
        self.mutation: Mutation = self._build_mutation()

    @property
    def is_open(self) -> bool:
        return self.state != DialogState.CLOSED

    @property
    def is_disabled(self) -> bool:
        return self.state == DialogState.SUBMITTING

    def open(self) -> None:
        if self.state == DialogState.SUBMITTING:
            raise DialogStateError(self.name, self.state.value, "open")
        self.reset()
        self.error = None
        self.state = DialogState.IDLE

    def close(self) -> None:
        if self.state == DialogState.SUBMITTING:
            raise DialogStateError(self.name, self.state.value, "close")
        self.state = DialogState.CLOSED

    def set(self, field: str, value: Any) -> None:
        """Assign one form field."""
        self._require_editable(f"edit {field}")
        if not hasattr(self, field) or field.startswith("_"):
            raise AttributeError(f"{self.name} has no field {field!r}")
        setattr(self, field, value)

    async def submit(self) -> Ok | Err | None:
        """Validate, then run the mutation. Returns None when validation fails."""
        self._require_editable("submit")
        problem = self.validate()
        if problem is not None:
            title, description = problem
            self.ctx.toasts.error(title, description)
            return None

        try:
            variables = self.variables()
        except ValidationError as e:
            self.ctx.toasts.error("Invalid data", e.errors()[0]["msg"])
            return None

        self.state = DialogState.SUBMITTING
        self.error = None
        result = await self.mutation.mutate(variables)
        if isinstance(result, Err):
            self.state = DialogState.ERROR
            self.error = result.message
            return result

        self.state = DialogState.CLOSED
        self.after_success(result.value)
        if self.on_success is not None:
            self.on_success(result.value)
        return result

    def _require_editable(self, action: str) -> None:
        if self.state not in _EDITABLE:
            raise DialogStateError(self.name, self.state.value, action)

    # Subclass hooks

    def _build_mutation(self) -> Mutation:
        raise NotImplementedError

    def reset(self) -> None:
        """Restore the form fields to their defaults."""

    def validate(self) -> tuple[str, str] | None:
        """Return a (title, description) toast for invalid input, else None."""
        return None

    def variables(self) -> Any:
        raise NotImplementedError

    def after_success(self, data: Any) -> None:
        pass
