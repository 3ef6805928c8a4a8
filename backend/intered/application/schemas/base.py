"""Shared base for DTOs: camelCase on the wire, snake_case in Python."""

from typing import Any, ClassVar

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

_EMPTY_MARKERS = frozenset({"", "none", "null"})


class CamelModel(BaseModel):
    """Base for every request/response schema exchanged with the dashboard."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class PartialUpdate(CamelModel):
    """Base for update bodies: every field optional, only sent fields apply.

    Fields listed in ``non_nullable`` back NOT NULL columns. They may be
    left out of the body but not sent as an explicit null.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name in cls.non_nullable:
            raise PydanticCustomError("null_not_allowed", "may not be null")
        return value


def blank_to_none(value: Any) -> Any:
    """Map form placeholders ("none", empty string) to None.

    Select inputs in the dashboard submit the literal "none" for an unset
    relation; those must be stored as null.
    """
    if isinstance(value, str) and value.strip().lower() in _EMPTY_MARKERS:
        return None
    return value
