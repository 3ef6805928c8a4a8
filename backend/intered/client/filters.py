"""List filters for the management pages.

Every filter takes the unfiltered list and a token and returns a new list.
The input is never mutated and an unrecognised token yields an unfiltered
copy.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from intered.domain.entities import (
    ApplicationStage,
    StudentStage,
    StudentStatus,
    UniversityStatus,
    UniversityTier,
)

T = TypeVar("T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_PROSPECTIVE_STAGES = frozenset(
    {StudentStage.INQUIRY, StudentStage.APPLICATION, StudentStage.OFFER, StudentStage.VISA}
)


def _created_at(item: Any) -> datetime:
    value = getattr(item, "created_at", None)
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _where(predicate: Callable[[Any], bool]) -> Callable[[Sequence[T]], list[T]]:
    return lambda items: [item for item in items if predicate(item)]


def newest_first(items: Sequence[T]) -> list[T]:
    # sorted() is stable, so equal timestamps keep their input order
    return sorted(items, key=_created_at, reverse=True)


_STUDENT_FILTERS: dict[str, Callable[[Sequence[Any]], list[Any]]] = {
    "active": _where(lambda s: s.status == StudentStatus.ACTIVE),
    "inactive": _where(lambda s: s.status == StudentStatus.INACTIVE),
    "recently_added": newest_first,
    "high_priority": _where(lambda s: s.is_high_priority),
    "inquiry": _where(lambda s: s.stage == StudentStage.INQUIRY),
    "prospective": _where(lambda s: s.stage in _PROSPECTIVE_STAGES),
    "current": _where(lambda s: s.stage == StudentStage.ENROLLMENT),
    "alumni": _where(lambda s: s.stage == StudentStage.ALUMNI),
}

_UNIVERSITY_FILTERS: dict[str, Callable[[Sequence[Any]], list[Any]]] = {
    "active": _where(lambda u: u.status == UniversityStatus.ACTIVE),
    "inactive": _where(lambda u: u.status == UniversityStatus.INACTIVE),
    **{tier.value: _where(lambda u, tier=tier: u.tier == tier) for tier in UniversityTier},
}

_APPLICATION_FILTERS: dict[str, Callable[[Sequence[Any]], list[Any]]] = {
    "high_priority": _where(lambda a: a.is_high_priority),
    **{stage.value: _where(lambda a, stage=stage: a.stage == stage) for stage in ApplicationStage},
}

STUDENT_FILTER_TOKENS = tuple(_STUDENT_FILTERS)
UNIVERSITY_FILTER_TOKENS = tuple(_UNIVERSITY_FILTERS)
APPLICATION_FILTER_TOKENS = tuple(_APPLICATION_FILTERS)


def _apply(table: dict, items: Sequence[T], token: str | None) -> list[T]:
    apply = table.get(token or "")
    if apply is None:
        return list(items)
    return apply(items)


def filter_students(students: Sequence[T], token: str | None) -> list[T]:
    return _apply(_STUDENT_FILTERS, students, token)


def filter_universities(universities: Sequence[T], token: str | None) -> list[T]:
    return _apply(_UNIVERSITY_FILTERS, universities, token)


def filter_applications(applications: Sequence[T], token: str | None) -> list[T]:
    return _apply(_APPLICATION_FILTERS, applications, token)


def search(
    items: Sequence[T],
    text: str | None,
    fields: Iterable[str | Callable[[Any], Any]],
) -> list[T]:
    """Case-insensitive substring match of ``text`` against any of ``fields``.

    A field is an attribute name or a function of the item, e.g.
    ``lambda s: f"{s.first_name} {s.last_name}"``. Blank search text
    matches everything.
    """
    needle = (text or "").strip().lower()
    fields = tuple(fields)
    if not needle:
        return list(items)

    def matches(item: Any) -> bool:
        for name in fields:
            value = name(item) if callable(name) else getattr(item, name, None)
            if value is not None and needle in str(value).lower():
                return True
        return False

    return [item for item in items if matches(item)]
