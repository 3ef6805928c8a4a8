"""Unit tests for the list filters."""

from datetime import datetime, timezone

import pytest

from intered.application.schemas import ApplicationResponse, StudentResponse, UniversityResponse
from intered.client.filters import (
    filter_applications,
    filter_students,
    filter_universities,
    search,
)


def _student(student_id: int, **fields) -> StudentResponse:
    data = {
        "id": student_id,
        "firstName": f"Student{student_id}",
        "lastName": "Test",
        "email": f"s{student_id}@example.com",
        "status": "active",
        "stage": "inquiry",
    }
    data.update(fields)
    return StudentResponse.model_validate(data)


@pytest.fixture
def students() -> list[StudentResponse]:
    return [
        _student(1, stage="visa", createdAt="2024-01-01T00:00:00Z"),
        _student(2, status="inactive", createdAt="2024-03-01T00:00:00Z", isHighPriority=True),
        _student(3, stage="enrollment", createdAt=None),
        _student(4, stage="alumni", createdAt="2024-03-01T00:00:00Z"),
        _student(5),
    ]


@pytest.mark.parametrize(
    "token,expected",
    [
        ("active", [1, 3, 4, 5]),
        ("inactive", [2]),
        ("high_priority", [2]),
        ("inquiry", [2, 5]),
        ("prospective", [1, 2, 5]),
        ("current", [3]),
        ("alumni", [4]),
    ],
)
def test_student_filters(students, token, expected):
    assert [s.id for s in filter_students(students, token)] == expected


def test_recently_added_is_newest_first_and_stable(students):
    # 2 and 4 share a timestamp and keep input order; missing timestamps sort last
    result = filter_students(students, "recently_added")
    assert [s.id for s in result][:3] == [2, 4, 1]
    assert result[-1].id in (3, 5)


@pytest.mark.parametrize("token", ["", None, "all", "no_such_filter"])
def test_unknown_token_returns_unfiltered_copy(students, token):
    result = filter_students(students, token)
    assert result == students
    assert result is not students


def test_filters_never_mutate_input(students):
    snapshot = list(students)
    filter_students(students, "recently_added")
    filter_students(students, "active")
    assert students == snapshot


def test_high_priority_of_empty_list():
    assert filter_students([], "high_priority") == []


def test_university_filters():
    universities = [
        UniversityResponse.model_validate({"id": i, "name": f"U{i}", "country": "UK", "tier": tier, "status": status})
        for i, (tier, status) in enumerate([("tier1", "active"), ("tier2", "inactive"), ("tier1", "pending")], 1)
    ]
    assert [u.id for u in filter_universities(universities, "tier1")] == [1, 3]
    assert [u.id for u in filter_universities(universities, "inactive")] == [2]
    assert len(filter_universities(universities, "tier9")) == 3


def test_application_filters():
    applications = [
        ApplicationResponse.model_validate(
            {"id": i, "studentId": 1, "universityId": 1, "programId": 1, "stage": stage,
             "status": "in_progress", "isHighPriority": i == 2}
        )
        for i, stage in enumerate(["under_review", "rejected", "under_review"], 1)
    ]
    assert [a.id for a in filter_applications(applications, "under_review")] == [1, 3]
    assert [a.id for a in filter_applications(applications, "high_priority")] == [2]


def test_search_matches_any_field_case_insensitively(students):
    full_name = lambda s: f"{s.first_name} {s.last_name}"  # noqa: E731
    assert [s.id for s in search(students, "student2 TEST", [full_name])] == [2]
    assert [s.id for s in search(students, "S4@EXAMPLE", ["email"])] == [4]
    assert search(students, "   ", ["email"]) == students


def test_created_at_is_parsed_timezone_aware(students):
    assert students[0].created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
