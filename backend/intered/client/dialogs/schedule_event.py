"""Schedule an event with one student."""

from datetime import datetime, timedelta

from intered.application.schemas import EventCreate
from intered.client.hooks.events import schedule_event_mutation
from intered.domain.entities import EventStatus, EventType

from .base import FormDialog

EVENT_TITLES = {
    EventType.COUNSELING: "Counseling Session",
    EventType.ORIENTATION: "Orientation Meeting",
    EventType.DOCUMENT: "Document Verification",
    EventType.INTERVIEW: "University Interview",
    EventType.WORKSHOP: "Workshop Session",
    EventType.OTHER: "Student Meeting",
}


def event_title(event_type: EventType, student_name: str) -> str:
    return f"{EVENT_TITLES[EventType(event_type)]} with {student_name}"


class ScheduleEventDialog(FormDialog):
    name = "schedule_event"

    def __init__(self, ctx, student_id: int, student_name: str, on_success=None, *, now=datetime.now):
        self.student_id = student_id
        self.student_name = student_name
        self._now = now
        self.reset()
        super().__init__(ctx, on_success)

    def _build_mutation(self):
        return schedule_event_mutation(
            self.ctx,
            success_toast=lambda e, _: ("Event scheduled", f"Event has been scheduled with {self.student_name}."),
        )

    def reset(self) -> None:
        now = self._now()
        self.event_type = EventType.COUNSELING
        self.title = ""
        self.description = ""
        self.event_date = now.date()
        self.start_time = now.strftime("%H:%M")
        self.end_time = (now + timedelta(hours=1)).strftime("%H:%M")

    def generate_title(self) -> str:
        self._require_editable("generate a title")
        self.title = event_title(self.event_type, self.student_name)
        return self.title

    def validate(self):
        if not self.title.strip():
            return "Event title required", "Please enter a title for the event."
        return None

    def variables(self) -> EventCreate:
        return EventCreate(
            student_id=self.student_id,
            title=self.title,
            description=self.description,
            event_type=self.event_type,
            event_date=self.event_date,
            start_time=self.start_time,
            end_time=self.end_time,
            status=EventStatus.SCHEDULED,
        )
