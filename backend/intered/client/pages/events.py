from datetime import date

from intered.client.components import event_row
from intered.client.hooks.events import events_query
from intered.client.hooks.keys import EVENTS
from intered.domain.entities import EventStatus

from .base import Page


class EventsPage(Page):
    """Scheduled events split around ``today``; cancelled ones are hidden."""

    title = "Events"

    def __init__(self, ctx, *, today=date.today):
        super().__init__(ctx)
        self._today = today
        self.type_filter = "all"

    def queries(self):
        return [events_query(self.ctx)]

    def _visible(self) -> list:
        events = [e for e in self.data(EVENTS, []) if e.status != EventStatus.CANCELLED]
        if self.type_filter != "all":
            events = [e for e in events if e.event_type == self.type_filter]
        return events

    @property
    def upcoming(self) -> list:
        today = self._today()
        events = [
            e for e in self._visible()
            if e.event_date >= today and e.status == EventStatus.SCHEDULED
        ]
        return sorted(events, key=lambda e: (e.event_date, e.start_time or ""))

    @property
    def past(self) -> list:
        today = self._today()
        events = [
            e for e in self._visible()
            if e.event_date < today or e.status == EventStatus.COMPLETED
        ]
        return sorted(events, key=lambda e: (e.event_date, e.start_time or ""), reverse=True)

    @property
    def upcoming_rows(self):
        return [event_row(e) for e in self.upcoming]
