from intered.client.components import card_row
from intered.client.filters import search
from intered.client.hooks.cards import cards_query
from intered.client.hooks.keys import CARDS, STUDENTS
from intered.client.hooks.students import students_query
from intered.domain.entities import CardPlan

from .base import Page


class CardsPage(Page):
    title = "InterPro Cards"

    def __init__(self, ctx):
        super().__init__(ctx)
        self.search_text = ""

    def queries(self):
        return [cards_query(self.ctx), students_query(self.ctx)]

    @property
    def cards(self) -> list:
        return search(self.data(CARDS, []), self.search_text, ("card_number",))

    @property
    def cards_by_plan(self) -> dict[str, list]:
        grouped = {plan.value: [] for plan in CardPlan}
        for card in self.cards:
            grouped[card.plan.value].append(card)
        return grouped

    @property
    def rows(self):
        students = {s.id: s for s in self.data(STUDENTS, [])}
        return [card_row(c, students) for c in self.cards]
