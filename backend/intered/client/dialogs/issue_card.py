"""Issue an InterPro card to one student."""

import random
from datetime import date

from intered.application.schemas import CardCreate
from intered.client.hooks.cards import issue_card_mutation
from intered.domain.entities import CardPlan, CardStatus

from .base import FormDialog

CARD_PREFIX = "2023"


def generate_card_number(rng: random.Random | None = None) -> str:
    """The fixed prefix followed by ten random digits."""
    rng = rng or random
    return f"{CARD_PREFIX}{rng.randrange(10_000_000_000):010d}"


def one_year_from(day: date) -> date:
    try:
        return day.replace(year=day.year + 1)
    except ValueError:
        # 29 February
        return day.replace(year=day.year + 1, day=28)


class IssueCardDialog(FormDialog):
    name = "issue_card"

    def __init__(self, ctx, student_id: int, student_name: str, on_success=None, *, today=date.today):
        self.student_id = student_id
        self.student_name = student_name
        self._today = today
        self.reset()
        super().__init__(ctx, on_success)

    def _build_mutation(self):
        return issue_card_mutation(
            self.ctx,
            success_toast=lambda c, _: ("Card issued", f"InterPro card has been issued to {self.student_name}."),
        )

    def reset(self) -> None:
        self.plan = CardPlan.STANDARD
        self.card_number = ""
        self.expiry_date = one_year_from(self._today())

    def generate(self, rng: random.Random | None = None) -> str:
        self._require_editable("generate a card number")
        self.card_number = generate_card_number(rng)
        return self.card_number

    def validate(self):
        if not self.card_number.strip():
            return "Card number required", "Please generate or enter a card number."
        return None

    def variables(self) -> CardCreate:
        return CardCreate(
            student_id=self.student_id,
            card_number=self.card_number,
            plan=self.plan,
            issue_date=self._today(),
            expiry_date=self.expiry_date,
            status=CardStatus.ACTIVE,
        )
