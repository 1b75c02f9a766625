"""
Billing cycle model for Money Cycle data.
"""

from datetime import date

from pydantic import BaseModel, computed_field

from money_cycle_mcp.models.card import CreditCard
from money_cycle_mcp.utils.date_utils import (
    days_between,
    format_readable_date,
    next_cutoff_date,
    next_payment_due_date,
)


class BillingCycle(BaseModel):
    """
    Upcoming statement cutoff and payment due dates for a card.

    Built from a CreditCard for a given reference date with for_card().
    """

    model_config = {"strict": True, "populate_by_name": True}

    card_id: str
    today: date
    cutoff_date: date
    payment_due_date: date

    @classmethod
    def for_card(cls, card: CreditCard, today: date) -> "BillingCycle":
        """Resolve a card's cutoff and due days against a reference date."""
        return cls(
            card_id=card.card_id,
            today=today,
            cutoff_date=next_cutoff_date(card.cutoff_day, today),
            payment_due_date=next_payment_due_date(card.payment_due_day, today),
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def days_until_cutoff(self) -> int:
        return days_between(self.today, self.cutoff_date)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def days_until_payment(self) -> int:
        return days_between(self.today, self.payment_due_date)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cutoff_display(self) -> str:
        return format_readable_date(self.cutoff_date)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def payment_due_display(self) -> str:
        return format_readable_date(self.payment_due_date)
