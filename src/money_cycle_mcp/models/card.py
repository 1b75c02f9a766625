"""
Credit card model for Money Cycle data.
"""

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from money_cycle_mcp.utils.currency import format_cents


class CreditCard(BaseModel):
    """
    Represents a credit card and its monthly billing configuration.

    Statement cutoff and payment due are stored as days of the month and
    resolved to concrete dates when a billing cycle is requested.
    """

    model_config = {"strict": True, "populate_by_name": True}

    # Required fields
    card_id: str
    cutoff_day: int = Field(ge=1, le=31)
    payment_due_day: int = Field(ge=1, le=31)

    # Card identification
    name: Optional[str] = None
    issuer: Optional[str] = None
    mask: Optional[str] = Field(default=None, pattern=r"^\d{4}$")  # Last 4 digits

    # Amounts in cents
    credit_limit_cents: Optional[int] = Field(default=None, ge=0)
    balance_cents: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_name(self) -> str:
        """Get the best display name for this card."""
        if self.name:
            return self.name
        if self.issuer and self.mask:
            return f"{self.issuer} ending {self.mask}"
        return self.issuer or "Unknown"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def balance_display(self) -> str:
        return format_cents(self.balance_cents)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def credit_limit_display(self) -> Optional[str]:
        if self.credit_limit_cents is None:
            return None
        return format_cents(self.credit_limit_cents)
