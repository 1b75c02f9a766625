"""
Subscription plan model for Money Cycle data.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, computed_field

from money_cycle_mcp.utils.currency import apply_discount, format_cents

BillingInterval = Literal["monthly", "yearly"]

# Yearly subscribers save this percentage on the monthly price
YEARLY_DISCOUNT = 15


class Plan(BaseModel):
    """
    Represents a subscription pricing plan.

    Prices are monthly amounts in cents. Yearly billing applies
    YEARLY_DISCOUNT to the monthly price.
    """

    model_config = {"strict": True, "populate_by_name": True}

    # Required fields
    name: str
    price_cents: int = Field(ge=0)

    # Presentation
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    is_popular: bool = False

    def price_for(
        self, interval: BillingInterval, yearly_discount: int = YEARLY_DISCOUNT
    ) -> int:
        """
        Get the monthly price in cents for a billing interval.

        Args:
            interval: "monthly" or "yearly"
            yearly_discount: Percentage taken off for yearly billing

        Returns:
            Monthly price in cents

        Raises:
            ValueError: If interval is not recognized
        """
        if interval == "monthly":
            return self.price_cents
        if interval == "yearly":
            return apply_discount(self.price_cents, yearly_discount)
        raise ValueError(f"Unknown billing interval: {interval}")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def price_display(self) -> str:
        """Monthly price as a display string."""
        return format_cents(self.price_cents)
