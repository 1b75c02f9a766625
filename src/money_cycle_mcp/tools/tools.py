"""
MCP tool definitions for Money Cycle.

Exposes the currency and billing calendar helpers, plus the cards and plans
in the data file, through the Model Context Protocol.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from money_cycle_mcp.core.store import MoneyCycleStore
from money_cycle_mcp.models.billing_cycle import BillingCycle
from money_cycle_mcp.models.plan import YEARLY_DISCOUNT
from money_cycle_mcp.utils.currency import (
    format_cents,
    format_for_display,
    parse_to_cents,
    sanitize_live_input,
    strip_formatting,
)
from money_cycle_mcp.utils.date_utils import (
    days_until_next_payment,
    format_readable_date,
    next_cutoff_date,
)


class MoneyCycleTools:
    """Collection of MCP tools for currency and billing cycle queries."""

    def __init__(self, store: MoneyCycleStore, today: Optional[date] = None):
        """
        Initialize tools with a data store.

        Args:
            store: MoneyCycleStore instance
            today: Fixed reference date. If None, the current date is used
                   on every call.
        """
        self.store = store
        self.today = today

    def _today(self) -> date:
        return self.today or date.today()

    def format_cents(self, cents: int) -> Dict[str, Any]:
        """Format an amount in cents as a display string."""
        return {"cents": cents, "display": format_cents(cents)}

    def parse_amount(self, text: str) -> Dict[str, Any]:
        """
        Parse a currency string to cents.

        Returns:
            Dict with the cents value and its canonical display string
        """
        cents = parse_to_cents(text)
        return {"input": text, "cents": cents, "display": format_cents(cents)}

    def format_amount(self, text: str) -> Dict[str, Any]:
        """Add currency sign and grouping to a decimal string."""
        return {"input": text, "display": format_for_display(text)}

    def sanitize_amount_input(self, text: str) -> Dict[str, Any]:
        """Clean partially typed amount field contents."""
        return {"input": text, "value": sanitize_live_input(text)}

    def strip_amount_formatting(self, text: str) -> Dict[str, Any]:
        """Turn a display string back into an editable numeric string."""
        return {"input": text, "value": strip_formatting(text)}

    def get_next_cutoff_date(self, cutoff_day: int) -> Dict[str, Any]:
        """
        Get the next statement cutoff date for a day of the month.

        Raises:
            InvalidDayOfMonthError: If cutoff_day is outside 1-31
        """
        today = self._today()
        cutoff = next_cutoff_date(cutoff_day, today)
        return {
            "cutoff_day": cutoff_day,
            "today": today.isoformat(),
            "cutoff_date": cutoff.isoformat(),
            "display": format_readable_date(cutoff),
        }

    def get_days_until_payment(self, payment_due_day: int) -> Dict[str, Any]:
        """
        Get the days left until the next payment due date.

        Raises:
            InvalidDayOfMonthError: If payment_due_day is outside 1-31
        """
        today = self._today()
        return {
            "payment_due_day": payment_due_day,
            "today": today.isoformat(),
            "days_left": days_until_next_payment(payment_due_day, today),
        }

    def format_date(
        self, date: str, separator: str = "-", numeric_month: bool = False
    ) -> Dict[str, Any]:
        """
        Format an ISO-8601 date for humans.

        Raises:
            InvalidDateError: If date is not a valid date
        """
        return {
            "input": date,
            "formatted": format_readable_date(date, separator, numeric_month),
        }

    def get_cards(self, issuer: Optional[str] = None) -> Dict[str, Any]:
        """
        Get all credit cards with balances.

        Args:
            issuer: Optional filter by issuer

        Returns:
            Dict with card count, total balance and list of cards
        """
        cards = self.store.get_cards(issuer=issuer)
        total_balance = sum(card.balance_cents for card in cards)

        return {
            "count": len(cards),
            "total_balance_cents": total_balance,
            "total_balance": format_cents(total_balance),
            "cards": [card.model_dump(mode="json") for card in cards],
        }

    def get_billing_cycle(self, card_id: str) -> Dict[str, Any]:
        """
        Get the upcoming cutoff and payment dates for a card.

        Raises:
            ValueError: If card_id is not found
        """
        card = self.store.get_card(card_id)
        cycle = BillingCycle.for_card(card, self._today())

        return {
            "card_id": card.card_id,
            "name": card.display_name,
            "balance": card.balance_display,
            **cycle.model_dump(mode="json", exclude={"card_id"}),
        }

    def get_pricing(self, interval: str = "monthly") -> Dict[str, Any]:
        """
        Get plan prices for a billing interval.

        Args:
            interval: "monthly" or "yearly" (yearly prices are discounted)

        Returns:
            Dict with per-plan monthly prices

        Raises:
            ValueError: If interval is not recognized
        """
        if interval not in ("monthly", "yearly"):
            raise ValueError(f"Unknown billing interval: {interval}")

        plans = []
        for plan in self.store.get_plans():
            price = plan.price_for(interval)
            plans.append(
                {
                    "name": plan.name,
                    "description": plan.description,
                    "features": plan.features,
                    "is_popular": plan.is_popular,
                    "price_cents": price,
                    "price": format_cents(price),
                }
            )

        return {
            "interval": interval,
            "yearly_discount_percent": YEARLY_DISCOUNT,
            "count": len(plans),
            "plans": plans,
        }


# Tools that only need the data file
DATA_TOOLS = frozenset({"get_cards", "get_billing_cycle", "get_pricing"})

_DAY_OF_MONTH_SCHEMA = {
    "type": "integer",
    "minimum": 1,
    "maximum": 31,
}


def create_tool_schemas() -> List[Dict[str, Any]]:
    """
    Create MCP tool schemas for all tools.

    Returns:
        List of tool schema definitions
    """
    return [
        {
            "name": "format_cents",
            "description": (
                "Format an integer amount in cents as a display string, "
                "e.g. 200056 -> $2,000.56."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "cents": {
                        "type": "integer",
                        "description": "Amount in cents",
                        "minimum": 0,
                    },
                },
                "required": ["cents"],
            },
        },
        {
            "name": "parse_amount",
            "description": (
                "Parse a currency string such as '$2,000.56' into cents. "
                "Digits past two decimals are truncated."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "text": {
                        "type": "string",
                        "description": "Currency string to parse",
                    },
                },
                "required": ["text"],
            },
        },
        {
            "name": "format_amount",
            "description": (
                "Add a dollar sign and thousands separators to a decimal "
                "string without rounding it."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "text": {
                        "type": "string",
                        "description": "Decimal string, e.g. 2000000.5",
                    },
                },
                "required": ["text"],
            },
        },
        {
            "name": "sanitize_amount_input",
            "description": (
                "Clean partially typed amount input: digits and one decimal "
                "point, at most two decimals, grouped without a dollar sign."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "text": {
                        "type": "string",
                        "description": "Raw input field contents",
                    },
                },
                "required": ["text"],
            },
        },
        {
            "name": "strip_amount_formatting",
            "description": (
                "Remove currency formatting from a display string, leaving a "
                "plain number with at most two decimals."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "text": {
                        "type": "string",
                        "description": "Display string, e.g. $2,000.56",
                    },
                },
                "required": ["text"],
            },
        },
        {
            "name": "get_next_cutoff_date",
            "description": (
                "Get the next credit card statement cutoff date for a day of "
                "the month. The cutoff day itself counts as this month; short "
                "months use their last day."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "cutoff_day": {
                        **_DAY_OF_MONTH_SCHEMA,
                        "description": "Day of the month (1-31)",
                    },
                },
                "required": ["cutoff_day"],
            },
        },
        {
            "name": "get_days_until_payment",
            "description": (
                "Get the number of days left until the next payment due date "
                "for a day of the month. Returns 0 on the due day."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "payment_due_day": {
                        **_DAY_OF_MONTH_SCHEMA,
                        "description": "Day of the month (1-31)",
                    },
                },
                "required": ["payment_due_day"],
            },
        },
        {
            "name": "format_date",
            "description": (
                "Format a YYYY-MM-DD date as day, month and year, e.g. "
                "20-June-2027 or 20/06/2027."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "date": {
                        "type": "string",
                        "description": "Date (YYYY-MM-DD)",
                    },
                    "separator": {
                        "type": "string",
                        "description": "Separator between parts (default: -)",
                        "default": "-",
                    },
                    "numeric_month": {
                        "type": "boolean",
                        "description": "Show month as a number (default: false)",
                        "default": False,
                    },
                },
                "required": ["date"],
            },
        },
        {
            "name": "get_cards",
            "description": (
                "Get all credit cards with balances and billing days. "
                "Optionally filter by issuer."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "issuer": {
                        "type": "string",
                        "description": "Filter by issuer (case-insensitive substring)",
                    },
                },
            },
        },
        {
            "name": "get_billing_cycle",
            "description": (
                "Get the upcoming statement cutoff and payment due dates for "
                "a credit card by ID."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "card_id": {
                        "type": "string",
                        "description": "Card ID to query",
                    },
                },
                "required": ["card_id"],
            },
        },
        {
            "name": "get_pricing",
            "description": (
                "Get subscription plan prices per month for monthly or yearly "
                "billing. Yearly billing is discounted."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "interval": {
                        "type": "string",
                        "enum": ["monthly", "yearly"],
                        "description": "Billing interval (default: monthly)",
                        "default": "monthly",
                    },
                },
            },
        },
    ]
