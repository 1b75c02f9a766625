"""
Utility functions for Money Cycle MCP.
"""

from money_cycle_mcp.utils.currency import (
    format_cents,
    format_for_display,
    parse_to_cents,
    sanitize_live_input,
    strip_formatting,
)
from money_cycle_mcp.utils.date_utils import (
    date_from_day_of_month,
    day_of_month,
    days_between,
    days_until_next_payment,
    format_readable_date,
    next_cutoff_date,
    next_payment_due_date,
)

__all__ = [
    "format_cents",
    "format_for_display",
    "parse_to_cents",
    "sanitize_live_input",
    "strip_formatting",
    "date_from_day_of_month",
    "day_of_month",
    "days_between",
    "days_until_next_payment",
    "format_readable_date",
    "next_cutoff_date",
    "next_payment_due_date",
]
