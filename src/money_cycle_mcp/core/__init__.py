"""
Core functionality for Money Cycle MCP.
"""

from money_cycle_mcp.core.exceptions import (
    DataFileNotFoundError,
    DecodeError,
    InvalidDateError,
    InvalidDayOfMonthError,
    MoneyCycleError,
)

__all__ = [
    "MoneyCycleError",
    "InvalidDayOfMonthError",
    "InvalidDateError",
    "DataFileNotFoundError",
    "DecodeError",
]
