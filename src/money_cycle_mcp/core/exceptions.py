"""
Custom exceptions for Money Cycle MCP.
"""


class MoneyCycleError(Exception):
    """Base exception for Money Cycle MCP errors."""
    pass


class InvalidDayOfMonthError(MoneyCycleError, ValueError):
    """Raised when a day-of-month setting is outside 1-31."""
    pass


class InvalidDateError(MoneyCycleError, ValueError):
    """Raised when a value is not a well-formed calendar date."""
    pass


class DataFileNotFoundError(MoneyCycleError):
    """Raised when the billing data file cannot be found."""
    pass


class DecodeError(MoneyCycleError):
    """Raised when the billing data file cannot be decoded."""
    pass
