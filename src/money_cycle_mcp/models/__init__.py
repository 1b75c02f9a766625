"""
Pydantic models for Money Cycle data structures.
"""

from money_cycle_mcp.models.billing_cycle import BillingCycle
from money_cycle_mcp.models.card import CreditCard
from money_cycle_mcp.models.plan import YEARLY_DISCOUNT, BillingInterval, Plan

__all__ = ["CreditCard", "Plan", "BillingInterval", "BillingCycle", "YEARLY_DISCOUNT"]
