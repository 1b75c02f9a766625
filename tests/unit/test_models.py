"""
Unit tests for Pydantic models.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from money_cycle_mcp.models.billing_cycle import BillingCycle
from money_cycle_mcp.models.card import CreditCard
from money_cycle_mcp.models.plan import YEARLY_DISCOUNT, Plan


class TestCreditCard:
    """Tests for CreditCard model."""

    def test_card_creation_with_required_fields(self) -> None:
        """Test creating a card with only required fields."""
        card = CreditCard(card_id="card_1", cutoff_day=25, payment_due_day=15)
        assert card.card_id == "card_1"
        assert card.cutoff_day == 25
        assert card.payment_due_day == 15
        assert card.balance_cents == 0
        assert card.credit_limit_cents is None

    def test_card_display_name_uses_name_first(self) -> None:
        card = CreditCard(
            card_id="card_2",
            cutoff_day=1,
            payment_due_day=20,
            name="Gold Rewards",
            issuer="Amex",
            mask="1005",
        )
        assert card.display_name == "Gold Rewards"

    def test_card_display_name_falls_back_to_issuer_and_mask(self) -> None:
        card = CreditCard(
            card_id="card_3", cutoff_day=1, payment_due_day=20, issuer="Visa", mask="4242"
        )
        assert card.display_name == "Visa ending 4242"

    def test_card_display_name_defaults_to_unknown(self) -> None:
        card = CreditCard(card_id="card_4", cutoff_day=1, payment_due_day=20)
        assert card.display_name == "Unknown"

    def test_card_amount_displays(self) -> None:
        card = CreditCard(
            card_id="card_5",
            cutoff_day=1,
            payment_due_day=20,
            balance_cents=123456,
            credit_limit_cents=5000000,
        )
        assert card.balance_display == "$1,234.56"
        assert card.credit_limit_display == "$50,000"

    @pytest.mark.parametrize("field", ["cutoff_day", "payment_due_day"])
    @pytest.mark.parametrize("value", [0, 32])
    def test_card_rejects_out_of_range_days(self, field, value) -> None:
        fields = {"card_id": "card_6", "cutoff_day": 10, "payment_due_day": 10}
        fields[field] = value
        with pytest.raises(ValidationError):
            CreditCard(**fields)

    def test_card_is_strict_about_types(self) -> None:
        with pytest.raises(ValidationError):
            CreditCard(card_id="card_7", cutoff_day="10", payment_due_day=10)

    def test_card_rejects_negative_balance(self) -> None:
        with pytest.raises(ValidationError):
            CreditCard(card_id="card_8", cutoff_day=10, payment_due_day=10, balance_cents=-1)

    def test_card_validates_mask(self) -> None:
        with pytest.raises(ValidationError):
            CreditCard(card_id="card_9", cutoff_day=10, payment_due_day=10, mask="12")

    def test_card_serialization_includes_computed_fields(self) -> None:
        card = CreditCard(card_id="card_10", cutoff_day=10, payment_due_day=10, name="Test")
        data = card.model_dump(mode="json")
        assert data["card_id"] == "card_10"
        assert data["display_name"] == "Test"
        assert data["balance_display"] == "$0"


class TestPlan:
    """Tests for Plan model."""

    def test_monthly_price(self) -> None:
        plan = Plan(name="Starter", price_cents=2000)
        assert plan.price_for("monthly") == 2000
        assert plan.price_display == "$20"

    def test_yearly_price_is_discounted(self) -> None:
        plan = Plan(name="Advanced", price_cents=4000)
        assert YEARLY_DISCOUNT == 15
        assert plan.price_for("yearly") == 3400

    def test_custom_yearly_discount(self) -> None:
        plan = Plan(name="Premium", price_cents=8000)
        assert plan.price_for("yearly", yearly_discount=25) == 6000

    def test_unknown_interval(self) -> None:
        plan = Plan(name="Starter", price_cents=2000)
        with pytest.raises(ValueError, match="Unknown billing interval"):
            plan.price_for("weekly")  # type: ignore[arg-type]

    def test_defaults(self) -> None:
        plan = Plan(name="Starter", price_cents=2000)
        assert plan.features == []
        assert plan.is_popular is False
        assert plan.description is None

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValidationError):
            Plan(name="Broken", price_cents=-100)


class TestBillingCycle:
    """Tests for BillingCycle model."""

    def test_for_card(self, fixed_today) -> None:
        card = CreditCard(card_id="card_1", cutoff_day=25, payment_due_day=15)
        cycle = BillingCycle.for_card(card, fixed_today)

        assert cycle.card_id == "card_1"
        assert cycle.cutoff_date == date(2026, 10, 25)
        assert cycle.payment_due_date == date(2026, 11, 15)
        assert cycle.days_until_cutoff == 7
        assert cycle.days_until_payment == 28
        assert cycle.cutoff_display == "25-October-2026"
        assert cycle.payment_due_display == "15-November-2026"

    def test_for_card_clamps_short_month(self) -> None:
        card = CreditCard(card_id="card_2", cutoff_day=31, payment_due_day=30)
        cycle = BillingCycle.for_card(card, date(2027, 2, 1))

        assert cycle.cutoff_date == date(2027, 2, 28)
        assert cycle.payment_due_date == date(2027, 2, 28)

    def test_serialization(self, fixed_today) -> None:
        card = CreditCard(card_id="card_3", cutoff_day=18, payment_due_day=5)
        data = BillingCycle.for_card(card, fixed_today).model_dump(mode="json")

        assert data["today"] == "2026-10-18"
        assert data["cutoff_date"] == "2026-10-18"
        assert data["payment_due_date"] == "2026-11-05"
        assert data["days_until_cutoff"] == 0
        assert data["days_until_payment"] == 18
