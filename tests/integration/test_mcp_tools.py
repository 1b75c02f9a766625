"""
Integration tests for MCP tools with the fixture data file.
"""

from datetime import date

import pytest
from freezegun import freeze_time

from money_cycle_mcp.core.store import MoneyCycleStore
from money_cycle_mcp.tools.tools import MoneyCycleTools


@pytest.fixture
def tools(data_path, fixed_today):
    """Create MoneyCycleTools instance with fixture data and a pinned date."""
    return MoneyCycleTools(MoneyCycleStore(data_path), today=fixed_today)


@pytest.mark.integration
def test_get_cards_skips_invalid_records(tools):
    result = tools.get_cards()

    assert result["count"] == 3
    assert result["count"] == len(result["cards"])
    assert "card_broken" not in {card["card_id"] for card in result["cards"]}


@pytest.mark.integration
def test_get_cards_total_balance(tools):
    result = tools.get_cards()

    assert result["total_balance_cents"] == 323456
    assert result["total_balance"] == "$3,234.56"


@pytest.mark.integration
def test_get_cards_issuer_filter(tools):
    result = tools.get_cards(issuer="visa")

    assert result["count"] == 1
    assert result["cards"][0]["display_name"] == "Visa ending 4242"


@pytest.mark.integration
def test_get_billing_cycle(tools):
    result = tools.get_billing_cycle(card_id="card_gold")

    assert result["card_id"] == "card_gold"
    assert result["name"] == "Gold Rewards"
    assert result["balance"] == "$1,234.56"
    assert result["today"] == "2026-10-18"
    assert result["cutoff_date"] == "2026-10-25"
    assert result["payment_due_date"] == "2026-11-15"
    assert result["days_until_cutoff"] == 7
    assert result["days_until_payment"] == 28


@pytest.mark.integration
def test_get_billing_cycle_end_of_month_cutoff(tools):
    result = tools.get_billing_cycle(card_id="card_travel")

    assert result["cutoff_date"] == "2026-10-31"
    assert result["cutoff_display"] == "31-October-2026"
    assert result["payment_due_date"] == "2026-10-20"
    assert result["days_until_payment"] == 2


@pytest.mark.integration
def test_get_billing_cycle_not_found(tools):
    with pytest.raises(ValueError, match="Card not found"):
        tools.get_billing_cycle(card_id="card_broken")


@pytest.mark.integration
def test_get_pricing_monthly(tools):
    result = tools.get_pricing()

    assert result["interval"] == "monthly"
    assert [plan["price"] for plan in result["plans"]] == ["$20", "$40", "$80"]
    assert [plan["name"] for plan in result["plans"] if plan["is_popular"]] == ["Advanced"]


@pytest.mark.integration
def test_get_pricing_yearly(tools):
    result = tools.get_pricing(interval="yearly")

    assert result["yearly_discount_percent"] == 15
    assert [plan["price_cents"] for plan in result["plans"]] == [1700, 3400, 6800]
    assert [plan["price"] for plan in result["plans"]] == ["$17", "$34", "$68"]


@pytest.mark.integration
def test_get_pricing_unknown_interval(tools):
    with pytest.raises(ValueError, match="Unknown billing interval"):
        tools.get_pricing(interval="weekly")


@pytest.mark.integration
@freeze_time("2027-06-20")
def test_tools_follow_the_clock_without_fixed_date(data_path):
    tools = MoneyCycleTools(MoneyCycleStore(data_path))

    assert tools.get_days_until_payment(15)["days_left"] == 25
    assert tools.get_next_cutoff_date(15)["cutoff_date"] == "2027-07-15"
    assert tools.get_billing_cycle("card_store")["cutoff_date"] == "2027-07-01"
    assert date.today() == date(2027, 6, 20)
