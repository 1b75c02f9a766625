"""
Data store for Money Cycle billing data.

Loads credit cards and pricing plans from a local JSON file:

    {
        "cards": [{"card_id": "...", "cutoff_day": 25, "payment_due_day": 10}],
        "plans": [{"name": "Starter", "price_cents": 2000}]
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from money_cycle_mcp.core.exceptions import DataFileNotFoundError, DecodeError
from money_cycle_mcp.models.card import CreditCard
from money_cycle_mcp.models.plan import Plan

logger = logging.getLogger(__name__)

DATA_PATH_ENV = "MONEY_CYCLE_DATA"

ModelT = TypeVar("ModelT", bound=BaseModel)


def default_data_path() -> Path:
    """Get the data file path from MONEY_CYCLE_DATA, falling back to ~/.config."""
    override = os.environ.get(DATA_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "money-cycle" / "data.json"


def _decode_records(
    records: Any, model: Type[ModelT], kind: str
) -> List[ModelT]:
    """Validate raw records, skipping the ones that fail."""
    if not isinstance(records, list):
        raise DecodeError(f"Expected a list of {kind}, got {type(records).__name__}")

    decoded: List[ModelT] = []
    for index, record in enumerate(records):
        try:
            decoded.append(model.model_validate(record))
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid {kind} record #{index}: "
                f"{e.error_count()} validation error(s)"
            )
    return decoded


class MoneyCycleStore:
    """
    Read-only access to cards and plans in the data file.

    The file is read on first use and cached afterwards.
    """

    def __init__(self, data_path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            data_path: Path to the JSON data file.
                      If None, uses MONEY_CYCLE_DATA or the default location.
        """
        if data_path is None:
            data_path = default_data_path()

        self.data_path = data_path
        self._cards: Optional[List[CreditCard]] = None
        self._plans: Optional[List[Plan]] = None

    def is_available(self) -> bool:
        """Check if the data file exists."""
        return self.data_path.is_file()

    def _load(self) -> None:
        if not self.is_available():
            raise DataFileNotFoundError(f"Data file not found: {self.data_path}")

        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                raw: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Invalid JSON in {self.data_path}: {e}") from e

        if not isinstance(raw, dict):
            raise DecodeError(f"Expected a JSON object in {self.data_path}")

        self._cards = _decode_records(raw.get("cards", []), CreditCard, "card")
        self._plans = _decode_records(raw.get("plans", []), Plan, "plan")
        logger.debug(
            f"Loaded {len(self._cards)} cards and {len(self._plans)} plans "
            f"from {self.data_path}"
        )

    def get_cards(self, issuer: Optional[str] = None) -> List[CreditCard]:
        """
        Get all credit cards.

        Args:
            issuer: Optional filter by issuer (case-insensitive substring match)

        Returns:
            List of cards
        """
        if self._cards is None:
            self._load()

        result = self._cards[:]

        if issuer:
            issuer_lower = issuer.lower()
            result = [
                card
                for card in result
                if card.issuer and issuer_lower in card.issuer.lower()
            ]

        return result

    def get_card(self, card_id: str) -> CreditCard:
        """
        Get a single card by ID.

        Raises:
            ValueError: If card_id is not found
        """
        card = next((c for c in self.get_cards() if c.card_id == card_id), None)
        if card is None:
            raise ValueError(f"Card not found: {card_id}")
        return card

    def get_plans(self) -> List[Plan]:
        """Get all pricing plans in file order."""
        if self._plans is None:
            self._load()
        return self._plans[:]
