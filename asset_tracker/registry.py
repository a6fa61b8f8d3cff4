"""Office registry: maps office locations to their local currency."""
from __future__ import annotations

import logging
from typing import Iterable, List, Mapping

from asset_tracker.models import Office
from asset_tracker.utils.validation import validate_currency_code

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"

DEFAULT_OFFICES = (
    Office("New York", "USD"),
    Office("London", "GBP"),
    Office("Stockholm", "SEK"),
    Office("Mumbai", "INR"),
)


class OfficeRegistry:
    """Ordered list of offices with case-insensitive lookup.

    Duplicate locations are allowed; lookups return the first match.
    """

    def __init__(self, offices: Iterable[Office] = ()) -> None:
        self._offices: List[Office] = []
        for office in offices:
            self.register(office.location, office.currency)

    @classmethod
    def with_defaults(cls) -> "OfficeRegistry":
        return cls(DEFAULT_OFFICES)

    @classmethod
    def from_config(cls, config) -> "OfficeRegistry":
        """Build the registry from the ``offices`` section of a Config."""
        return cls(config.offices)

    @classmethod
    def from_mapping(cls, offices: Mapping[str, str]) -> "OfficeRegistry":
        return cls(Office(location, currency) for location, currency in offices.items())

    def register(self, location: str, currency: str) -> Office:
        office = Office(location=location, currency=validate_currency_code(currency))
        self._offices.append(office)
        logger.debug("Registered office %s (%s)", office.location, office.currency)
        return office

    def currency_for(self, location: str) -> str:
        """Currency for an office location, or USD when the office is unknown."""
        key = (location or "").casefold()
        for office in self._offices:
            if office.location.casefold() == key:
                return office.currency
        logger.debug("Unknown office %r, defaulting to %s", location, DEFAULT_CURRENCY)
        return DEFAULT_CURRENCY

    def offices(self) -> List[Office]:
        return list(self._offices)

    def __len__(self) -> int:
        return len(self._offices)
