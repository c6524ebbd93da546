from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

SPREAD = Decimal("0.5")
FALLBACK_RATE = Decimal("5.5")
FALLBACK_SOURCE = "fallback"


@dataclass(frozen=True)
class Observation:
    date: str
    value: Decimal


@dataclass(frozen=True)
class RateQuote:
    rate_percent: Decimal  # raw + spread, one decimal place
    raw_percent: Decimal | None
    adjusted_added: Decimal
    observation_date: str | None
    source: str  # series id, or "fallback"

    @property
    def is_fallback(self) -> bool:
        return self.source == FALLBACK_SOURCE

    @classmethod
    def fallback(cls) -> "RateQuote":
        return cls(
            rate_percent=FALLBACK_RATE,
            raw_percent=None,
            adjusted_added=SPREAD,
            observation_date=None,
            source=FALLBACK_SOURCE,
        )


@dataclass(frozen=True)
class CacheEntry:
    payload: RateQuote
    captured_at: datetime
