from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from domain.models.rate import CacheEntry, RateQuote


def utc_now() -> datetime:
    return datetime.now(UTC)


class QuoteCache:
    """Single-slot, process-local holder for the last rate quote."""

    def __init__(
        self,
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = utc_now,
    ):
        self.ttl = ttl
        self.clock = clock
        self._entry: CacheEntry | None = None

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def get(self) -> RateQuote | None:
        if self._entry is None:
            return None
        if self.clock() - self._entry.captured_at >= self.ttl:
            return None
        return self._entry.payload

    def set(self, quote: RateQuote) -> CacheEntry:
        self._entry = CacheEntry(payload=quote, captured_at=self.clock())
        return self._entry

    def clear(self) -> None:
        self._entry = None
