# nosec B101


from datetime import UTC, datetime, timedelta
from decimal import Decimal

from infrastructure.cache.quote_cache import QuoteCache
from domain.models.rate import RateQuote


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_quote(rate='6.8'):
    return RateQuote(
        rate_percent=Decimal(rate),
        raw_percent=Decimal('6.3'),
        adjusted_added=Decimal('0.5'),
        observation_date='2026-10-15',
        source='MORTGAGE30US',
    )


def test_empty_cache_returns_none():
    cache = QuoteCache()
    assert cache.get() is None
    assert cache.entry is None


def test_set_records_capture_time():
    clock = FakeClock(datetime(2026, 10, 18, 12, 0, tzinfo=UTC))
    cache = QuoteCache(clock=clock)
    quote = make_quote()

    entry = cache.set(quote)

    assert entry.payload is quote
    assert entry.captured_at == datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


def test_fresh_entry_returns_identical_payload():
    clock = FakeClock(datetime(2026, 10, 18, 12, 0, tzinfo=UTC))
    cache = QuoteCache(clock=clock)
    quote = make_quote()
    cache.set(quote)

    clock.advance(minutes=59, seconds=59)

    assert cache.get() is quote


def test_entry_expires_at_ttl():
    clock = FakeClock(datetime(2026, 10, 18, 12, 0, tzinfo=UTC))
    cache = QuoteCache(clock=clock)
    cache.set(make_quote())

    clock.advance(hours=1)

    assert cache.get() is None


def test_set_replaces_entry_wholesale():
    clock = FakeClock(datetime(2026, 10, 18, 12, 0, tzinfo=UTC))
    cache = QuoteCache(clock=clock)
    first = cache.set(make_quote('6.8'))

    clock.advance(hours=2)
    second = cache.set(make_quote('7.0'))

    assert second is not first
    assert first.payload.rate_percent == Decimal('6.8')
    assert cache.get().rate_percent == Decimal('7.0')
    assert cache.entry.captured_at == clock.now


def test_custom_ttl_and_clear():
    clock = FakeClock(datetime(2026, 10, 18, 12, 0, tzinfo=UTC))
    cache = QuoteCache(ttl=timedelta(seconds=30), clock=clock)
    cache.set(make_quote())

    clock.advance(seconds=31)
    assert cache.get() is None

    cache.set(make_quote())
    cache.clear()
    assert cache.get() is None
