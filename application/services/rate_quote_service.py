import logging
from decimal import ROUND_HALF_UP, Decimal

from domain.exceptions.rate import ProviderError
from domain.models.rate import SPREAD, Observation, RateQuote
from infrastructure.cache.quote_cache import QuoteCache
from infrastructure.providers.fred import FredProvider

logger = logging.getLogger(__name__)

DISPLAY_PRECISION = Decimal("0.1")


def to_display_rate(raw: Decimal) -> Decimal:
    return (raw + SPREAD).quantize(DISPLAY_PRECISION, rounding=ROUND_HALF_UP)


class RateQuoteService:
    """
    Serves the mortgage rate quote from a one-hour cache, refreshing it from
    FRED on a miss. Never raises: any upstream problem yields the fallback quote.

    Two requests racing on an expired entry may both fetch; the last write wins.
    """

    def __init__(self, provider: FredProvider, cache: QuoteCache, series_id: str):
        self.provider = provider
        self.cache = cache
        self.series_id = series_id

    async def get_quote(self) -> RateQuote:
        cached = self.cache.get()
        if cached is not None:
            logger.debug("Rate quote cache hit")
            return cached

        quote = await self._fetch_quote()
        self.cache.set(quote)
        return quote

    async def _fetch_quote(self) -> RateQuote:
        try:
            observation = await self.provider.fetch_latest_observation(self.series_id)
        except ProviderError as e:
            logger.warning(f"Rate fetch for {self.series_id} failed, using fallback: {e}")
            return RateQuote.fallback()
        except Exception as e:
            logger.error(f"Unexpected error fetching {self.series_id}: {e}", exc_info=True)
            return RateQuote.fallback()

        quote = self._build_quote(observation)
        logger.info(
            f"Fetched {self.series_id} {observation.value}% ({observation.date}), "
            f"displaying {quote.rate_percent}%"
        )
        return quote

    def _build_quote(self, observation: Observation) -> RateQuote:
        return RateQuote(
            rate_percent=to_display_rate(observation.value),
            raw_percent=observation.value,
            adjusted_added=SPREAD,
            observation_date=observation.date,
            source=self.series_id,
        )
