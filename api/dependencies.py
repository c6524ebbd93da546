import logging
from datetime import timedelta
from typing import Annotated

import httpx
from fastapi import Depends

from application.services import RateQuoteService, SubscriptionReconciler
from config.settings import get_settings
from infrastructure.cache.quote_cache import QuoteCache
from infrastructure.mailing.buttondown import ButtondownClient
from infrastructure.providers.fred import FredProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	http_client: httpx.AsyncClient | None = None
	quote_cache: QuoteCache | None = None
	fred_provider: FredProvider | None = None
	mailing_client: ButtondownClient | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS))
	deps.quote_cache = QuoteCache(ttl=timedelta(seconds=settings.RATE_CACHE_TTL_SECONDS))
	deps.fred_provider = FredProvider(settings.FRED_API_KEY, client=deps.http_client)
	deps.mailing_client = ButtondownClient(settings.BUTTONDOWN_API_KEY, client=deps.http_client)

	if not settings.FRED_API_KEY:
		logger.warning('FRED_API_KEY not set; rate endpoint will serve the fallback quote')
	if not settings.BUTTONDOWN_API_KEY:
		logger.warning('BUTTONDOWN_API_KEY not set; subscriptions will fail')
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.http_client:
		await deps.http_client.aclose()
	deps.http_client = None
	deps.quote_cache = None
	deps.fred_provider = None
	deps.mailing_client = None

	logger.info('Cleanup complete')


def get_quote_cache() -> QuoteCache:
	if deps.quote_cache is None:
		raise RuntimeError('Quote cache not initialized')
	return deps.quote_cache


def get_fred_provider() -> FredProvider:
	if deps.fred_provider is None:
		raise RuntimeError('FRED provider not initialized')
	return deps.fred_provider


def get_mailing_client() -> ButtondownClient:
	if deps.mailing_client is None:
		raise RuntimeError('Mailing list client not initialized')
	return deps.mailing_client


async def get_rate_quote_service(
	provider: Annotated[FredProvider, Depends(get_fred_provider)],
	cache: Annotated[QuoteCache, Depends(get_quote_cache)],
) -> RateQuoteService:
	return RateQuoteService(
		provider=provider, cache=cache, series_id=get_settings().FRED_SERIES_ID
	)


async def get_subscription_reconciler(
	client: Annotated[ButtondownClient, Depends(get_mailing_client)],
) -> SubscriptionReconciler:
	return SubscriptionReconciler(client=client)
