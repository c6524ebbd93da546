import logging
from collections.abc import Callable
from datetime import UTC, datetime

from domain.exceptions.subscription import (
	NotFoundError,
	SubscriberAlreadyExistsError,
	UpstreamError,
	ValidationError,
)
from domain.models.subscription import Disposition, SettlementRecord, Subscriber
from infrastructure.mailing.buttondown import ButtondownClient

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
	return datetime.now(UTC)


def validate_subscription(email: str | None, tag: str | None, name: str | None) -> None:
	if not email or '@' not in email:
		raise ValidationError('Invalid email address')
	if not tag or not tag.strip() or not name or not name.strip():
		raise ValidationError('Missing required fields')


def merge_tags(existing: list[str], tag: str) -> list[str]:
	return existing if tag in existing else [*existing, tag]


def merge_metadata(existing: dict[str, str], key: str, value: str) -> dict[str, str]:
	return {**existing, key: value}


class SubscriptionReconciler:
	"""
	Ensures the mailing list has a subscriber for `email` tagged with the
	settlement, creating it when absent and merging into it when present.
	"""

	def __init__(self, client: ButtondownClient, clock: Callable[[], datetime] = utc_now):
		self.client = client
		self.clock = clock

	async def reconcile(
		self, email: str, tag: str, name: str, deadline: str | None = None
	) -> Disposition:
		validate_subscription(email, tag, name)

		record = SettlementRecord(name=name, deadline=deadline or None, subscribed_at=self.clock())
		key = SettlementRecord.metadata_key(tag)
		value = record.to_json()

		try:
			await self.client.create_subscriber(email, [tag], {key: value})
		except SubscriberAlreadyExistsError:
			logger.info(f'{email} already subscribed, merging settlement {tag}')
			await self._update_existing(email, tag, key, value)
			return Disposition.UPDATED

		logger.info(f'Created subscriber {email} for settlement {tag}')
		return Disposition.CREATED

	async def _update_existing(self, email: str, tag: str, key: str, value: str) -> Subscriber:
		subscriber = await self.client.find_subscriber_by_email(email)
		if subscriber is None:
			raise NotFoundError(f'Subscriber {email} reported as existing but not found')

		try:
			updated = await self.client.patch_subscriber(
				subscriber.id,
				merge_tags(subscriber.tags, tag),
				merge_metadata(subscriber.metadata, key, value),
			)
		except UpstreamError:
			logger.error(f'Failed to update subscriber {subscriber.id} for settlement {tag}')
			raise

		logger.info(f'Updated subscriber {subscriber.id} with settlement {tag}')
		return updated
