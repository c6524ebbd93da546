import json
import logging

import httpx

from domain.exceptions.subscription import (
	ConfigurationError,
	SubscriberAlreadyExistsError,
	UpstreamError,
)
from domain.models.subscription import Subscriber

logger = logging.getLogger(__name__)

ALREADY_SUBSCRIBED_MARKER = 'already subscribed'


def extract_error_message(text: str) -> str:
	"""Pull the human-readable part out of a Buttondown error body."""
	try:
		body = json.loads(text)
	except ValueError:
		return text
	if isinstance(body, dict):
		return str(body.get('detail') or body.get('code') or text)
	return text


def classify_error(message: str) -> UpstreamError:
	"""
	Map a failed create to an exception type.

	Buttondown does not expose a distinct error kind for duplicates, so the
	message text is the only signal. Keep all knowledge of its wording here.
	"""
	if ALREADY_SUBSCRIBED_MARKER in message.lower():
		return SubscriberAlreadyExistsError(message)
	return UpstreamError(message)


class ButtondownClient:
	BASE_URL = 'https://api.buttondown.email/v1'

	def __init__(self, api_key: str, client: httpx.AsyncClient):
		self.api_key = api_key
		self._client = client

	def _headers(self) -> dict[str, str]:
		if not self.api_key:
			raise ConfigurationError('BUTTONDOWN_API_KEY is not set')
		return {'Authorization': f'Token {self.api_key}', 'Content-Type': 'application/json'}

	async def _request(
		self,
		method: str,
		endpoint: str,
		params: dict | None = None,
		payload: dict | None = None,
	) -> dict:
		headers = self._headers()
		url = f'{self.BASE_URL}/{endpoint}'

		try:
			response = await self._client.request(
				method, url, headers=headers, params=params, json=payload
			)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			message = extract_error_message(e.response.text)
			logger.debug(f'Buttondown {method} {endpoint} -> {e.response.status_code}: {message}')
			raise UpstreamError(message) from e
		except httpx.RequestError as e:
			raise UpstreamError(f'Buttondown request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise UpstreamError(f'Buttondown response parsing error: {str(e)}') from e

	async def create_subscriber(
		self, email: str, tags: list[str], metadata: dict[str, str]
	) -> Subscriber:
		try:
			data = await self._request(
				'POST',
				'subscribers',
				payload={'email_address': email, 'tags': tags, 'metadata': metadata},
			)
		except UpstreamError as e:
			raise classify_error(str(e)) from e
		return self._written_subscriber(data, '', email, tags, metadata)

	async def find_subscriber_by_email(self, email: str) -> Subscriber | None:
		data = await self._request('GET', 'subscribers', params={'email': email})
		results = data.get('results') if isinstance(data, dict) else None
		if not isinstance(results, list):
			raise UpstreamError(f'Unexpected Buttondown search response: {data!r:.200}')
		if not results:
			return None
		if not isinstance(results[0], dict):
			raise UpstreamError(f'Unexpected Buttondown subscriber entry: {results[0]!r:.200}')
		return self._to_subscriber(results[0], email)

	async def patch_subscriber(
		self, subscriber_id: str, tags: list[str], metadata: dict[str, str]
	) -> Subscriber:
		data = await self._request(
			'PATCH',
			f'subscribers/{subscriber_id}',
			payload={'tags': tags, 'metadata': metadata},
		)
		return self._written_subscriber(data, subscriber_id, '', tags, metadata)

	def _written_subscriber(
		self,
		data: object,
		subscriber_id: str,
		email: str,
		tags: list[str],
		metadata: dict[str, str],
	) -> Subscriber:
		# 2xx: the write was applied even when the body is not an object.
		if isinstance(data, dict):
			return self._to_subscriber(data, email)
		logger.warning(f'Buttondown returned a non-object body after a successful write: {data!r:.200}')
		return Subscriber(id=subscriber_id, email=email, tags=list(tags), metadata=dict(metadata))

	@staticmethod
	def _to_subscriber(data: dict, email: str) -> Subscriber:
		return Subscriber(
			id=str(data.get('id', '')),
			email=data.get('email_address') or data.get('email') or email,
			tags=list(data.get('tags') or []),
			metadata=dict(data.get('metadata') or {}),
		)
