from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.rate import ProviderError
from domain.models.rate import Observation

MISSING_VALUE = '.'
OBSERVATION_WINDOW = 14


class FredProvider:
	BASE_URL = 'https://api.stlouisfed.org/fred'

	def __init__(self, api_key: str, client: httpx.AsyncClient):
		self.api_key = api_key
		self._client = client

	async def _request(self, endpoint: str, params: dict) -> dict:
		if not self.api_key:
			raise ProviderError('FRED API key is not configured')

		params['api_key'] = self.api_key
		params['file_type'] = 'json'
		url = f'{self.BASE_URL}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'FRED HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'FRED request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'FRED response parsing error: {str(e)}') from e

	async def fetch_latest_observation(self, series_id: str) -> Observation:
		"""Most recent observation of `series_id` that carries a real value."""
		data = await self._request(
			'series/observations',
			{'series_id': series_id, 'sort_order': 'desc', 'limit': OBSERVATION_WINDOW},
		)

		observations = data.get('observations') if isinstance(data, dict) else None
		if not isinstance(observations, list) or not observations:
			raise ProviderError(f'No observations returned for {series_id}')

		latest = next(
			(
				o
				for o in observations
				if isinstance(o, dict) and o.get('value') and o['value'] != MISSING_VALUE
			),
			None,
		)
		if latest is None:
			raise ProviderError(f'No valid observation for {series_id}')

		try:
			value = Decimal(str(latest['value']).strip())
		except InvalidOperation as e:
			raise ProviderError(f'Unparseable observation value: {latest["value"]!r}') from e
		if not value.is_finite():
			raise ProviderError(f'Non-finite observation value: {latest["value"]!r}')

		return Observation(date=latest.get('date'), value=value)
