from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.rate import RateQuote


class RateQuoteResponse(BaseModel):
	rate_percent: float = Field(..., description='Display rate: benchmark plus spread, one decimal')
	raw_percent: float | None = Field(None, description='Unadjusted benchmark observation')
	adjusted_added: float = Field(..., description='Spread added to the benchmark')
	observation_date: str | None = Field(None, description='Date of the benchmark observation')
	source: str = Field(..., description='Series identifier, or "fallback"')

	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'ratePercent': 6.8,
				'rawPercent': 6.3,
				'adjustedAdded': 0.5,
				'observationDate': '2026-10-15',
				'source': 'MORTGAGE30US',
			}
		},
	)

	@classmethod
	def from_quote(cls, quote: RateQuote) -> 'RateQuoteResponse':
		return cls(
			rate_percent=float(quote.rate_percent),
			raw_percent=float(quote.raw_percent) if quote.raw_percent is not None else None,
			adjusted_added=float(quote.adjusted_added),
			observation_date=quote.observation_date,
			source=quote.source,
		)


class SubscribeResponse(BaseModel):
	success: bool = Field(True)
	message: str = Field(..., description='User-facing confirmation')


class ErrorResponse(BaseModel):
	error: str
