from .requests import SubscribeRequest
from .responses import ErrorResponse, RateQuoteResponse, SubscribeResponse

__all__ = [
	'ErrorResponse',
	'RateQuoteResponse',
	'SubscribeRequest',
	'SubscribeResponse',
]
