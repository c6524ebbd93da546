from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_rate_quote_service
from api.schemas import RateQuoteResponse
from application.services import RateQuoteService

router = APIRouter(prefix='/api', tags=['rate'])

CACHE_CONTROL = 'public, max-age=3600'


@router.get(
	'/rate',
	response_model=RateQuoteResponse,
	status_code=status.HTTP_200_OK,
	summary='Current mortgage rate quote',
)
async def get_rate(
	response: Response,
	service: Annotated[RateQuoteService, Depends(get_rate_quote_service)],
) -> RateQuoteResponse:
	quote = await service.get_quote()
	response.headers['Cache-Control'] = CACHE_CONTROL
	return RateQuoteResponse.from_quote(quote)
