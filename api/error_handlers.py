import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.exceptions.subscription import (
	ConfigurationError,
	NotFoundError,
	UpstreamError,
	ValidationError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(StarletteHTTPException)
	async def http_exception_handler(request: Request, exc: StarletteHTTPException):
		return JSONResponse(
			status_code=exc.status_code,
			content={'error': exc.detail},
			headers=getattr(exc, 'headers', None),
		)

	@app.exception_handler(ValidationError)
	async def validation_error_handler(request: Request, exc: ValidationError):
		logger.warning(f'Rejected subscription on {request.url.path}: {exc}')
		return JSONResponse(status_code=400, content={'error': str(exc)})

	@app.exception_handler(ConfigurationError)
	async def configuration_error_handler(request: Request, exc: ConfigurationError):
		logger.error(f'Configuration error: {exc}')
		return JSONResponse(
			status_code=500, content={'error': 'Subscription service is not configured'}
		)

	@app.exception_handler(NotFoundError)
	async def not_found_error_handler(request: Request, exc: NotFoundError):
		logger.error(f'Upstream inconsistency: {exc}')
		return JSONResponse(status_code=500, content={'error': str(exc)})

	@app.exception_handler(UpstreamError)
	async def upstream_error_handler(request: Request, exc: UpstreamError):
		logger.error(f'Mailing list error: {exc}')
		return JSONResponse(
			status_code=500,
			content={'error': str(exc) or 'Failed to subscribe. Please try again.'},
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'error': 'Internal server error'})
