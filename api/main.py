import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import rate, static, subscribe
from config.logging import setup_logging
from config.settings import get_settings

settings = get_settings()

setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting Mortgage Rate API...')

	init_dependencies()

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(
	CORSMiddleware,
	allow_origins=['*'],
	allow_methods=['GET', 'POST', 'OPTIONS'],
	allow_headers=['content-type'],
)

app.include_router(rate.router)
app.include_router(subscribe.router)
app.include_router(static.router)
register_exception_handlers(app)

if Path(settings.ASSETS_DIR).is_dir():
	app.mount('/assets', StaticFiles(directory=settings.ASSETS_DIR), name='assets')


def run() -> None:
	import uvicorn

	logger.info(f'Mortgage server listening on http://{settings.HOST}:{settings.PORT}')
	uvicorn.run('api.main:app', host=settings.HOST, port=settings.PORT, log_level='info')


if __name__ == '__main__':
	run()
