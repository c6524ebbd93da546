from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	FRED_API_KEY: str = ''
	FRED_SERIES_ID: str = 'MORTGAGE30US'

	BUTTONDOWN_API_KEY: str = ''

	HTTP_TIMEOUT_SECONDS: float = 10
	RATE_CACHE_TTL_SECONDS: int = 3600

	ASSETS_DIR: str = 'assets'

	# Application
	APP_NAME: str = 'Mortgage Rate API'
	HOST: str = '0.0.0.0'
	PORT: int = 8001
	DEBUG: bool = False

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
