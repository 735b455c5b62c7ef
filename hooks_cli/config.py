"""
CLI configuration
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from hooks_builder.errors import ConfigError


class Settings(BaseSettings):
    """Settings read from the environment and a local .env file"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Compile service
    HOOKS_COMPILE_HOST: Optional[str] = None
    HOOKS_COMPILE_TIMEOUT: Optional[float] = None  # seconds, None = no client timeout

    # Debug stream
    HOOKS_DEBUG_HOST: Optional[str] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def _require(value: Optional[str], name: str) -> str:
    if not value:
        raise ConfigError(f"{name} is not set. Add it to your environment or .env file.")
    return value.rstrip("/")


def get_compile_host() -> str:
    return _require(get_settings().HOOKS_COMPILE_HOST, "HOOKS_COMPILE_HOST")


def get_debug_host() -> str:
    return _require(get_settings().HOOKS_DEBUG_HOST, "HOOKS_DEBUG_HOST")


def get_compile_timeout() -> Optional[float]:
    return get_settings().HOOKS_COMPILE_TIMEOUT
