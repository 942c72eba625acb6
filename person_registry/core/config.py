"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix mounted in front of every router.
        repository_stripes: Lock stripes used by the in-memory store.
        rate_limit_default: Default rate limit for all endpoints.
        host: Bind address used by the command-line server.
        port: Bind port used by the command-line server.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Person Registry"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""
    repository_stripes: int = 16
    rate_limit_default: str = "120/minute"
    host: str = "127.0.0.1"
    port: int = 8000


settings = Settings()
