"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Database credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - sqlalchemy_url() is the only place the final connection URL is assembled

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - URL, username, password and driver are separate variables; the driver is
      spliced into the URL only when the URL does not name one already
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql://localhost:5432/computers"
    database_username: str | None = None
    database_password: str | None = None
    database_driver: str | None = "asyncpg"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_schema: bool = True

    # HTTP
    request_timeout_seconds: float = 30.0
    cors_origins: list[str] = ["http://localhost:5173"]
    server_host: str = "127.0.0.1"
    server_port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def sqlalchemy_url(self) -> str:
        """Connection URL with driver and credentials applied."""
        url = make_url(self.database_url)
        if self.database_driver and "+" not in url.drivername:
            url = url.set(drivername=f"{url.drivername}+{self.database_driver}")
        if self.database_username:
            url = url.set(username=self.database_username)
        if self.database_password:
            url = url.set(password=self.database_password)
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
