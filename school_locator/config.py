"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Database (MySQL by default)
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "school_locator"
    db_port: int = 3306
    database_url: Optional[str] = None  # full override, e.g. sqlite+aiosqlite://

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api/schools"

    # Rate limiting
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+aiomysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


settings = Settings()
