"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Database
    db_driver: str = "postgresql+asyncpg"
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_user: str = "schools"
    db_password: str = "schools"
    db_name: str = "schools"

    # Connection pool
    db_pool_size: int = 10  # fixed capacity, no overflow
    db_pool_timeout: Optional[float] = None  # None = queue until a connection frees up

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def database_url(self) -> URL:
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


settings = Settings()
