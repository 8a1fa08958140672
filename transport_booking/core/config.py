import logging
from typing import Optional

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class FallbackAccount(BaseModel):
    email: str
    password: str
    role: str
    name: str


class Settings(BaseSettings):
    APP_NAME: str = "Transport Booking API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    DB_HOST: str = "localhost"
    DB_USER: str = "root"
    DB_PASSWORD: str = "6383"
    DB_NAME: str = "transport_db"

    # Full SQLAlchemy URL, takes precedence over the DB_* parts
    DATABASE_URL: Optional[str] = None

    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: Optional[float] = None  # None: wait for a free connection forever
    LOGIN_DB_TIMEOUT: float = 5.0  # seconds

    # Accepted by /api/login when the database cannot be used
    DEMO_ACCOUNTS: list[FallbackAccount] = [
        FallbackAccount(email="user@example.com", password="user123", role="user", name="John Doe"),
        FallbackAccount(email="admin@example.com", password="admin123", role="admin", name="Admin User"),
    ]
    SEED_DEMO_DATA: bool = False

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return level

    @property
    def database_url(self) -> URL | str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            database=self.DB_NAME,
        )


settings = Settings()
