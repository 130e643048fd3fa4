from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr, field_validator
from sqlalchemy.engine.url import make_url, URL

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ASYNC_DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "postgresql+psycopg2": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "expense"
    DEBUG: bool = False
    LOG_LEVEL: LogLevel = "WARNING"

    # DB (DATABASE_URL wins over the individual parts)
    DATABASE_URL: SecretStr = SecretStr("")
    DB_NAME: str = "expenses"
    DB_USER: str = "postgres"
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_SSL: bool = False

    # -------- validators --------
    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("DB_PORT")
    @classmethod
    def _port_range(cls, v: int, info):
        if not 0 < v < 65536:
            raise ValueError(f"{info.field_name} must be between 1 and 65535")
        return v

    @field_validator("DB_NAME", "DB_HOST")
    @classmethod
    def _required_plain(cls, v, info):
        if not v:
            raise ValueError(f"{info.field_name} is required (set it in .env)")
        return v

    @property
    def DATABASE_DSN(self) -> URL:
        """
        Async SQLAlchemy URL for the ledger database.

        A plain ``postgresql://`` (or ``sqlite://``) DATABASE_URL is rewritten to
        its async driver; query arguments are dropped so nothing driver specific
        leaks into asyncpg.connect().
        """
        raw = self.DATABASE_URL.get_secret_value()
        if not raw:
            return URL.create(
                drivername="postgresql+asyncpg",
                username=self.DB_USER or None,
                password=self.DB_PASSWORD.get_secret_value() or None,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            )

        u = make_url(raw)
        return URL.create(
            drivername=ASYNC_DRIVERS.get(u.drivername, u.drivername),
            username=u.username,
            password=u.password,
            host=u.host,
            port=u.port,
            database=u.database,
        )

settings = Settings()
