import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_PROVIDER_URL = "https://api.openweathermap.org/data/2.5"


def _optional_float(value):
    value = (value or "").strip()
    return float(value) if value else None


def _int_or_default(value, default):
    value = (value or "").strip()
    return int(value) if value else default


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup."""

    api_key: str = ""
    database_url: str = "sqlite:///weather.db"
    port: int = 5000
    provider_url: str = DEFAULT_PROVIDER_URL
    timeout: float | None = None
    history_limit: int = 10
    log_level: str = "INFO"
    secret_key: str = "dev-secret"

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            load_dotenv()
            environ = os.environ

        database_url = environ.get("DATABASE_URL", "").strip() or cls.database_url
        # Heroku/Railway style URLs are not accepted by SQLAlchemy
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)

        return cls(
            api_key=environ.get("OPENWEATHER_API_KEY", "").strip(),
            database_url=database_url,
            port=_int_or_default(environ.get("PORT"), cls.port),
            provider_url=(environ.get("OPENWEATHER_URL", "").strip() or DEFAULT_PROVIDER_URL).rstrip("/"),
            timeout=_optional_float(environ.get("WEATHER_TIMEOUT")),
            history_limit=_int_or_default(environ.get("HISTORY_LIMIT"), cls.history_limit),
            log_level=environ.get("LOG_LEVEL", cls.log_level).upper(),
            secret_key=environ.get("SECRET_KEY", cls.secret_key),
        )
