import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

import requests
from requests import RequestException

logger = logging.getLogger(__name__)

UNITS = "metric"


class WeatherAPIError(RuntimeError):
    """Raised for any failure talking to the forecast provider."""


@dataclass(frozen=True)
class CityInfo:
    name: str
    country: str | None = None


@dataclass(frozen=True)
class ForecastEntry:
    dt: int
    temp: float
    feels_like: float | None
    humidity: float | None
    pressure: float | None
    description: str
    icon: str | None
    wind_speed: float | None
    rain_3h: float = 0.0

    @property
    def when(self):
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)

    @classmethod
    def from_json(cls, item):
        main = item["main"]
        weather = (item.get("weather") or [{}])[0]
        wind = item.get("wind") or {}
        rain = item.get("rain") or {}
        return cls(
            dt=int(item["dt"]),
            temp=float(main["temp"]),
            feels_like=main.get("feels_like"),
            humidity=main.get("humidity"),
            pressure=main.get("pressure"),
            description=weather.get("description", ""),
            icon=weather.get("icon"),
            wind_speed=wind.get("speed"),
            rain_3h=float(rain.get("3h") or 0),
        )


@dataclass(frozen=True)
class Forecast:
    """Decoded provider payload. ``raw`` is the body exactly as received."""

    city: CityInfo
    entries: list[ForecastEntry]
    raw: dict = field(repr=False, compare=False)

    @classmethod
    def from_json(cls, payload):
        city = payload["city"]
        return cls(
            city=CityInfo(name=city["name"], country=city.get("country")),
            entries=[ForecastEntry.from_json(item) for item in payload["list"]],
            raw=payload,
        )


# Returns the decoded 5-day/3-hour forecast for a city, or raises WeatherAPIError.
def fetch_forecast(city: str, settings) -> Forecast:
    """
    Query the provider's /forecast endpoint for `city` in metric units.
    No retries; the request timeout is the transport default unless
    `settings.timeout` is set.
    """
    url = f"{settings.provider_url}/forecast"
    params = {"q": city, "appid": settings.api_key, "units": UNITS}
    try:
        response = requests.get(url, params=params, timeout=settings.timeout)
        response.raise_for_status()
        payload = response.json()
    except (RequestException, ValueError) as e:
        logger.warning("Forecast request for %r failed: %s", city, e)
        raise WeatherAPIError(f"Forecast request failed: {e}") from e

    try:
        return Forecast.from_json(payload)
    except (KeyError, TypeError, IndexError, ValueError, AttributeError) as e:
        logger.warning("Unexpected forecast payload for %r: %r", city, e)
        raise WeatherAPIError(f"Malformed forecast payload: {e!r}") from e
