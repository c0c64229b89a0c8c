"""Values the dashboard page renders from a decoded forecast."""
import math

ENTRIES_PER_DAY = 8  # provider list is in 3-hour steps
ICON_URL = "https://openweathermap.org/img/wn/{icon}@4x.png"
ERROR_MESSAGE = "City not found or server error. Please try again."


# Halves round up, as in the browser: 2.5 -> 3, -2.5 -> -2.
def round_half_up(value):
    return math.floor(value + 0.5)


def daily_samples(entries, step=ENTRIES_PER_DAY):
    """One entry per day: indices 0, step, 2*step, ..."""
    return list(entries[::step])


def temperature_series(samples):
    return [round_half_up(entry.temp) for entry in samples]


def precipitation_series(samples):
    return [entry.rain_3h or 0 for entry in samples]


def day_label(entry):
    when = entry.when
    return f"{when:%a}, {when:%b} {when.day}"


def current_conditions(forecast):
    if not forecast.entries:
        return None
    now = forecast.entries[0]
    return {
        "city": forecast.city.name,
        "country": forecast.city.country,
        "icon_url": ICON_URL.format(icon=now.icon) if now.icon else None,
        "temp": round_half_up(now.temp),
        "description": now.description,
        "feels_like": round_half_up(now.feels_like) if now.feels_like is not None else None,
        "humidity": now.humidity,
        "wind_speed": now.wind_speed,
        "pressure": now.pressure,
    }


def chart_data(forecast):
    samples = daily_samples(forecast.entries)
    return {
        "labels": [day_label(entry) for entry in samples],
        "temperature": temperature_series(samples),
        "precipitation": precipitation_series(samples),
    }
