import dashboard
import weather_api as wa

def decode(payload):
    return wa.Forecast.from_json(payload)

def test_daily_samples_take_every_eighth_entry(make_payload):
    forecast = decode(make_payload(count=40))
    samples = dashboard.daily_samples(forecast.entries)
    assert len(samples) == 5
    assert samples == [forecast.entries[i] for i in (0, 8, 16, 24, 32)]

def test_daily_samples_of_short_list(make_payload):
    forecast = decode(make_payload(count=9))
    assert len(dashboard.daily_samples(forecast.entries)) == 2
    assert dashboard.daily_samples([]) == []

def test_precipitation_defaults_to_zero(make_payload):
    forecast = decode(make_payload(count=16, rain_every=16))
    samples = dashboard.daily_samples(forecast.entries)
    assert dashboard.precipitation_series(samples) == [1.25, 0]

def test_temperature_series_is_rounded(make_payload):
    forecast = decode(make_payload(count=17))
    samples = dashboard.daily_samples(forecast.entries)
    # 10.0, 14.0, 18.0
    assert dashboard.temperature_series(samples) == [10, 14, 18]

def test_chart_data_labels(make_payload):
    charts = dashboard.chart_data(decode(make_payload(count=40)))
    assert charts["labels"] == ["Mon, Jan 6", "Tue, Jan 7", "Wed, Jan 8", "Thu, Jan 9", "Fri, Jan 10"]
    assert len(charts["temperature"]) == len(charts["precipitation"]) == 5

def test_current_conditions(make_payload):
    current = dashboard.current_conditions(decode(make_payload(name="Chandigarh", country="IN")))
    assert current["city"] == "Chandigarh"
    assert current["country"] == "IN"
    assert current["temp"] == 10
    assert current["feels_like"] == 8
    assert current["icon_url"] == "https://openweathermap.org/img/wn/10d@4x.png"
    assert current["pressure"] == 1012

def test_current_conditions_without_entries(make_payload):
    assert dashboard.current_conditions(decode(make_payload(count=0))) is None

def test_halves_round_up(make_payload):
    payload = make_payload(count=9)
    payload["list"][0]["main"].update(temp=2.5, feels_like=0.5)
    payload["list"][8]["main"]["temp"] = -2.5
    forecast = decode(payload)

    current = dashboard.current_conditions(forecast)
    assert current["temp"] == 3
    assert current["feels_like"] == 1
    assert dashboard.temperature_series(dashboard.daily_samples(forecast.entries)) == [3, -2]
