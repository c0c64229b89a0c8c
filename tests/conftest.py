import pytest
from app import create_app
from config import Settings
from models import db

# Creates a Flask app with a temporary SQLite database for tests.
@pytest.fixture()
def settings(tmp_path):
    db_path = tmp_path / "test.db"
    return Settings(
        api_key="test-key",
        database_url=f"sqlite:///{db_path}",
        provider_url="https://weather.test/data/2.5",
        secret_key="test-secret",
        log_level="DEBUG",
    )

@pytest.fixture()
def app(settings):
    app = create_app(settings)
    app.config.update(TESTING=True)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()

@pytest.fixture()
def client(app):
    return app.test_client()

# Builds a provider payload with `count` three-hour entries starting 2025-01-06 00:00 UTC.
@pytest.fixture()
def make_payload():
    def _make(name="London", country="GB", count=40, rain_every=None):
        start = 1736121600
        entries = []
        for i in range(count):
            entry = {
                "dt": start + i * 3 * 3600,
                "main": {"temp": 10.0 + i * 0.5, "feels_like": 8.4, "humidity": 80, "pressure": 1012},
                "weather": [{"description": "light rain", "icon": "10d"}],
                "wind": {"speed": 4.1},
            }
            if rain_every and i % rain_every == 0:
                entry["rain"] = {"3h": 1.25}
            entries.append(entry)
        return {"cod": "200", "cnt": count, "city": {"name": name, "country": country}, "list": entries}
    return _make
