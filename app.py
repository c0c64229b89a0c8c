import logging

from flask import Flask, current_app, jsonify, render_template, request

from config import Settings
from models import db
import dashboard
import store
import weather_api as weather_api

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "City not found!"


def _settings():
    return current_app.extensions["weather_settings"]


# Fetches the forecast and records it. A failed write is logged but the
# forecast is still handed back to the caller.
def lookup_forecast(city, settings):
    forecast = weather_api.fetch_forecast(city, settings)
    saved = store.upsert_forecast(city, forecast.raw)
    if not saved.ok:
        logger.error("Returning forecast for %r without persisting it: %s", city, saved.error)
    return forecast


# App factory: builds configuration once, initializes the database, and registers routes.
def create_app(settings=None):
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["SQLALCHEMY_DATABASE_URI"] = settings.database_url
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.extensions["weather_settings"] = settings

    if not settings.api_key:
        logger.warning("OPENWEATHER_API_KEY is not set; forecast lookups will fail")

    db.init_app(app)

    with app.app_context():
        db.create_all()
        logger.info("Database ready at %s", db.engine.url.render_as_string(hide_password=True))

    @app.route("/api/weather/history", methods=["GET"])
    def history():
        result = store.recent_forecasts(limit=_settings().history_limit)
        if not result.ok:
            return jsonify([]), 500
        return jsonify([record.to_dict() for record in result.value])

    @app.route("/api/weather/<city>", methods=["GET"])
    def forecast(city):
        try:
            found = lookup_forecast(city, _settings())
        except weather_api.WeatherAPIError:
            return jsonify({"error": NOT_FOUND_MESSAGE}), 500
        return jsonify(found.raw)

    # Dashboard page. The form submits ?city=..., and the result is rendered server-side.
    @app.route("/", methods=["GET"])
    def index():
        city = request.args.get("city", "")
        current = charts = error = None

        if city.strip():
            try:
                found = lookup_forecast(city, _settings())
            except weather_api.WeatherAPIError:
                error = dashboard.ERROR_MESSAGE
            else:
                current = dashboard.current_conditions(found)
                if current is None:
                    error = dashboard.ERROR_MESSAGE
                else:
                    charts = dashboard.chart_data(found)

        recent = store.recent_forecasts(limit=_settings().history_limit)
        return render_template(
            "index.html",
            city=city,
            current=current,
            charts=charts,
            error=error,
            history=recent.value if recent.ok else [],
        )

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.port)
