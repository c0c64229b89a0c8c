from datetime import datetime, timezone
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


class ForecastRecord(db.Model):
    __tablename__ = "weather_forecasts"

    id = db.Column(db.Integer, primary_key=True)
    city = db.Column(db.String(255), nullable=False, unique=True)
    data = db.Column(db.JSON, nullable=False)  # provider payload, as received

    timestamp = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    def to_dict(self):
        return {
            "city": self.city,
            "data": self.data,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }

    def __repr__(self):
        return f"<ForecastRecord {self.id} {self.city} {self.timestamp}>"
