"""
Persistence for fetched forecasts.

Both operations return a StoreResult instead of raising, so the routes
decide what the caller sees when the database is unavailable.
"""
import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from models import db, ForecastRecord, utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreResult:
    ok: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value=None):
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error):
        return cls(ok=False, error=str(error))


def _dialect_insert(dialect_name):
    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
        return insert
    if dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
        return insert
    return None


# Inserts the record for `city` or replaces its payload and timestamp.
def upsert_forecast(city: str, data: dict) -> StoreResult:
    now = utcnow()
    try:
        insert = _dialect_insert(db.engine.dialect.name)
        if insert is not None:
            statement = insert(ForecastRecord.__table__).values(city=city, data=data, timestamp=now)
            statement = statement.on_conflict_do_update(
                index_elements=["city"],
                set_={"data": statement.excluded["data"], "timestamp": statement.excluded["timestamp"]},
            )
            db.session.execute(statement)
        else:
            record = ForecastRecord.query.filter_by(city=city).first()
            if record is None:
                db.session.add(ForecastRecord(city=city, data=data, timestamp=now))
            else:
                record.data = data
                record.timestamp = now
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to store forecast for %r", city)
        return StoreResult.failure(e)

    logger.info("Stored forecast for %r", city)
    return StoreResult.success()


# Most recently written records, newest first.
def recent_forecasts(limit: int = 10) -> StoreResult:
    try:
        records = (
            ForecastRecord.query
            .order_by(ForecastRecord.timestamp.desc())
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("History error: %s", e)
        return StoreResult.failure(e)
    return StoreResult.success(records)
