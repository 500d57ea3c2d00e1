from typing import List, Optional, Protocol
import logging

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select

from .db import init_db, get_session
from .errors import DuplicateRide, StorageError
from .models import RideRecord

log = logging.getLogger(__name__)


class RideStore(Protocol):
    def insert_ride(self, record: RideRecord) -> RideRecord: ...
    def count(self) -> int: ...
    def recent(self, limit: int = 4) -> List[RideRecord]: ...
    def last(self) -> Optional[RideRecord]: ...


class SqlRideStore:
    """RideStore backed by the `data` table; creates it on first use."""

    def __init__(self, engine: Engine):
        self.engine = engine
        try:
            init_db(engine)
        except SQLAlchemyError as e:
            raise StorageError(f"cannot create table: {e}") from e

    def insert_ride(self, record: RideRecord) -> RideRecord:
        line = record.as_csv_line()
        with get_session(self.engine) as s:
            try:
                s.add(record); s.commit(); s.refresh(record)
            except IntegrityError as e:
                s.rollback()
                raise DuplicateRide(f"ride already stored: {line}") from e
            except SQLAlchemyError as e:
                s.rollback()
                raise StorageError(str(e)) from e
        log.info("stored ride %s at %s", line, record.timestamp)
        return record

    def count(self) -> int:
        with get_session(self.engine) as s:
            return s.exec(select(func.count()).select_from(RideRecord)).one()

    def recent(self, limit: int = 4) -> List[RideRecord]:
        with get_session(self.engine) as s:
            return list(s.exec(
                select(RideRecord).order_by(RideRecord.timestamp.desc()).limit(limit)
            ).all())

    def last(self) -> Optional[RideRecord]:
        rows = self.recent(1)
        return rows[0] if rows else None
