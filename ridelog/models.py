import math
from typing import Optional
from datetime import datetime
from sqlalchemy import Column, DateTime, Float, Integer, UniqueConstraint
from sqlmodel import SQLModel, Field

from .errors import MalformedInput

# order of the comma-separated fields on the wire
CSV_FIELDS = (
    ("distance_meters", int),
    ("duration_seconds", int),
    ("mean_speed", float),
    ("max_speed", float),
    ("cadence", int),
    ("lifetime_distance", int),
    ("lifetime_duration", int),
)


class RideRecord(SQLModel, table=True):
    __tablename__ = "data"
    # same ride read twice from the unit must not be stored twice
    __table_args__ = (UniqueConstraint("meters", "seconds", "meanspeed", name="ride"),)

    timestamp: Optional[datetime] = Field(
        default_factory=datetime.now,
        sa_column=Column("ts", DateTime, primary_key=True),
    )
    distance_meters: int = Field(sa_column=Column("meters", Integer))
    duration_seconds: int = Field(sa_column=Column("seconds", Integer))
    mean_speed: float = Field(sa_column=Column("meanspeed", Float))
    max_speed: float = Field(sa_column=Column("maxspeed", Float))
    cadence: int = Field(sa_column=Column("cadence", Integer))
    lifetime_distance: int = Field(sa_column=Column("ts_dist", Integer))
    lifetime_duration: int = Field(sa_column=Column("ts_time", Integer))

    @classmethod
    def from_csv_line(cls, line: str) -> "RideRecord":
        parts = line.rstrip("\r\n").split(",")
        if len(parts) != len(CSV_FIELDS):
            raise MalformedInput(f"expected {len(CSV_FIELDS)} comma-separated fields, got {len(parts)}")
        values = {}
        for (name, conv), raw in zip(CSV_FIELDS, parts):
            try:
                values[name] = conv(raw.strip())
            except ValueError:
                raise MalformedInput(f"{name}: not a number: {raw.strip()!r}") from None
            # NaN is stored as NULL, which the unique ride constraint lets through
            if conv is float and not math.isfinite(values[name]):
                raise MalformedInput(f"{name}: not a finite number: {raw.strip()!r}")
        return cls(**values)

    def as_csv_line(self) -> str:
        return ",".join([
            str(self.distance_meters), str(self.duration_seconds),
            f"{self.mean_speed:.2f}", f"{self.max_speed:.2f}",
            str(self.cadence), str(self.lifetime_distance), str(self.lifetime_duration),
        ])
