from __future__ import annotations
from typing import List

from .models import RideRecord

MILE = 1.609344


def format_duration(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    return f"{hours}:{rest // 60:02d}:{rest % 60:02d}"


def format_distance(meters: int, unit: str) -> str:
    return f"{meters // 1000}.{(meters % 1000) // 10:02d} {unit}"


def format_speed(hundredths: int, unit: str) -> str:
    return f"{hundredths // 100}.{hundredths % 100:02d} {unit}"


def format_summary(record: RideRecord, miles: bool = False, ts: bool = True, zeros: bool = True) -> List[str]:
    """Render a ride as `label: value` lines, the format the announcer reads."""
    conv, udist, uspeed = (MILE, "mi", "mph") if miles else (1.0, "km", "km/hr")

    # speeds are handled as integer hundredths, as the unit reports them
    dist = int(record.distance_meters / conv)
    meansp = int(round(record.mean_speed * 100) / conv)
    maxsp = int(round(record.max_speed * 100) / conv)
    tsdist = int(record.lifetime_distance / conv)

    fields = [
        ("distance", dist, format_distance(dist, udist)),
        ("time", record.duration_seconds, format_duration(record.duration_seconds)),
        ("meanspeed", meansp, format_speed(meansp, uspeed)),
        ("maxspeed", maxsp, format_speed(maxsp, uspeed)),
        ("cadence", record.cadence, f"{record.cadence}/min"),
    ]
    if ts:
        fields += [
            ("ts_dist", tsdist, format_distance(tsdist, udist)),
            ("ts_time", record.lifetime_duration, format_duration(record.lifetime_duration)),
        ]
    return [f"{label}: {text}" for label, value, text in fields if value > 0 or zeros]
