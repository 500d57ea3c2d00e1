from __future__ import annotations
from typing import IO, List, Sequence

from .errors import MissingInput
from .models import RideRecord
from .store import RideStore

REPORT_COLUMNS = ("ts", "meters", "seconds", "meanspeed", "maxspeed", "cadence", "ts_dist", "ts_time")


def read_record(stream: IO[str]) -> RideRecord:
    line = stream.readline()
    if not line or not line.rstrip("\r\n"):
        raise MissingInput("no ride record on standard input")
    return RideRecord.from_csv_line(line)


def _cells(r: RideRecord) -> List[str]:
    ts = r.timestamp.strftime("%Y-%m-%d %H:%M:%S") if r.timestamp else ""
    return [ts, str(r.distance_meters), str(r.duration_seconds), f"{r.mean_speed:g}",
            f"{r.max_speed:g}", str(r.cadence), str(r.lifetime_distance), str(r.lifetime_duration)]


def render_report(count: int, rows: Sequence[RideRecord]) -> str:
    table = [list(REPORT_COLUMNS)] + [_cells(r) for r in rows]
    widths = [max(len(row[i]) for row in table) for i in range(len(REPORT_COLUMNS))]
    def fmt(row):
        return "  ".join(c.ljust(w) for c, w in zip(row, widths)).rstrip()
    lines = [f"total records:  {count}", "last records:", fmt(table[0]),
             "  ".join("-" * w for w in widths)]
    lines += [fmt(row) for row in table[1:]]
    return "\n".join(lines) + "\n"


def record_ride(stream: IO[str], store: RideStore, out: IO[str], quiet: bool = False) -> RideRecord:
    record = store.insert_ride(read_record(stream))
    if not quiet:
        out.write(render_report(store.count(), store.recent(4)))
    return record
