"""Shared fixtures: a throwaway SQLite store and fakes for the posting side."""

from __future__ import annotations

import pytest

from ridelog.db import build_engine
from ridelog.store import SqlRideStore

RAW_LINE = "3060,752,15.27,23.19,63,97080,22313\n"

SUMMARY_LINES = [
    "distance: 3.06 km",
    "time: 0:12:32",
    "meanspeed: 15.27 km/hr",
    "maxspeed: 23.19 km/hr",
    "cadence: 63/min",
    "ts_dist: 97.08 km",
    "ts_time: 6:11:53",
]


class FakePoster:
    def __init__(self, status: int = 0):
        self.status = status
        self.posted: list[str] = []

    def post_status(self, text: str) -> int:
        self.posted.append(text)
        return self.status


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now
        self.sleeps: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'tripdatabase.sqlite3'}"


@pytest.fixture
def store(db_url):
    return SqlRideStore(build_engine(db_url))


@pytest.fixture
def poster():
    return FakePoster()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for name in ("DATABASE_URL", "RIDELOG_DB_PATH", "RIDELOG_POST_COMMAND",
                 "RIDELOG_POST_DELAY", "RIDELOG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
