from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import math
import os

from .errors import MalformedInput

DEFAULT_DB_PATH = "tripdatabase.sqlite3"
DEFAULT_POST_COMMAND = "oysttyer"
DEFAULT_POST_DELAY = 3.0


def _get(env: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    v = (env.get(name) or "").strip()
    return v or default


def parse_delay(text: str) -> float:
    try:
        delay = float(text)
    except ValueError:
        raise MalformedInput(f"post delay is not a number: {text!r}") from None
    if not math.isfinite(delay) or delay < 0:
        raise MalformedInput(f"post delay must be a non-negative number of seconds: {text!r}")
    return delay


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str] = None
    db_path: str = DEFAULT_DB_PATH
    post_command: str = DEFAULT_POST_COMMAND
    # kept as text so only the stage that posts rejects a bad value
    post_delay_text: Optional[str] = None
    log_level: str = "WARNING"

    @property
    def post_delay(self) -> float:
        if self.post_delay_text is None:
            return DEFAULT_POST_DELAY
        return parse_delay(self.post_delay_text)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            database_url=_get(env, "DATABASE_URL"),
            db_path=_get(env, "RIDELOG_DB_PATH", DEFAULT_DB_PATH),
            post_command=_get(env, "RIDELOG_POST_COMMAND", DEFAULT_POST_COMMAND),
            post_delay_text=_get(env, "RIDELOG_POST_DELAY"),
            log_level=_get(env, "RIDELOG_LOG_LEVEL", "WARNING").upper(),
        )
