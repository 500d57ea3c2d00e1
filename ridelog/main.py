"""Console entry points.

    sds-data --raw --clear --wait-remove | ride-record
    sds-data --clear --wait-remove | ride-announce
    ride-summary --last | ride-announce
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .announcer import announce
from .config import Settings, parse_delay
from .db import build_engine
from .errors import MissingInput, RideError
from .logging_config import setup_logging
from .models import RideRecord
from .pacing import Pacer
from .poster import CommandPoster
from .recorder import record_ride
from .store import SqlRideStore
from .summary import format_summary

log = logging.getLogger("ridelog")


def _run(stage: Callable[[], int]) -> int:
    try:
        return stage()
    except RideError as e:
        log.error("%s: %s", type(e).__name__, e)
        return e.exit_code


def _delay_arg(text: str) -> float:
    try:
        return parse_delay(text)
    except RideError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def record_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ride-record",
                                     description="Store one raw ride line from stdin in the trip database.")
    parser.add_argument("--quiet", action="store_true", help="do not print the record count and last rides")
    parser.add_argument("--db-url", help="SQLAlchemy URL (default: DATABASE_URL or RIDELOG_DB_PATH)")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    def stage() -> int:
        store = SqlRideStore(build_engine(args.db_url, settings))
        record_ride(sys.stdin, store, sys.stdout, quiet=args.quiet)
        return 0

    return _run(stage)


def announce_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ride-announce",
                                     description="Post a ride summary read from stdin as a status update.")
    parser.add_argument("--command", help="posting client executable (default: RIDELOG_POST_COMMAND or oysttyer)")
    parser.add_argument("--delay", type=_delay_arg, help="seconds to wait before posting (default: 3)")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    def stage() -> int:
        pacer = Pacer(args.delay if args.delay is not None else settings.post_delay)
        poster = CommandPoster(args.command or settings.post_command)
        return announce(sys.stdin, poster, pacer, sys.stdout)

    return _run(stage)


def summary_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ride-summary",
                                     description="Turn a raw ride line into labelled summary lines.")
    parser.add_argument("--last", action="store_true", help="use the most recent stored ride instead of stdin")
    parser.add_argument("--miles", action="store_true", help="convert kilometers to miles")
    parser.add_argument("--no-ts", dest="ts", action="store_false", help="leave out the lifetime totals")
    parser.add_argument("--no-zeros", dest="zeros", action="store_false", help="leave out zero-valued fields")
    parser.add_argument("--db-url", help="SQLAlchemy URL, used with --last")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    def stage() -> int:
        if args.last:
            record = SqlRideStore(build_engine(args.db_url, settings)).last()
            if record is None:
                raise MissingInput("no rides stored yet")
        else:
            line = sys.stdin.readline()
            if not line.strip():
                raise MissingInput("no ride record on standard input")
            record = RideRecord.from_csv_line(line)
        for text in format_summary(record, miles=args.miles, ts=args.ts, zeros=args.zeros):
            print(text)
        return 0

    return _run(stage)

