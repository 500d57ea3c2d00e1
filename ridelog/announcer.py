from __future__ import annotations
from typing import IO, List, Sequence, Tuple

from .errors import MalformedInput, MissingInput
from .pacing import Pacer
from .poster import StatusPoster

Pair = Tuple[str, str]


def read_pairs(stream: IO[str]) -> List[Pair]:
    lines = stream.readlines()
    if not lines:
        raise MissingInput("no ride summary on standard input")
    pairs: List[Pair] = []
    for line in lines:
        label, sep, value = line.rstrip("\r\n").partition(": ")
        # a line without a label stands for itself
        pairs.append((label, value) if sep else (label, label))
    return pairs


def build_status(pairs: Sequence[Pair]) -> str:
    if len(pairs) < 4:
        raise MalformedInput(f"ride summary needs at least 4 lines, got {len(pairs)}")
    v = [value for _, value in pairs]
    t = f"Today's #cycling stats: {v[0]} in {v[1]} (mean: {v[2]}, max: {v[3]})"
    # strict label check: a reordered or missing cadence line is left out
    if len(pairs) > 4 and pairs[4][0] == "cadence":
        t += f"; cadence: {v[4]}"
    t += f". Grand total: {v[-2]} in {v[-1]}"
    return t


def announce(stream: IO[str], poster: StatusPoster, pacer: Pacer, out: IO[str]) -> int:
    status = build_status(read_pairs(stream))
    out.write(f"!--tweeting[{len(status)}]: {status}\n")
    out.flush()
    pacer.wait()
    return poster.post_status(status)
