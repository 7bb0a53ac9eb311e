import re
from datetime import datetime

from .. import config
from ..exceptions import ParseError

_PREFIX_RE = re.compile(config.TIMESTAMP_PATTERN, re.ASCII)


def parse_captured_at(stem: str) -> datetime:
    """
    Parses the capture instant encoded in the first 16 characters of a stem.

    '210101_120000100_extra' -> datetime(2021, 1, 1, 12, 0, 0, 100000)

    Two-digit years follow the strftime %y pivot: 00-68 -> 20xx, 69-99 -> 19xx.

    Raises:
        ParseError: stem too short, prefix not YYMMDD_HHMMSSmmm, or fields out of range.
    """
    if len(stem) < config.TIMESTAMP_PREFIX_LEN:
        raise ParseError(f"Failed to parse datetime from stem: {stem} (too short)")

    match = _PREFIX_RE.match(stem[:config.TIMESTAMP_PREFIX_LEN])
    if not match:
        raise ParseError(f"Failed to parse datetime from stem: {stem}")

    yy, month, day, hour, minute, second, millis = (int(g) for g in match.groups())
    year = 2000 + yy if yy < 69 else 1900 + yy

    # strptime would accept single-digit fields, so build from the fixed-width groups
    try:
        return datetime(year, month, day, hour, minute, second, millis * 1000)
    except ValueError as e:
        raise ParseError(f"Failed to parse datetime from stem: {stem} ({e})") from e
