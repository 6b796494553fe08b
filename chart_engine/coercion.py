"""Numeric coercion of chart x-axis values."""

import math
import re
from datetime import date, datetime, timezone
from numbers import Real
from typing import Any, List, Mapping, Sequence, Tuple

# Leading numeric prefix, e.g. "12.5kPa" -> 12.5
_FLOAT_PREFIX = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _datetime_to_ms(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH).total_seconds() * 1000.0


def _parse_string(value: str) -> float:
    text = value.strip()
    if not text:
        return 0.0

    try:
        return _datetime_to_ms(datetime.fromisoformat(text))
    except ValueError:
        pass

    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


def to_number(value: Any) -> float:
    """
    Convert an x-axis value to a float usable in distance/area math.

    Numbers pass through, datetimes become epoch milliseconds (naive values
    are read as UTC), strings are parsed as ISO dates and then as a leading
    float. Anything unparseable becomes 0.0. Never raises.

    Args:
        value: Number, ISO date string, datetime or date

    Returns:
        Finite float
    """
    # bool is a Real subclass but not a coordinate
    if isinstance(value, bool):
        return 0.0

    try:
        if isinstance(value, Real):
            result = float(value)
        elif isinstance(value, datetime):
            result = _datetime_to_ms(value)
        elif isinstance(value, date):
            result = _datetime_to_ms(datetime(value.year, value.month, value.day))
        elif isinstance(value, str):
            result = _parse_string(value)
        else:
            return 0.0
    except (ValueError, OverflowError, TypeError):
        return 0.0

    return result if math.isfinite(result) else 0.0


def extract_xy(series: Sequence[Mapping[str, Any]]) -> Tuple[List[float], List[float]]:
    """Coerce a series once into parallel x and y float lists."""
    xs = [to_number(p["x"]) for p in series]
    ys = [float(p["y"]) for p in series]
    return xs, ys
