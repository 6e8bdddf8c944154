import re
from math import isfinite
from typing import Optional, Tuple

from .._map_util.osm_const import *

__all__ = [
    "to_meters_per_second",
    "parse_oneway",
    "parse_maxspeed",
    "parse_lanes",
]


def to_meters_per_second(miles_per_hour: float) -> float:
    return miles_per_hour * METERS_PER_MILE / 3600


_DECIMAL = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def _parse_float(value: str) -> float:
    if _DECIMAL.fullmatch(value) is None:
        raise ValueError(f"could not convert string to float: {value!r}")
    number = float(value)
    if not isfinite(number):
        raise ValueError(f"could not convert string to finite float: {value!r}")
    return number


def parse_oneway(value: str) -> Optional[Tuple[bool, bool]]:
    """
    Interpret the value of the OSM `oneway` tag (case-sensitive).

    Returns:
    - (oneway, oneway_reverse), or None if the value is not recognized.
    """
    if value in ONEWAY_FORWARD_VALUES:
        return True, False
    if value == ONEWAY_REVERSE_VALUE:
        return False, True
    if value == ONEWAY_NO_VALUE:
        return False, False
    return None


def parse_maxspeed(value: str) -> float:
    """
    Parse the OSM `maxspeed` tag into m/s.
    A trailing `mph` marks miles per hour, anything else is read as km/h.

    Raises:
    - ValueError: the value is not a number.
    """
    if value.endswith(MPH_SUFFIX):
        return to_meters_per_second(_parse_float(value.replace(MPH_SUFFIX, "").strip()))
    return _parse_float(value) / KMH_PER_MS


def parse_lanes(value: str) -> float:
    """
    Parse the OSM `lanes` tag, the total number of lanes in both directions.

    Raises:
    - ValueError: the value is not a number.
    """
    return _parse_float(value)
