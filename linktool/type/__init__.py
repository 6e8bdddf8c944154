"""
Frequently Used Types
"""

from .highway import HighwayType
from .link import LinkRecord, RawSegment, RoadClassDefaults

__all__ = [
    "HighwayType",
    "RoadClassDefaults",
    "RawSegment",
    "LinkRecord",
]
