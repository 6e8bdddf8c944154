"""
Link Network Tools
"""

from . import builder, gmns, osm

__all__ = [
    "builder",
    "gmns",
    "osm",
]
