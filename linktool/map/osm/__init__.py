"""
Resolve network link attributes from the tags of OSM ways
"""

from .highway_defaults import HighwayDefaults
from .link_resolver import LinkAttributeResolver

__all__ = ["HighwayDefaults", "LinkAttributeResolver"]
