from enum import Enum
from typing import Optional

__all__ = ["HighwayType"]


class HighwayType(Enum):
    """
    Road classes that have built-in defaults, valued by their OSM `highway` tag
    """

    MOTORWAY = "motorway"
    MOTORWAY_LINK = "motorway_link"
    PRIMARY = "primary"
    PRIMARY_LINK = "primary_link"
    TRUNK = "trunk"
    TRUNK_LINK = "trunk_link"
    SECONDARY = "secondary"
    SECONDARY_LINK = "secondary_link"
    TERTIARY = "tertiary"
    TERTIARY_LINK = "tertiary_link"
    MINOR = "minor"
    RESIDENTIAL = "residential"
    LIVING_STREET = "living_street"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def from_tag(cls, highway: str) -> Optional["HighwayType"]:
        try:
            return cls(highway)
        except ValueError:
            return None
