"""
OSM constants
"""

TAG_LANES = "lanes"
TAG_HIGHWAY = "highway"
TAG_MAXSPEED = "maxspeed"
TAG_JUNCTION = "junction"
TAG_ONEWAY = "oneway"

FALLBACK_HIGHWAY = "unclassified"
ROUNDABOUT = "roundabout"
MPH_SUFFIX = "mph"

ONEWAY_FORWARD_VALUES = ("yes", "true", "1")
ONEWAY_REVERSE_VALUE = "-1"
ONEWAY_NO_VALUE = "no"

# classes whose single default lane means "one lane in total" when the road is one-way
LANE_BUMP_HIGHWAYS = ("trunk", "primary", "secondary")

MOTORWAY_LINK_RATIO = 80.0 / 120
PRIMARY_LINK_RATIO = 60.0 / 80
TRUNK_LINK_RATIO = 50.0 / 80
SECONDARY_LINK_RATIO = 0.66
TERTIARY_LINK_RATIO = 0.66

# highway -> (hierarchy, lanes per direction, reference speed [mph], link ratio, lane capacity [veh/h], oneway)
DEFAULT_HIGHWAYS = {
    "motorway": (1, 2, 75, 1.0, 2500, True),
    "motorway_link": (1, 1, 75, MOTORWAY_LINK_RATIO, 2000, True),
    "primary": (3, 1, 65, 1.0, 2300, False),
    "primary_link": (3, 1, 65, PRIMARY_LINK_RATIO, 1800, False),
    "trunk": (2, 1, 60, 1.0, 2200, False),
    "trunk_link": (2, 1, 60, TRUNK_LINK_RATIO, 1500, False),
    "secondary": (4, 1, 60, 1.0, 2200, False),
    "secondary_link": (4, 1, 60, SECONDARY_LINK_RATIO, 1500, False),
    "tertiary": (5, 1, 55, 1.0, 2100, False),
    "tertiary_link": (5, 1, 55, TERTIARY_LINK_RATIO, 1500, False),
    "minor": (6, 1, 25, 1.0, 1000, False),
    "residential": (6, 1, 25, 1.0, 1000, False),
    "living_street": (6, 1, 25, 1.0, 1000, False),
    "unclassified": (6, 1, 28, 1.0, 800, False),
}
DEFAULT_FREESPEED_FACTOR = 1.0

KMH_PER_MS = 3.6
METERS_PER_MILE = 1609.34
