import logging
from typing import Dict, Iterator, List, Optional

from ...type import HighwayType, RoadClassDefaults
from .._map_util.osm_const import *
from ._wayutil import to_meters_per_second

__all__ = ["HighwayDefaults"]


class HighwayDefaults:
    """
    Default link attributes for every OSM highway type
    """

    def __init__(
        self,
        use_default_highways: bool = True,
        type_to_speed: Optional[Dict[HighwayType, float]] = None,
    ):
        """
        Args:
        - use_default_highways (bool): fill the table with the built-in highway ladder.
        - type_to_speed (dict): HighwayType -> free speed [m/s], replaces the built-in speed of that type.
        """
        self._defaults: Dict[str, RoadClassDefaults] = {}
        if use_default_highways:
            logging.info("Falling back to default values.")
            type_to_speed = type_to_speed or {}
            for highway, (
                hierarchy,
                lanes,
                speed_mph,
                link_ratio,
                lane_capacity,
                oneway,
            ) in DEFAULT_HIGHWAYS.items():
                freespeed = type_to_speed.get(
                    HighwayType(highway),
                    link_ratio * to_meters_per_second(speed_mph),
                )
                self.set_defaults(
                    hierarchy,
                    highway,
                    lanes,
                    freespeed,
                    DEFAULT_FREESPEED_FACTOR,
                    lane_capacity,
                    oneway,
                )

    @classmethod
    def from_speed_table(
        cls,
        table: Dict[str, float],
        unit: str = "m/s",
        use_default_highways: bool = True,
    ) -> "HighwayDefaults":
        """
        Build the table from highway label -> speed, e.g. loaded from a JSON file.

        Args:
        - table (dict): highway label -> speed.
        - unit (str): unit of the speeds, 'm/s', 'km/h' or 'mph'.
        - use_default_highways (bool): fill the table with the built-in highway ladder.
        """
        if unit == "m/s":
            convert = lambda v: float(v)
        elif unit == "km/h":
            convert = lambda v: float(v) / KMH_PER_MS
        elif unit == "mph":
            convert = lambda v: to_meters_per_second(float(v))
        else:
            raise ValueError(f"Unknown speed unit {unit}")
        type_to_speed = {}
        for highway, speed in table.items():
            highway_type = HighwayType.from_tag(highway)
            if highway_type is None:
                raise ValueError(f"Unknown highway type {highway} in speed table")
            type_to_speed[highway_type] = convert(speed)
        return cls(use_default_highways, type_to_speed)

    def set_defaults(
        self,
        hierarchy: int,
        highway: str,
        lanes_per_direction: float,
        freespeed: float,
        freespeed_factor: float,
        lane_capacity: float,
        oneway: bool = False,
    ):
        """
        Insert or replace the defaults of one highway type. Values are not checked.

        Args:
        - hierarchy (int): hierarchy layer of the highway, lower is more important.
        - highway (str): OSM highway type, e.g. 'primary'.
        - lanes_per_direction (float): number of lanes in each direction.
        - freespeed (float): free speed [m/s].
        - freespeed_factor (float): factor the free speed can be scaled by.
        - lane_capacity (float): capacity per lane [veh/h].
        - oneway (bool): whether the highway type is oneway by default.
        """
        self._defaults[highway] = RoadClassDefaults(
            hierarchy=hierarchy,
            lanes_per_direction=lanes_per_direction,
            freespeed=freespeed,
            freespeed_factor=freespeed_factor,
            lane_capacity=lane_capacity,
            oneway=oneway,
        )

    def get(self, highway: str) -> Optional[RoadClassDefaults]:
        return self._defaults.get(highway)

    def by_hierarchy(self) -> List[str]:
        """highway types ordered from the most to the least important"""
        return sorted(self._defaults, key=lambda h: self._defaults[h].hierarchy)

    def __getitem__(self, highway: str) -> RoadClassDefaults:
        return self._defaults[highway]

    def __contains__(self, highway: object) -> bool:
        return highway in self._defaults

    def __iter__(self) -> Iterator[str]:
        return iter(self._defaults)

    def __len__(self) -> int:
        return len(self._defaults)
