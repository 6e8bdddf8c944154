from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Hashable

__all__ = ["RoadClassDefaults", "RawSegment", "LinkRecord"]


@dataclass(frozen=True)
class RoadClassDefaults:
    hierarchy: int  # lower is more important
    lanes_per_direction: float
    freespeed: float  # [m/s]
    freespeed_factor: float
    lane_capacity: float  # [veh/h] per lane
    oneway: bool = False


@dataclass(frozen=True)
class RawSegment:
    """
    One OSM way (or a piece of it) handed over by the topology builder
    """

    tags: Dict[str, str]
    osm_id: int
    topo_id: int
    from_node: Hashable
    to_node: Hashable
    length: float  # [m]
    modes: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class LinkRecord:
    """
    Fully attributed link, ready to be inserted into the target network
    """

    id: str
    from_node: Hashable
    to_node: Hashable
    length: float  # [m]
    freespeed: float  # [m/s]
    capacity: float  # [veh/h]
    lanes: float
    modes: FrozenSet[str]
    orig_id: str
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "from_node": self.from_node,
            "to_node": self.to_node,
            "length": self.length,
            "freespeed": self.freespeed,
            "capacity": self.capacity,
            "lanes": self.lanes,
            "modes": sorted(self.modes),
            "orig_id": self.orig_id,
            "type": self.type,
        }
