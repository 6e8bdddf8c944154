import logging
import threading
from typing import Container, Dict, FrozenSet, Hashable, Iterable, Mapping

from ...type import LinkRecord, RawSegment
from .._map_util.osm_const import *
from ._wayutil import parse_lanes, parse_maxspeed, parse_oneway
from .highway_defaults import HighwayDefaults

__all__ = ["LinkAttributeResolver"]


class LinkAttributeResolver:
    """
    Generate the attributes of network links from the tags of OSM ways
    """

    def __init__(
        self,
        graph: Container,
        highway_defaults: HighwayDefaults,
        scale_max_speed: bool = False,
    ):
        """
        Args:
        - graph (Container): target network, e.g. networkx.DiGraph. Only `node in graph` is used.
        - highway_defaults (HighwayDefaults): default attributes of every highway type.
        - scale_max_speed (bool): scale the free speed by the freespeed factor of the highway type.
        """
        if FALLBACK_HIGHWAY not in highway_defaults:
            raise ValueError(f"highway defaults have no entry for '{FALLBACK_HIGHWAY}'")
        self.graph = graph
        self.highway_defaults = highway_defaults
        self.scale_max_speed = scale_max_speed
        # tag values that have already been warned about
        self._lock = threading.Lock()
        self._unknown_oneway_tags = set()
        self._unknown_maxspeed_tags = set()
        self._unknown_lanes_tags = set()

    def _warn_once(self, seen: set, value: str, message: str):
        with self._lock:
            if value in seen:
                return
            seen.add(value)
        logging.warning(message)

    def warned_values(self) -> Dict[str, FrozenSet[str]]:
        with self._lock:
            return {
                TAG_ONEWAY: frozenset(self._unknown_oneway_tags),
                TAG_MAXSPEED: frozenset(self._unknown_maxspeed_tags),
                TAG_LANES: frozenset(self._unknown_lanes_tags),
            }

    def reset_warnings(self):
        with self._lock:
            self._unknown_oneway_tags.clear()
            self._unknown_maxspeed_tags.clear()
            self._unknown_lanes_tags.clear()

    def resolve(
        self,
        tags: Mapping[str, str],
        osm_id: int,
        topo_id: int,
        from_node: Hashable,
        to_node: Hashable,
        length: float,
        modes: Iterable[str],
    ) -> LinkRecord:
        """
        Args:
        - tags (dict): tags of the OSM way.
        - osm_id (int): OSM way id, kept as the origin id of the link.
        - topo_id (int): id assigned by the topology builder, used as the link id.
        - from_node, to_node: endpoint node ids, both must be in the graph.
        - length (float): link length [m].
        - modes (Iterable[str]): allowed modes on the link.

        Returns:
        - LinkRecord: the resolved link.

        Raises:
        - ValueError: an endpoint node is not in the graph.
        """
        highway = tags.get(TAG_HIGHWAY)
        if highway is None:
            highway = FALLBACK_HIGHWAY
        defaults = self.highway_defaults.get(highway)
        if defaults is None:
            defaults = self.highway_defaults[FALLBACK_HIGHWAY]

        lanes = defaults.lanes_per_direction
        lane_capacity = defaults.lane_capacity
        freespeed = defaults.freespeed
        freespeed_factor = defaults.freespeed_factor
        oneway = defaults.oneway
        oneway_reverse = False

        # tags that overwrite the defaults
        if tags.get(TAG_JUNCTION) == ROUNDABOUT:
            oneway = True

        oneway_tag = tags.get(TAG_ONEWAY)
        if oneway_tag is not None:
            parsed = parse_oneway(oneway_tag)
            if parsed is None:
                self._warn_once(
                    self._unknown_oneway_tags,
                    oneway_tag,
                    f"Could not interpret oneway tag: {oneway_tag}. Ignoring it.",
                )
            else:
                oneway, oneway_reverse = parsed

        # a oneway trunk/primary/secondary should have two lanes instead of one
        if highway.lower() in LANE_BUMP_HIGHWAYS:
            if (oneway or oneway_reverse) and lanes == 1.0:
                lanes = 2.0

        maxspeed_tag = tags.get(TAG_MAXSPEED)
        if maxspeed_tag is not None:
            try:
                freespeed = parse_maxspeed(maxspeed_tag)
            except ValueError as e:
                self._warn_once(
                    self._unknown_maxspeed_tags,
                    maxspeed_tag,
                    f"Could not parse maxspeed tag: {e}. Ignoring it.",
                )

        lanes_tag = tags.get(TAG_LANES)
        if lanes_tag is not None:
            try:
                total_lanes = parse_lanes(lanes_tag)
            except ValueError as e:
                self._warn_once(
                    self._unknown_lanes_tags,
                    lanes_tag,
                    f"Could not parse lanes tag: {e}. Ignoring it.",
                )
            else:
                if total_lanes > 0:
                    lanes = total_lanes
                    # the lanes tag counts both directions
                    if not oneway and not oneway_reverse:
                        lanes /= 2.0

        capacity = lanes * lane_capacity
        if self.scale_max_speed:
            freespeed = freespeed * freespeed_factor

        # nodes outside of the network may have been dropped by the caller
        for node in (from_node, to_node):
            if node not in self.graph:
                raise ValueError(
                    f"node {node} of way {osm_id} (link {topo_id}) is not in the network"
                )
        return LinkRecord(
            id=str(topo_id),
            from_node=from_node,
            to_node=to_node,
            length=length,
            freespeed=freespeed,
            capacity=capacity,
            lanes=lanes,
            modes=frozenset(modes),
            orig_id=str(osm_id),
            type=highway,
        )

    def resolve_segment(self, segment: RawSegment) -> LinkRecord:
        return self.resolve(
            segment.tags,
            segment.osm_id,
            segment.topo_id,
            segment.from_node,
            segment.to_node,
            segment.length,
            segment.modes,
        )
