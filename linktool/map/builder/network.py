import logging
from typing import Hashable, Iterable, List, Optional, Tuple

import networkx as nx
from geojson import Feature, FeatureCollection, LineString, dump
from tqdm import tqdm

from ...type import LinkRecord, RawSegment
from ..osm import LinkAttributeResolver

__all__ = ["NetworkBuilder"]


class NetworkBuilder:
    """
    Add links resolved from OSM way segments to a networkx graph
    """

    def __init__(self, graph: nx.MultiDiGraph, resolver: LinkAttributeResolver):
        """
        Args:
        - graph (nx.MultiDiGraph): network whose nodes were already added. Links are added as edges keyed by link id.
        - resolver (LinkAttributeResolver): resolver checking nodes against the same graph.
        """
        if resolver.graph is not graph:
            raise ValueError("resolver must check nodes against the graph being built")
        self.graph = graph
        self.resolver = resolver
        self.links = {}  # link_id -> LinkRecord

    def add_link(self, link: LinkRecord):
        if link.id in self.links:
            raise ValueError(
                f"duplicate link id {link.id}: way {link.orig_id} vs way {self.links[link.id].orig_id}"
            )
        self.links[link.id] = link
        self.graph.add_edge(
            link.from_node, link.to_node, key=link.id, **link.to_dict()
        )

    def add_segments(self, segments: Iterable[RawSegment]) -> List[LinkRecord]:
        """
        Resolve and add every segment.

        Raises:
        - ValueError: an endpoint node is not in the graph, or a link id is used twice.
        """
        links = []
        for segment in tqdm(segments):
            link = self.resolver.resolve_segment(segment)
            self.add_link(link)
            links.append(link)
        logging.info(
            f"added {len(links)} links, network has {self.graph.number_of_nodes()} nodes and {self.graph.number_of_edges()} links"
        )
        return links

    def _node_coord(self, node: Hashable) -> Optional[Tuple[float, float]]:
        data = self.graph.nodes[node]
        if "lon" in data and "lat" in data:
            return (data["lon"], data["lat"])
        if "x" in data and "y" in data:
            return (data["x"], data["y"])
        return None

    def to_geojson(self) -> FeatureCollection:
        """
        Returns the links as LineString features from their start node to their end node.
        Links whose nodes have no coordinates are skipped.
        """
        geos = []
        for link in self.links.values():
            start = self._node_coord(link.from_node)
            end = self._node_coord(link.to_node)
            if start is None or end is None:
                logging.warning(f"link {link.id} has nodes without coordinates")
                continue
            geos.append(
                Feature(
                    id=link.id,
                    geometry=LineString([start, end]),
                    properties=link.to_dict(),
                )
            )
        return FeatureCollection(geos)

    def dump_as_geojson(self, path: str):
        with open(path, "w") as f:
            dump(self.to_geojson(), f, indent=2, ensure_ascii=False)
