import os
from typing import Tuple

import networkx as nx
import pandas as pd

from .._map_util.osm_const import KMH_PER_MS, METERS_PER_MILE

__all__ = ["Convertor"]


class Convertor:
    """
    convert the link network to GMNS node and link tables
    """

    def __init__(self, graph: nx.MultiDiGraph):
        self.graph = graph

    def _to_nodes(self):
        """
        convert graph nodes to GMNS nodes

        Return:
        - pd.DataFrame: GMNS nodes
        """
        data = []
        for node, attrs in self.graph.nodes(data=True):
            id = str(node)
            lng = attrs.get("lon", attrs.get("x"))
            lat = attrs.get("lat", attrs.get("y"))
            data.append(
                {
                    "name": id,
                    "node_id": id,
                    "zone_id": id,
                    "x_coord": lng,
                    "y_coord": lat,
                    "geometry": (
                        f"POINT({lng} {lat})"
                        if lng is not None and lat is not None
                        else None
                    ),
                }
            )
        data.sort(key=lambda x: x["name"])
        return pd.DataFrame(
            data,
            columns=["name", "node_id", "zone_id", "x_coord", "y_coord", "geometry"],
        )

    def _to_links(self):
        """
        convert graph edges to GMNS links

        Return:
        - pd.DataFrame: GMNS links
        """
        data = []
        for from_node, to_node, attrs in self.graph.edges(data=True):
            data.append(
                {
                    "name": attrs["id"],
                    "link_id": attrs["id"],
                    "from_node_id": str(from_node),
                    "to_node_id": str(to_node),
                    "facility_type": attrs["type"],
                    "dir_flag": 1,  # every link is directed
                    "length": attrs["length"] / METERS_PER_MILE,  ## convert to miles
                    "lanes": attrs["lanes"],
                    "capacity": attrs["capacity"],
                    "free_speed": attrs["freespeed"]
                    * KMH_PER_MS
                    / (METERS_PER_MILE / 1000),  ## convert to miles/hour
                    "allowed_uses": ";".join(attrs["modes"]),
                    "osm_way_id": attrs["orig_id"],
                }
            )
        return pd.DataFrame(
            data,
            columns=[
                "name",
                "link_id",
                "from_node_id",
                "to_node_id",
                "facility_type",
                "dir_flag",
                "length",
                "lanes",
                "capacity",
                "free_speed",
                "allowed_uses",
                "osm_way_id",
            ],
        )

    def convert(self) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """
        Return:
        - (pd.DataFrame, pd.DataFrame): GMNS nodes and links
        """
        return self._to_nodes(), self._to_links()

    def save(self, output_dir: str):
        """
        save GMNS node.csv and link.csv into output_dir
        """
        os.makedirs(output_dir, exist_ok=True)
        nodes, links = self.convert()
        nodes.to_csv(os.path.join(output_dir, "node.csv"), index=False)
        links.to_csv(os.path.join(output_dir, "link.csv"), index=False)
