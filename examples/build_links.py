import json
import logging

import networkx as nx

from linktool.map.builder import NetworkBuilder
from linktool.map.gmns import Convertor
from linktool.map.osm import HighwayDefaults, LinkAttributeResolver
from linktool.type import RawSegment

logging.basicConfig(level=logging.INFO)

# nodes and way segments produced by the topology step
with open("data/temp/topo.json", "r") as f:
    topo = json.load(f)
# highway -> km/h, e.g. {"motorway": 110, "residential": 30}
with open("data/config/speeds.json", "r") as f:
    speeds = json.load(f)

g = nx.MultiDiGraph()
for node in topo["nodes"]:
    g.add_node(node["id"], lon=node["lon"], lat=node["lat"])

defaults = HighwayDefaults.from_speed_table(speeds, unit="km/h")
resolver = LinkAttributeResolver(g, defaults)
builder = NetworkBuilder(g, resolver)
builder.add_segments(
    RawSegment(
        tags=s["tags"],
        osm_id=s["osm_id"],
        topo_id=s["id"],
        from_node=s["from"],
        to_node=s["to"],
        length=s["length"],
        modes=frozenset(s.get("modes", ["car"])),
    )
    for s in topo["segments"]
)
builder.dump_as_geojson("data/temp/links.geojson")
Convertor(g).save("data/temp/gmns")
