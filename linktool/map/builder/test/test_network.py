import json

import networkx as nx
import pytest

from ....type import RawSegment
from ...osm import HighwayDefaults, LinkAttributeResolver
from .. import NetworkBuilder


def _graph():
    g = nx.MultiDiGraph()
    g.add_node(1, lon=116.40, lat=39.90)
    g.add_node(2, lon=116.41, lat=39.90)
    g.add_node(3)
    return g


def _segments():
    return [
        RawSegment({"highway": "primary", "oneway": "yes"}, 500, 1, 1, 2, 850.0, frozenset({"car"})),
        RawSegment({"highway": "residential"}, 501, 2, 2, 1, 850.0, frozenset({"car", "bike"})),
        RawSegment({"highway": "residential"}, 501, 3, 1, 2, 850.0, frozenset({"car", "bike"})),
    ]


def test_add_segments():
    g = _graph()
    builder = NetworkBuilder(g, LinkAttributeResolver(g, HighwayDefaults()))
    links = builder.add_segments(_segments())
    assert [link.id for link in links] == ["1", "2", "3"]
    assert g.number_of_edges() == 3
    assert g.number_of_edges(1, 2) == 2
    edge = g.edges[1, 2, "1"]
    assert edge["lanes"] == 2.0
    assert edge["capacity"] == 4600
    assert edge["type"] == "primary"
    assert edge["orig_id"] == "500"


def test_duplicate_link_id():
    g = _graph()
    builder = NetworkBuilder(g, LinkAttributeResolver(g, HighwayDefaults()))
    segments = _segments()
    segments.append(RawSegment({}, 502, 1, 2, 1, 10.0))
    with pytest.raises(ValueError):
        builder.add_segments(segments)


def test_missing_node_adds_nothing():
    g = _graph()
    builder = NetworkBuilder(g, LinkAttributeResolver(g, HighwayDefaults()))
    with pytest.raises(ValueError):
        builder.add_segments([RawSegment({"highway": "primary"}, 503, 4, 1, 99, 10.0)])
    assert g.number_of_edges() == 0
    assert 99 not in g


def test_resolver_must_share_graph():
    with pytest.raises(ValueError):
        NetworkBuilder(_graph(), LinkAttributeResolver(_graph(), HighwayDefaults()))


def test_geojson(tmp_path):
    g = _graph()
    builder = NetworkBuilder(g, LinkAttributeResolver(g, HighwayDefaults()))
    builder.add_segments(_segments())
    builder.add_segments([RawSegment({}, 504, 5, 2, 3, 10.0)])
    fc = builder.to_geojson()
    assert len(fc["features"]) == 3
    feature = fc["features"][0]
    coords = [list(c) for c in feature["geometry"]["coordinates"]]
    assert coords == [[116.40, 39.90], [116.41, 39.90]]
    assert feature["properties"]["lanes"] == 2.0
    path = tmp_path / "links.geojson"
    builder.dump_as_geojson(str(path))
    with open(path) as f:
        data = json.load(f)
    assert len(data["features"]) == 3
