import pytest
from pathlib import Path
from campusviz.errors import GraphError, OutOfRange
from campusviz.graph import Graph, load_graph

def test_default_campus_shape(campus):
    assert campus.size() == 8
    assert campus.get_node(0).name == "Library"
    assert campus.get_node(7).name == "Cafeteria"
    assert len(campus.edges()) == 13

def test_get_node_out_of_range(campus):
    with pytest.raises(OutOfRange):
        campus.get_node(8)
    with pytest.raises(OutOfRange):
        campus.get_node(-1)

def test_all_nodes_is_a_copy(campus):
    nodes = campus.all_nodes()
    nodes.reverse()
    nodes.pop()
    assert campus.size() == 8
    assert campus.all_nodes()[0].name == "Library"

def test_neighbors_are_undirected(campus):
    assert (0, 250) in campus.neighbors(1)
    assert (1, 250) in campus.neighbors(0)
    assert campus.weight(7, 6) == 160
    assert campus.weight(0, 7) is None

def test_yaml_round_trip_from_text():
    g = Graph.from_yaml_text("""
nodes:
  - {id: 0, name: A, type: hall, x: 0, y: 0}
  - {id: 1, name: B, x: 3, y: 4}
edges:
  - {from: 0, to: 1, weight: 5}
""")
    assert g.size() == 2
    assert g.get_node(1).type == "building"
    assert g.neighbors(0) == [(1, 5)]

@pytest.mark.parametrize("text", [
    "nodes: [{id: 1, name: A, x: 0, y: 0}]",                                       # not dense
    "nodes: [{id: 0, name: A, x: 0, y: 0}, {id: 1, name: A, x: 1, y: 1}]",          # duplicate name
    "nodes: [{id: 0, name: A, x: 0, y: 0}]\nedges: [{from: 0, to: 0, weight: 1}]",  # self-loop
    "nodes: [{id: 0, name: A, x: 0, y: 0}]\nedges: [{from: 0, to: 3, weight: 1}]",  # unknown endpoint
    "nodes: [{id: 0, name: A, x: 0, y: 0}, {id: 1, name: B, x: 1, y: 1}]\nedges: [{from: 0, to: 1, weight: 0}]",
    "nodes: [{id: 0, name: A}]",                                                    # missing coordinates
    "nodes: [{id: 0, name: A, x: .nan, y: 0}]",                                    # NaN coordinate
    "nodes: [{id: 0, name: A, x: 0, y: .inf}]",                                    # infinite coordinate
    "nodes: [{id: 0, name: A, x: 0, y: 0}, {id: 1, name: B, x: 1, y: 1}]\nedges: [{from: 0, to: 1, weight: 2.5}]",
    "nodes: [{id: 0.5, name: A, x: 0, y: 0}]",                                     # fractional id
    "nodes: [{id: 0, name: A, x: 0, y: 0}, {id: 1, name: B, x: 1, y: 1}]\nedges: [{from: 0, to: 1, weight: '2.5'}]",
    "- just a list",
])
def test_malformed_graphs_rejected(text):
    with pytest.raises(GraphError):
        Graph.from_yaml_text(text)

def test_load_graph_reads_file(tmp_path):
    p = tmp_path / "g.yaml"
    p.write_text("nodes:\n  - {id: 0, name: Only, type: x, x: 1, y: 2}\n", encoding="utf-8")
    assert load_graph(str(p)).get_node(0).name == "Only"

def test_load_graph_falls_back_when_missing(tmp_path):
    g = load_graph(str(tmp_path / "nope.yaml"))
    assert g.size() == 8

def test_load_graph_falls_back_when_malformed(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("nodes: [{id: 5, name: X, x: 0, y: 0}]", encoding="utf-8")
    assert load_graph(str(p)).get_node(0).name == "Library"

def test_load_graph_falls_back_when_not_utf8(tmp_path):
    p = tmp_path / "binary.yaml"
    p.write_bytes(b"\xff\xfe\x00n\x00o\x00d\x00e\x00s")
    with pytest.raises(GraphError, match="UTF-8"):
        Graph.from_file(str(p))
    assert load_graph(str(p)).size() == 8

def test_fractional_weight_not_truncated():
    with pytest.raises(GraphError, match="edge weight"):
        Graph.from_dict({"nodes": [{"id": 0, "name": "A", "x": 0, "y": 0}, {"id": 1, "name": "B", "x": 1, "y": 1}],
                         "edges": [{"from": 0, "to": 1, "weight": 0.5}]})

def test_whole_float_ids_and_weights_accepted():
    g = Graph.from_dict({"nodes": [{"id": 0.0, "name": "A", "x": 0, "y": 0}, {"id": 1, "name": "B", "x": 1, "y": 1}],
                         "edges": [{"from": 0, "to": 1.0, "weight": 250.0}]})
    assert g.weight(0, 1) == 250

def test_shipped_data_file_is_valid():
    g = Graph.from_file(str(Path(__file__).parent.parent / "data" / "campus_graph.yaml"))
    assert g.size() == 10
    assert g.get_node(9).name == "Parking Garage"
