import pytest
from campusviz.graph import Graph, default_graph


@pytest.fixture
def campus() -> Graph:
    # The built-in 8-location campus (ids 0..7).
    return default_graph()


@pytest.fixture
def make_graph():
    """Factory: nodes as (name, x, y), edges as (u, v, weight)."""
    def _make(nodes, edges=()):
        return Graph.from_dict({
            "nodes": [{"id": i, "name": n, "type": "building", "x": x, "y": y}
                      for i, (n, x, y) in enumerate(nodes)],
            "edges": [{"from": u, "to": v, "weight": w} for u, v, w in edges],
        })
    return _make
