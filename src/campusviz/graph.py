# -----------------------------------------------------------------------------
# Graph loader & accessor
# Purpose: Parse a campus map (nodes + weighted undirected edges) from YAML
# into an immutable Graph shared read-only by every tracer.
# - Depends on .types (Node, Edge) for typed payloads.
# - Falls back to the built-in 8-location campus when the data file is
#   missing or malformed.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import math
import yaml
from typing import Any, Dict, List, Sequence, Tuple
from .errors import GraphError, OutOfRange
from .types import Node, Edge

logger = logging.getLogger(__name__)


def _as_int(value: Any, what: str) -> int:
    # int() would truncate 2.5 to 2; only whole numbers are accepted.
    if isinstance(value, bool):
        raise GraphError(f"Expected an integer {what}, got {value!r}.")
    if isinstance(value, float) and not value.is_integer():
        raise GraphError(f"Expected an integer {what}, got {value!r}.")
    return int(value)


class Graph:
    """
    Immutable store of campus locations and walkways.
    Node ids are dense (0..N-1) and equal to each node's position; edges are
    undirected, so every edge is traversable both ways with the same weight.
    """

    def __init__(self, nodes: Sequence[Node], edges: Sequence[Edge]):
        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._validate()

    def _validate(self):
        names = set()
        for i, n in enumerate(self._nodes):
            if n.id != i:
                raise GraphError(f"Node ids must be dense and ordered; expected {i}, got {n.id}.")
            if n.name in names:
                raise GraphError(f"Duplicate node name: {n.name!r}.")
            if not (math.isfinite(n.x) and math.isfinite(n.y)):
                raise GraphError(f"Node {n.name!r} has non-finite coordinates ({n.x}, {n.y}).")
            names.add(n.name)
        size = len(self._nodes)
        for e in self._edges:
            if not (0 <= e.source < size and 0 <= e.target < size):
                raise GraphError(f"Edge {e.source}-{e.target} references an unknown node.")
            if e.source == e.target:
                raise GraphError(f"Self-loop on node {e.source}.")
            if e.weight <= 0:
                raise GraphError(f"Edge {e.source}-{e.target} has non-positive weight {e.weight}.")

    # ---------------- read-only accessors ----------------

    def size(self) -> int:
        return len(self._nodes)

    def get_node(self, node_id: int) -> Node:
        if not (0 <= node_id < len(self._nodes)):
            raise OutOfRange(node_id, len(self._nodes))
        return self._nodes[node_id]

    def all_nodes(self) -> List[Node]:
        # Fresh list: callers may sort or mutate it freely.
        return list(self._nodes)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def neighbors(self, node_id: int) -> List[Tuple[int, int]]:
        """
        (neighbor_id, weight) pairs for `node_id`, derived from the edge list
        on demand. Order follows edge load order, which keeps traces
        deterministic.
        """
        self.get_node(node_id)
        out: List[Tuple[int, int]] = []
        for e in self._edges:
            if e.source == node_id:
                out.append((e.target, e.weight))
            elif e.target == node_id:
                out.append((e.source, e.weight))
        return out

    def weight(self, u: int, v: int) -> int | None:
        for n, w in self.neighbors(u):
            if n == v:
                return w
        return None

    # ---------------- construction ----------------

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Graph":
        """
        Build a Graph from a pre-parsed YAML/JSON dictionary.
        Expected shape:
          nodes:
            - { id: 0, name: "Library", type: "academic", x: 150, y: 120 }
          edges:
            - { from: 0, to: 1, weight: 250 }
        """
        if not isinstance(d, dict):
            raise GraphError("Graph data must be a mapping with 'nodes' and 'edges'.")
        try:
            nodes = [Node(id=_as_int(nd["id"], "node id"), name=str(nd["name"]), type=str(nd.get("type", "building")),
                          x=float(nd["x"]), y=float(nd["y"]))
                     for nd in d.get("nodes") or []]
            edges = [Edge(source=_as_int(ed["from"], "edge endpoint"), target=_as_int(ed["to"], "edge endpoint"),
                          weight=_as_int(ed["weight"], "edge weight"))
                     for ed in d.get("edges") or []]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise GraphError(f"Malformed graph entry: {e}") from e
        return Graph(nodes, edges)

    @staticmethod
    def from_yaml_text(text: str) -> "Graph":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise GraphError(f"Invalid YAML: {e}") from e
        return Graph.from_dict(data)

    @staticmethod
    def from_file(path: str) -> "Graph":
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise GraphError(f"{path} is not valid UTF-8: {e}") from e
        return Graph.from_yaml_text(text)


# Fallback campus used when no data file is available.
DEFAULT_CAMPUS: Dict[str, Any] = {
    "nodes": [
        {"id": 0, "name": "Library",        "type": "academic",    "x": 150, "y": 120},
        {"id": 1, "name": "Science Hall",   "type": "academic",    "x": 400, "y": 100},
        {"id": 2, "name": "Gym",            "type": "recreation",  "x": 550, "y": 250},
        {"id": 3, "name": "Student Center", "type": "service",     "x": 350, "y": 350},
        {"id": 4, "name": "Dorms",          "type": "residential", "x": 120, "y": 320},
        {"id": 5, "name": "Engineering",    "type": "academic",    "x": 500, "y": 500},
        {"id": 6, "name": "Arts Building",  "type": "academic",    "x": 200, "y": 530},
        {"id": 7, "name": "Cafeteria",      "type": "dining",      "x": 350, "y": 580},
    ],
    "edges": [
        {"from": 0, "to": 1, "weight": 250},
        {"from": 0, "to": 3, "weight": 300},
        {"from": 0, "to": 4, "weight": 200},
        {"from": 1, "to": 2, "weight": 200},
        {"from": 1, "to": 3, "weight": 280},
        {"from": 2, "to": 3, "weight": 220},
        {"from": 2, "to": 5, "weight": 260},
        {"from": 3, "to": 4, "weight": 240},
        {"from": 3, "to": 5, "weight": 200},
        {"from": 3, "to": 6, "weight": 220},
        {"from": 4, "to": 6, "weight": 250},
        {"from": 5, "to": 7, "weight": 180},
        {"from": 6, "to": 7, "weight": 160},
    ],
}


def default_graph() -> Graph:
    return Graph.from_dict(DEFAULT_CAMPUS)


def load_graph(path: str | None) -> Graph:
    """
    Load the campus from `path`, falling back to the built-in campus when the
    file is absent or unreadable. Never raises for data-source problems.
    """
    if path:
        try:
            g = Graph.from_file(path)
            logger.info("Loaded campus graph from %s (%d nodes, %d edges)", path, g.size(), len(g.edges()))
            return g
        except (OSError, GraphError) as e:
            logger.warning("Could not load graph from %s (%s); using built-in campus", path, e)
    return default_graph()
