# -----------------------------------------------------------------------------
# Boundary validation
# Purpose: Convert already-decoded query-string values into validated tracer
# arguments. Everything here runs before a tracer is constructed, so tracers
# only ever see well-formed input.
# -----------------------------------------------------------------------------

from __future__ import annotations
import re
from typing import Tuple

from .errors import InvalidArgument
from .graph import Graph

# Node ids are small; anything longer than 18 digits is malformed, not out of range.
_INT_RE = re.compile(r"^[+-]?\d{1,18}$")


def parse_node_id(raw: str | None, graph: Graph, param: str = "id") -> int:
    """
    Parse `raw` as a node id and check it against the graph.
    - missing/blank or non-integer text → InvalidArgument
    - integer outside [0, size()) → OutOfRange (raised by the graph)
    """
    if raw is None or not str(raw).strip():
        raise InvalidArgument(f"Missing required parameter '{param}'.")
    text = str(raw).strip()
    if not _INT_RE.match(text):
        raise InvalidArgument(f"Parameter '{param}' must be an integer, got {raw!r}.")
    try:
        node_id = int(text)
    except ValueError as e:
        raise InvalidArgument(f"Parameter '{param}' must be an integer, got {raw!r}.") from e
    graph.get_node(node_id)
    return node_id


def parse_route(start: str | None, end: str | None, graph: Graph) -> Tuple[int, int]:
    s = parse_node_id(start, graph, "start")
    e = parse_node_id(end, graph, "end")
    if s == e:
        raise InvalidArgument("Start and end nodes must be different.")
    return s, e


def parse_query(raw: str | None) -> str:
    # Surrounding whitespace is dropped; the match itself stays exact.
    q = (raw or "").strip()
    if not q:
        raise InvalidArgument("Search query must not be empty.")
    return q
