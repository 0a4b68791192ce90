# -----------------------------------------------------------------------------
# Types module: Shared dataclasses for the trace engine
# Purpose:
#   Define the graph records (nodes, edges), the per-algorithm step snapshots,
#   and the TraceResult envelope returned by every tracer.
#   All records are frozen; snapshots hold tuples so a step can never change
#   after it has been recorded.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

# Reserved value for "infinite/unknown" distances and "no previous node".
SENTINEL = -1


@dataclass(frozen=True)
class Node:
    """
    A named campus location.
    Example:
        Node(id=0, name="Library", type="academic", x=150.0, y=120.0)
    - id: dense identifier, 0..N-1, equal to the node's index in the graph
    - type: free-form category tag (academic, dining, residential, ...)
    - x, y: canvas coordinates, also used for straight-line distances
    """
    id: int
    name: str
    type: str
    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    # Undirected weighted edge; weight is a walking distance in meters.
    source: int
    target: int
    weight: int


@dataclass(frozen=True)
class Complexity:
    # Display-only labels; nothing here is enforced.
    time: str
    space: str
    description: str = ""
    time_worst: str | None = None


# ---------------------------- Step snapshots ---------------------------------

@dataclass(frozen=True)
class PathStep:
    """
    One node-selection iteration of the shortest-path search.
    The arrays are the full state after the selected node's edges were
    relaxed, so a renderer can draw this step without looking at any other.
    """
    index: int
    action: str
    explanation: str
    node: int
    visited: Tuple[bool, ...]
    distances: Tuple[int, ...]     # SENTINEL for "not reached yet"
    previous: Tuple[int, ...]      # SENTINEL for "no predecessor"
    relaxed: Tuple[Tuple[int, int], ...] = ()  # (neighbor, new distance) updated here


@dataclass(frozen=True)
class SearchStep:
    # One binary-search comparison (or the terminal "not found" record).
    index: int
    action: str
    explanation: str
    left: int
    right: int
    mid: int
    compare_index: int
    found: bool


@dataclass(frozen=True)
class SortStep:
    """
    One event of the partition sort: pivot choice, comparison, swap,
    pivot placement, or the initial/final array.
    - left: partition pointer (last index known to hold a value < pivot)
    - right: scan pointer (element currently compared against the pivot)
    - low, high: bounds of the active subrange
    Pointers that do not apply to the event are SENTINEL.
    """
    index: int
    action: str
    explanation: str
    array: Tuple[int, ...]
    names: Tuple[str, ...]
    pivot: int
    left: int
    right: int
    low: int
    high: int


Step = Union[PathStep, SearchStep, SortStep]


# ---------------------------- Answers ----------------------------------------

@dataclass(frozen=True)
class PathAnswer:
    distance: int                  # SENTINEL when end is unreachable
    path: Tuple[int, ...]          # start..end node ids, empty when unreachable

    @property
    def reachable(self) -> bool:
        return self.distance != SENTINEL


@dataclass(frozen=True)
class SearchAnswer:
    found: bool
    node: Node | None
    sorted_nodes: Tuple[Node, ...]


@dataclass(frozen=True)
class SortAnswer:
    reference: Node
    locations: Tuple[Tuple[str, int], ...]   # (name, distance), non-decreasing


Answer = Union[PathAnswer, SearchAnswer, SortAnswer]


@dataclass(frozen=True)
class TraceResult:
    """
    Everything one tracer run produced.
    - algorithm: "dijkstra" | "binary_search" | "quicksort"
    - params: the validated inputs, echoed back to the client
    - answer: the algorithm's summary (see *Answer classes above)
    - steps: the ordered trace, indices 0..len-1
    """
    algorithm: str
    params: Dict[str, Any]
    answer: Answer
    steps: Tuple[Step, ...]
    complexity: Complexity
