# -----------------------------------------------------------------------------
# Shortest-path tracer (Dijkstra, linear-scan selection)
# Responsibilities:
#   • Label-setting search from `start` over the whole graph
#   • Deterministic selection: minimum tentative distance, smallest id on ties
#   • One PathStep per selected node, snapshotting every array after the
#     node's outgoing edges were relaxed
#   • Path reconstruction via previous-pointers; unreachable `end` is a
#     normal result (distance SENTINEL, empty path)
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from .errors import InvalidArgument
from .graph import Graph
from .tracer import Tracer
from .types import SENTINEL, Complexity, PathAnswer, PathStep, TraceResult

logger = logging.getLogger(__name__)

COMPLEXITY = Complexity(
    time="O(V^2)",
    space="O(V)",
    description="Dijkstra with linear-scan node selection (no priority queue)",
)


class ShortestPathTracer:
    # Stateless between calls; construct one per request anyway.

    @staticmethod
    def _select(visited: List[bool], dist: List[int]) -> Optional[int]:
        """
        Pick the unvisited node with the smallest finite tentative distance.
        Scanning ids in increasing order with strict `<` makes the smallest
        id win ties. Returns None once no reachable unvisited node remains.
        """
        best: Optional[int] = None
        for v in range(len(dist)):
            if visited[v] or dist[v] == SENTINEL:
                continue
            if best is None or dist[v] < dist[best]:
                best = v
        return best

    @staticmethod
    def _reconstruct(previous: List[int], start: int, end: int) -> Tuple[int, ...]:
        path = [end]
        while path[-1] != start:
            path.append(previous[path[-1]])
        path.reverse()
        return tuple(path)

    def compute_shortest_path(self, graph: Graph, start: int, end: int) -> TraceResult:
        if start == end:
            raise InvalidArgument("Start and end nodes must be different.")
        graph.get_node(start)
        graph.get_node(end)

        n = graph.size()
        visited = [False] * n
        dist = [SENTINEL] * n
        previous = [SENTINEL] * n
        dist[start] = 0
        trace: Tracer[PathStep] = Tracer(PathStep)

        while True:
            u = self._select(visited, dist)
            if u is None:
                break
            visited[u] = True
            name_u = graph.get_node(u).name

            relaxed: List[Tuple[int, int]] = []
            for v, w in graph.neighbors(u):
                if visited[v]:
                    continue
                candidate = dist[u] + w
                if dist[v] == SENTINEL or candidate < dist[v]:
                    dist[v] = candidate
                    previous[v] = u
                    relaxed.append((v, candidate))

            if relaxed:
                updates = ", ".join(f"{graph.get_node(v).name} -> {d}m" for v, d in relaxed)
                explanation = f"Visit {name_u} (distance {dist[u]}m). Updated: {updates}."
            else:
                explanation = f"Visit {name_u} (distance {dist[u]}m). No shorter routes found."
            trace.add("visit", explanation,
                      node=u, visited=tuple(visited), distances=tuple(dist),
                      previous=tuple(previous), relaxed=tuple(relaxed))

        if dist[end] == SENTINEL:
            answer = PathAnswer(distance=SENTINEL, path=())
        else:
            answer = PathAnswer(distance=dist[end], path=self._reconstruct(previous, start, end))

        logger.debug("dijkstra %d->%d: distance=%d, %d steps", start, end, answer.distance, len(trace))
        return TraceResult(
            algorithm="dijkstra",
            params={"start": start, "end": end},
            answer=answer,
            steps=trace.steps(),
            complexity=COMPLEXITY,
        )
