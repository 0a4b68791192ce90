# -----------------------------------------------------------------------------
# Binary-search tracer
# Purpose: Sort locations alphabetically, then find `query` with iterative
# binary search, recording one SearchStep per comparison plus a terminal
# "not_found" step when the range empties.
# Comparison steps never exceed ceil(log2 n) + 1. A miss adds the "not_found"
# step on top, so a miss on n = 2^k names can take up to k + 2 steps in total.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging

from .errors import InvalidArgument
from .graph import Graph
from .tracer import Tracer
from .types import SENTINEL, Complexity, SearchAnswer, SearchStep, TraceResult

logger = logging.getLogger(__name__)

COMPLEXITY = Complexity(
    time="O(log n)",
    space="O(1)",
    description="Iterative binary search on the name-sorted array",
)


class BinarySearchTracer:

    def search(self, graph: Graph, query: str) -> TraceResult:
        """
        Exact, case-sensitive lookup of `query` among location names.
        Each comparison step records the range [left, right] being searched when
        the comparison was made, so the frontend can shade it.
        """
        if not query or not query.strip():
            raise InvalidArgument("Search query must not be empty.")

        # Names are unique, so the ordering is total.
        sorted_nodes = sorted(graph.all_nodes(), key=lambda n: n.name)
        trace: Tracer[SearchStep] = Tracer(SearchStep)

        left, right = 0, len(sorted_nodes) - 1
        found_index = SENTINEL
        while left <= right:
            mid = left + (right - left) // 2
            name = sorted_nodes[mid].name
            if query == name:
                found_index = mid
                trace.add("match", f"'{query}' matches '{name}' at index {mid}.",
                          left=left, right=right, mid=mid, compare_index=mid, found=True)
                break
            if query < name:
                trace.add("search_left",
                          f"Range [{left}, {right}], midpoint {mid} ({name}). "
                          f"'{query}' < '{name}': discard the right half.",
                          left=left, right=right, mid=mid, compare_index=mid, found=False)
                right = mid - 1
            else:
                trace.add("search_right",
                          f"Range [{left}, {right}], midpoint {mid} ({name}). "
                          f"'{query}' > '{name}': discard the left half.",
                          left=left, right=right, mid=mid, compare_index=mid, found=False)
                left = mid + 1

        if found_index == SENTINEL:
            trace.add("not_found", f"Search range is empty. '{query}' is not on this campus.",
                      left=left, right=right, mid=SENTINEL, compare_index=SENTINEL, found=False)

        answer = SearchAnswer(
            found=found_index != SENTINEL,
            node=sorted_nodes[found_index] if found_index != SENTINEL else None,
            sorted_nodes=tuple(sorted_nodes),
        )
        logger.debug("binary_search %r: found=%s, %d steps", query, answer.found, len(trace))
        return TraceResult(
            algorithm="binary_search",
            params={"query": query},
            answer=answer,
            steps=trace.steps(),
            complexity=COMPLEXITY,
        )
