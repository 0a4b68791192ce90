# -----------------------------------------------------------------------------
# Partition-sort tracer (quicksort, Lomuto scheme)
# Responsibilities:
#   • Straight-line distance from a reference location to every other one,
#     truncated to whole meters
#   • In-place quicksort over parallel distance/name lists, pivot = last
#     element of the active subrange, left subrange sorted before right
#   • One SortStep per pivot choice, comparison, swap and pivot placement,
#     each holding the entire current array so it renders on its own
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import math
from typing import List, Tuple

from .graph import Graph
from .tracer import Tracer
from .types import SENTINEL, Complexity, Node, SortAnswer, SortStep, TraceResult

logger = logging.getLogger(__name__)

COMPLEXITY = Complexity(
    time="O(n log n)",
    time_worst="O(n^2)",
    space="O(log n)",
    description="In-place quicksort with Lomuto partitioning (last element as pivot)",
)


def euclidean_meters(a: Node, b: Node) -> int:
    # Truncation, not rounding.
    return int(math.floor(math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)))


class PartitionSortTracer:

    @staticmethod
    def _record(trace: Tracer[SortStep], values: List[int], names: List[str], action: str,
                explanation: str, pivot: int, left: int, right: int, low: int, high: int):
        trace.add(action, explanation, array=tuple(values), names=tuple(names),
                  pivot=pivot, left=left, right=right, low=low, high=high)

    @staticmethod
    def _swap(values: List[int], names: List[str], i: int, j: int):
        values[i], values[j] = values[j], values[i]
        names[i], names[j] = names[j], names[i]

    def _partition(self, trace: Tracer[SortStep], values: List[int], names: List[str],
                   low: int, high: int) -> int:
        pivot = values[high]
        self._record(trace, values, names, "choose_pivot",
                     f"Selected pivot: {pivot}m ({names[high]}) at index {high}.",
                     high, SENTINEL, SENTINEL, low, high)

        i = low - 1
        for j in range(low, high):
            self._record(trace, values, names, "compare",
                         f"Compare {values[j]}m ({names[j]}) with pivot {pivot}m.",
                         high, i, j, low, high)
            if values[j] < pivot:
                i += 1
                self._swap(values, names, i, j)
                if i == j:
                    explanation = f"{names[i]} is smaller than the pivot and already in place."
                else:
                    explanation = f"Swapped {names[i]} and {names[j]} ({names[i]} is smaller than the pivot)."
                self._record(trace, values, names, "swap", explanation, high, i, j, low, high)

        self._swap(values, names, i + 1, high)
        self._record(trace, values, names, "place_pivot",
                     f"Placed pivot {names[i + 1]} at its final position (index {i + 1}).",
                     i + 1, SENTINEL, SENTINEL, low, high)
        return i + 1

    def _quicksort(self, trace: Tracer[SortStep], values: List[int], names: List[str],
                   low: int, high: int):
        if low < high:
            p = self._partition(trace, values, names, low, high)
            self._quicksort(trace, values, names, low, p - 1)
            self._quicksort(trace, values, names, p + 1, high)

    def sort_by_distance(self, graph: Graph, reference_id: int) -> TraceResult:
        reference = graph.get_node(reference_id)

        values: List[int] = []
        names: List[str] = []
        for node in graph.all_nodes():
            if node.id != reference_id:
                values.append(euclidean_meters(node, reference))
                names.append(node.name)

        trace: Tracer[SortStep] = Tracer(SortStep)
        last = len(values) - 1
        self._record(trace, values, names, "initial",
                     f"Sorting {len(values)} locations by distance from {reference.name}.",
                     SENTINEL, SENTINEL, SENTINEL, 0, last)
        self._quicksort(trace, values, names, 0, last)
        self._record(trace, values, names, "sorted",
                     f"Array is now sorted by distance from {reference.name}.",
                     SENTINEL, SENTINEL, SENTINEL, 0, last)

        locations: Tuple[Tuple[str, int], ...] = tuple(zip(names, values))
        logger.debug("quicksort from %d: %d locations, %d steps", reference_id, len(values), len(trace))
        return TraceResult(
            algorithm="quicksort",
            params={"reference": reference_id},
            answer=SortAnswer(reference=reference, locations=locations),
            steps=trace.steps(),
            complexity=COMPLEXITY,
        )
