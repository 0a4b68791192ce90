# -----------------------------------------------------------------------------
# Trace exporter
# Purpose: Turn a Graph or a TraceResult into plain dict/list records with
# the field names the frontend expects. Pure; no I/O, no state.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Dict

from .graph import Graph
from .types import Complexity, Node, PathStep, SearchStep, SortStep, TraceResult


def _node(n: Node) -> Dict[str, Any]:
    return {"id": n.id, "name": n.name, "type": n.type, "x": n.x, "y": n.y}


def _complexity(c: Complexity) -> Dict[str, Any]:
    out: Dict[str, Any] = {"time": c.time, "space": c.space, "description": c.description}
    if c.time_worst is not None:
        out["time_worst"] = c.time_worst
    return out


def export_graph(graph: Graph) -> Dict[str, Any]:
    return {
        "nodes": [_node(n) for n in graph.all_nodes()],
        "edges": [{"from": e.source, "to": e.target, "weight": e.weight} for e in graph.edges()],
    }


def _path_step(s: PathStep) -> Dict[str, Any]:
    return {
        "step": s.index, "action": s.action, "explanation": s.explanation, "node": s.node,
        "visited": list(s.visited), "distances": list(s.distances), "previous": list(s.previous),
        "relaxed": [{"node": v, "distance": d} for v, d in s.relaxed],
    }


def _search_step(s: SearchStep) -> Dict[str, Any]:
    return {
        "step": s.index, "action": s.action, "explanation": s.explanation,
        "left": s.left, "right": s.right, "mid": s.mid,
        "compareNode": s.compare_index, "found": s.found,
    }


def _sort_step(s: SortStep) -> Dict[str, Any]:
    return {
        "step": s.index, "action": s.action, "explanation": s.explanation,
        "array": list(s.array), "names": list(s.names),
        "pivot": s.pivot, "left": s.left, "right": s.right, "low": s.low, "high": s.high,
    }


def _export_dijkstra(r: TraceResult) -> Dict[str, Any]:
    return {
        "algorithm": r.algorithm,
        "start": r.params["start"],
        "end": r.params["end"],
        "distance": r.answer.distance,
        "path": list(r.answer.path),
        "steps": [_path_step(s) for s in r.steps],
        "complexity": _complexity(r.complexity),
    }


def _export_search(r: TraceResult) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "algorithm": r.algorithm,
        "query": r.params["query"],
        "found": r.answer.found,
    }
    # 'result' is present only on a hit.
    if r.answer.node is not None:
        out["result"] = _node(r.answer.node)
    out["sortedArray"] = [{"id": n.id, "name": n.name} for n in r.answer.sorted_nodes]
    out["steps"] = [_search_step(s) for s in r.steps]
    out["complexity"] = _complexity(r.complexity)
    return out


def _export_sort(r: TraceResult) -> Dict[str, Any]:
    return {
        "algorithm": r.algorithm,
        "referenceNode": r.answer.reference.id,
        "referenceName": r.answer.reference.name,
        "sortedLocations": [{"name": name, "distance": d} for name, d in r.answer.locations],
        "steps": [_sort_step(s) for s in r.steps],
        "complexity": _complexity(r.complexity),
    }


_EXPORTERS = {
    "dijkstra": _export_dijkstra,
    "binary_search": _export_search,
    "quicksort": _export_sort,
}


def export_trace(result: TraceResult) -> Dict[str, Any]:
    try:
        fn = _EXPORTERS[result.algorithm]
    except KeyError:
        raise ValueError(f"No exporter for algorithm {result.algorithm!r}") from None
    return fn(result)
