# -----------------------------------------------------------------------------
# Error taxonomy for the trace engine
# Purpose:
#   Domain exceptions raised at the request boundary and by the graph model.
#   The API layer maps each class onto an HTTP status code.
# -----------------------------------------------------------------------------

from __future__ import annotations


class TraceError(Exception):
    """Base class for every error the trace engine raises on purpose."""


class InvalidArgument(TraceError):
    # Equal start/end, empty search query, malformed numeric parameter.
    pass


class OutOfRange(TraceError):
    # Node id outside [0, size()).
    def __init__(self, node_id: int, size: int):
        super().__init__(f"Node id {node_id} is out of range [0, {size}).")
        self.node_id = node_id
        self.size = size


class GraphError(TraceError):
    # Malformed graph data (bad ids, self-loops, unknown endpoints, ...).
    pass
