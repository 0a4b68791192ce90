# --- Campus Navigator: Algorithm Trace API (FastAPI) --------------------------
# Purpose: Thin HTTP adapter over the campusviz trace engine. Each route
# (1) validates decoded query parameters, (2) runs a freshly constructed
# tracer against the shared read-only campus graph, and (3) returns the
# exported trace for the frontend to animate.
# ------------------------------------------------------------------------------

from __future__ import annotations
import os
import logging
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from campusviz.errors import InvalidArgument, OutOfRange
from campusviz.exporter import export_graph, export_trace
from campusviz.graph import load_graph
from campusviz.params import parse_node_id, parse_query, parse_route
from campusviz.search import BinarySearchTracer
from campusviz.shortest_path import ShortestPathTracer
from campusviz.sort import PartitionSortTracer

# Load .env for external configuration (graph file, CORS, log level)
load_dotenv()
GRAPH_PATH = os.getenv("GRAPH_PATH", "data/campus_graph.yaml")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Campus Navigator Algorithm API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Built once, shared read-only by every request.
_graph = load_graph(GRAPH_PATH)

# ----------------------------- Schemas ----------------------------------------
class NodeOut(BaseModel):
    id: int
    name: str
    type: str
    x: float
    y: float

class GraphOut(BaseModel):
    nodes: List[NodeOut]
    edges: List[Dict[str, int]]    # {from, to, weight}; 'from' is a Python keyword

class ComplexityOut(BaseModel):
    time: str
    space: str
    description: str = ""
    time_worst: Optional[str] = None

class PathOut(BaseModel):
    algorithm: str
    start: int
    end: int
    distance: int          # -1 when unreachable
    path: List[int]
    steps: List[Dict[str, Any]]
    complexity: ComplexityOut

class SearchOut(BaseModel):
    algorithm: str
    query: str
    found: bool
    result: Optional[NodeOut] = None
    sortedArray: List[Dict[str, Any]]
    steps: List[Dict[str, Any]]
    complexity: ComplexityOut

class SortOut(BaseModel):
    algorithm: str
    referenceNode: int
    referenceName: str
    sortedLocations: List[Dict[str, Any]]
    steps: List[Dict[str, Any]]
    complexity: ComplexityOut

# ----------------------------- Errors -----------------------------------------
@app.exception_handler(InvalidArgument)
async def _invalid_argument(request: Request, exc: InvalidArgument):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(OutOfRange)
async def _out_of_range(request: Request, exc: OutOfRange):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/api/graph", response_model=GraphOut)
def get_graph():
    """Nodes and edges of the campus, used to draw the map."""
    return export_graph(_graph)

@app.get("/api/dijkstra", response_model=PathOut, response_model_exclude_none=True)
def dijkstra(start: Optional[str] = None, end: Optional[str] = None):
    """
    Shortest walking route between two locations.
    An unreachable destination is still a 200 with distance -1 and an empty path.
    """
    s, e = parse_route(start, end, _graph)
    return export_trace(ShortestPathTracer().compute_shortest_path(_graph, s, e))

@app.get("/api/search", response_model=SearchOut, response_model_exclude_none=True)
def search(query: Optional[str] = None):
    q = parse_query(query)
    return export_trace(BinarySearchTracer().search(_graph, q))

@app.get("/api/sort", response_model=SortOut, response_model_exclude_none=True)
def sort(reference: Optional[str] = None):
    """Every other location ordered by straight-line distance from `reference`."""
    ref = parse_node_id(reference, _graph, "reference")
    return export_trace(PartitionSortTracer().sort_by_distance(_graph, ref))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("API_HOST", "127.0.0.1"), port=int(os.getenv("API_PORT", "8080")))
