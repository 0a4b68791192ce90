import os
from pathlib import Path

os.environ.setdefault("GRAPH_PATH", str(Path(__file__).parent.parent / "data" / "campus_graph.yaml"))

from fastapi.testclient import TestClient
from api.main import app

client = TestClient(app)

def test_health():
    assert client.get("/health").json() == {"ok": True}

def test_graph():
    data = client.get("/api/graph").json()
    assert data["nodes"][0]["name"] == "Library"
    assert {"from", "to", "weight"} == set(data["edges"][0])

def test_dijkstra():
    r = client.get("/api/dijkstra", params={"start": 0, "end": 7})
    assert r.status_code == 200
    data = r.json()
    assert data["distance"] > 0
    assert data["path"][0] == 0 and data["path"][-1] == 7
    assert data["steps"][0]["node"] == 0
    assert "time_worst" not in data["complexity"]

def test_dijkstra_rejects_equal_nodes():
    r = client.get("/api/dijkstra", params={"start": 1, "end": 1})
    assert r.status_code == 400
    assert "different" in r.json()["detail"]

def test_dijkstra_rejects_malformed_and_missing():
    assert client.get("/api/dijkstra", params={"start": "x", "end": 2}).status_code == 400
    assert client.get("/api/dijkstra", params={"start": 0}).status_code == 400

def test_dijkstra_unknown_node():
    assert client.get("/api/dijkstra", params={"start": 0, "end": 500}).status_code == 404

def test_search():
    data = client.get("/api/search", params={"query": "Gym"}).json()
    assert data["found"] is True
    assert data["result"]["name"] == "Gym"
    assert data["steps"][-1]["found"] is True

def test_search_miss_has_no_result():
    data = client.get("/api/search", params={"query": "Observatory"}).json()
    assert data["found"] is False
    assert "result" not in data

def test_search_empty_query():
    assert client.get("/api/search", params={"query": ""}).status_code == 400

def test_sort():
    data = client.get("/api/sort", params={"reference": 0}).json()
    assert data["referenceName"] == "Library"
    dists = [loc["distance"] for loc in data["sortedLocations"]]
    assert dists == sorted(dists)
    assert data["steps"][-1]["action"] == "sorted"

def test_sort_unknown_reference():
    assert client.get("/api/sort", params={"reference": 99}).status_code == 404

def test_sort_oversized_reference_is_rejected():
    r = client.get("/api/sort", params={"reference": "1" * 5000})
    assert r.status_code == 400
