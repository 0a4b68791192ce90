# -----------------------------------------------------------------------------
# dev_up.py: Dev launcher for the Campus Navigator API
# Validates the campus graph file, checks the API port is free, boots uvicorn and
# streams its logs until Ctrl+C.
# Key details:
#   - Binds API to API_HOST (use 0.0.0.0 inside containers for port forwarding)
#   - Health check always connects via 127.0.0.1 (0.0.0.0 is not connectable)
#   - Adds src/ to PYTHONPATH so `campusviz` imports without an install
# -----------------------------------------------------------------------------

from __future__ import annotations
import atexit
import os
import sys
import time
import socket
import subprocess
import urllib.request
from pathlib import Path

# ---------------------- CONFIG (base defaults) ----------------------
PROJECT_ROOT = Path(__file__).parent.resolve()
API_APP = "api.main:app"              # uvicorn import path for FastAPI app
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8080"))
GRAPH_PATH = os.getenv("GRAPH_PATH", str(PROJECT_ROOT / "data" / "campus_graph.yaml"))
PYTHONPATH_APPEND = str(PROJECT_ROOT / "src")

# ---------------------- HELPERS ----------------------
def echo(msg: str): print(f"[dev_up] {msg}", flush=True)
def fail(msg: str, code: int = 1): echo(f"❌ {msg}"); sys.exit(code)

def port_busy(host: str, port: int) -> bool:
    try:
        socket.create_connection((host, port), timeout=0.5).close()
    except OSError:
        return False
    return True

def healthy(url: str) -> bool:
    try:
        with urllib.request.urlopen(url, timeout=2) as r:
            return r.status == 200
    except OSError:   # URLError is an OSError
        return False

def wait_until_healthy(url: str, proc: subprocess.Popen, timeout: float = 30.0) -> bool:
    # Stop polling early if uvicorn already exited (import error, bad config, ...).
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline and proc.poll() is None:
        if healthy(url):
            return True
        time.sleep(0.4)
    return False

def validate_graph(path: str):
    """Fail fast on a malformed graph file instead of silently serving the fallback campus."""
    sys.path.insert(0, PYTHONPATH_APPEND)
    from campusviz.errors import GraphError
    from campusviz.graph import Graph
    p = Path(path)
    if not p.exists():
        fail(f"Graph YAML not found: {p}")
    try:
        g = Graph.from_file(str(p))
    except (GraphError, OSError) as e:
        fail(f"Graph validation failed:\n{e}")
    echo(f"✅ Graph OK ({g.size()} nodes, {len(g.edges())} edges)")

def load_dotenv_if_present():
    from dotenv import load_dotenv
    env_path = PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        echo("Loaded .env file")

# ---------------------- STARTER ----------------------
def start_uvicorn(host: str, port: int) -> subprocess.Popen:
    env = os.environ.copy()
    env["PYTHONPATH"] = (env.get("PYTHONPATH", "") + os.pathsep + PYTHONPATH_APPEND).strip(os.pathsep)
    cmd = [sys.executable, "-m", "uvicorn", API_APP, "--host", host, "--port", str(port), "--reload"]
    echo(f"▶ Starting API → {' '.join(cmd)}")
    return subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=env, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

# ---------------------- MAIN ----------------------
def main():
    echo("🚀 Launching Campus Navigator API...")
    load_dotenv_if_present()

    # Resolve env *after* .env load
    bind_host = os.getenv("API_HOST", API_HOST)
    bind_port = int(os.getenv("API_PORT", API_PORT))
    connect_host = "127.0.0.1" if bind_host in ("0.0.0.0", "0") else bind_host
    health_url = f"http://{connect_host}:{bind_port}/health"
    graph_path = os.getenv("GRAPH_PATH", GRAPH_PATH)
    os.environ.setdefault("GRAPH_PATH", graph_path)

    echo(f"Validating {graph_path} ...")
    validate_graph(graph_path)

    if port_busy(connect_host, bind_port):
        fail(f"Port {bind_port} is already in use; stop that process or set API_PORT.")

    api = start_uvicorn(bind_host, bind_port)

    def cleanup():
        if api.poll() is None:
            api.terminate()
            time.sleep(0.5)
            if api.poll() is None:
                api.kill()
    atexit.register(cleanup)

    echo("⌛ Waiting for API /health ...")
    if not wait_until_healthy(health_url, api):
        if api.stdout:
            echo("Last API logs:")
            for _ in range(20):
                line = api.stdout.readline()
                if not line: break
                print(f"[API] {line}", end="")
        fail("API failed to become ready in time.")

    echo(f"✅ API ready: http://{connect_host}:{bind_port}")
    echo(f"📘 API docs: http://{connect_host}:{bind_port}/docs")

    try:
        while api.poll() is None:
            line = api.stdout.readline() if api.stdout else ""
            if line:
                print(f"[API] {line}", end="")
            else:
                time.sleep(0.2)
    except KeyboardInterrupt:
        echo("🛑 Ctrl+C pressed, shutting down...")
    finally:
        cleanup()
        echo("✅ API stopped.")

if __name__ == "__main__":
    main()
