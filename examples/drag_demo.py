"""Example script that drags the server-side slider to its midpoint."""
from __future__ import annotations

import requests

BASE_URL = "http://localhost:8000"


def post(path: str, payload: dict) -> dict:
    res = requests.post(f"{BASE_URL}{path}", json=payload, timeout=5)
    res.raise_for_status()
    return res.json()


def main() -> None:
    post("/api/slider", {"min": 0, "max": 100, "value": 0})
    post("/api/gesture", {"type": "down"})
    post("/api/gesture", {"type": "start"})
    for dx in range(0, 141, 20):
        post("/api/gesture", {"type": "move", "dx": dx})
    result = post("/api/gesture", {"type": "end"})
    print(result["committed"], result["slider"]["value"])


if __name__ == "__main__":
    main()
