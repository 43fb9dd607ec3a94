from fastapi.testclient import TestClient

from api.main import app
from tarot_engine.spreads import list_spreads

client = TestClient(app)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    j = r.json()
    assert j["status"] == "ok"
    assert j["spread_count"] == len(list_spreads())


def test_spreads():
    r = client.get("/v1/spreads")
    assert r.status_code == 200
    assert "Celtic Cross" in r.json()["text"]


def test_reading():
    r = client.post("/v1/readings", json={"spread_type": "three_card", "question": "What next?", "seed": "api"})
    assert r.status_code == 200
    text = r.json()["text"]
    assert text.startswith("# Three Card Spread Reading")
    assert "**Question:** What next?" in text


def test_invalid_spread_is_text():
    r = client.post("/v1/readings", json={"spread_type": "bogus_spread"})
    assert r.status_code == 200
    assert "Invalid spread type: bogus_spread" in r.json()["text"]


def test_custom_reading_validation_is_text():
    r = client.post(
        "/v1/readings/custom",
        json={"spread_name": "Mine", "description": "d", "positions": [], "question": "q"},
    )
    assert r.status_code == 200
    assert r.json()["text"] == "Error: positions must be a non-empty array."


def test_custom_reading():
    r = client.post(
        "/v1/readings/custom",
        json={
            "spread_name": "Mine",
            "description": "d",
            "positions": [{"name": "Now", "meaning": "The present"}],
            "question": "q",
            "seed": 1,
        },
    )
    assert r.status_code == 200
    assert r.json()["text"].startswith("# Mine Reading")


def test_combinations():
    r = client.post(
        "/v1/combinations",
        json={"cards": [{"name": "The Fool"}, {"name": "Ace of Cups", "orientation": "reversed"}], "context": "ctx"},
    )
    assert r.status_code == 200
    assert "**The Fool** (upright)" in r.json()["text"]

    r = client.post("/v1/combinations", json={"cards": [], "context": "ctx"})
    assert r.status_code == 422


def test_session_roundtrip():
    sid = client.post("/v1/sessions").json()["session_id"]
    client.post("/v1/readings", json={"spread_type": "single_card", "question": "q", "session_id": sid})
    r = client.get(f"/v1/sessions/{sid}")
    assert r.status_code == 200
    readings = r.json()["readings"]
    assert len(readings) == 1
    assert readings[0]["spread_type"] == "single_card"
    assert len(readings[0]["cards"]) == 1


def test_unknown_session():
    assert client.get("/v1/sessions/does-not-exist").status_code == 404
