"""API 测试: analyze / session dismiss flow"""

from fastapi.testclient import TestClient

from itinerary_analyzer.api.main import app

client = TestClient(app)


def _payload(destination: str = "Paris, France") -> dict:
    return {
        "trip": {
            "id": "t1",
            "destination": destination,
            "start_date": "2026-05-01",
            "end_date": "2026-05-03",
            "duration_days": 3,
            "estimated_budget": 600,
        },
        "days": [
            {"id": "d1", "trip_id": "t1", "day_number": 1, "date": "2026-05-01"},
            {"id": "d2", "trip_id": "t1", "day_number": 2, "date": "2026-05-02"},
            {"id": "d3", "trip_id": "t1", "day_number": 3, "date": "2026-05-03"},
        ],
        "activities": [
            {
                "id": "a1",
                "day_id": "d2",
                "title": "Tokyo Tower Visit",
                "activity_type": "attraction",
                "estimated_cost": 30,
                "duration_minutes": 120,
                "order_index": 0,
            },
            {
                "id": "f1",
                "day_id": "d2",
                "title": "Depart CDG",
                "activity_type": "flight",
                "estimated_cost": 150,
                "duration_minutes": 180,
                "order_index": 1,
            },
        ],
    }


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "budget" in data["checks"]
    assert data["active_sessions"] >= 0
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_analyze_returns_bucketed_findings():
    r = client.post("/analyze", json=_payload())
    assert r.status_code == 200
    data = r.json()
    result = data["result"]
    assert result["status"] == "ready"
    assert [f["id"] for f in result["findings_by_priority"]["high"]] == [
        "flight-departure-f1",
        "location-mismatch-a1",
    ]
    assert data["summary"]["by_priority"]["high"] == 2
    assert result["findings"][0]["kind"] == "error"


def test_analyze_applies_caller_dismissals():
    payload = _payload()
    payload["dismissed_ids"] = ["location-mismatch-a1"]
    data = client.post("/analyze", json=payload).json()
    assert [f["id"] for f in data["result"]["findings"]] == ["flight-departure-f1"]
    assert data["dismissed_ids"] == ["location-mismatch-a1"]


def test_analyze_without_trip_is_clean():
    data = client.post("/analyze", json={"trip": None, "days": [], "activities": []}).json()
    assert data["result"]["status"] == "clean"
    assert data["result"]["findings"] == []
    assert data["summary"]["headline"] == "No issues detected"


def test_analyze_rejects_negative_cost():
    payload = _payload()
    payload["activities"][0]["estimated_cost"] = -5
    assert client.post("/analyze", json=payload).status_code == 422


def test_session_dismiss_persists_across_reanalysis():
    r1 = client.post("/sessions/planner-1/analyze", json=_payload())
    assert r1.status_code == 200
    assert client.get("/health").json()["active_sessions"] >= 1
    assert len(r1.json()["result"]["findings"]) == 2

    r2 = client.post("/sessions/planner-1/dismiss", json={"finding_id": "flight-departure-f1"})
    assert [f["id"] for f in r2.json()["result"]["findings"]] == ["location-mismatch-a1"]

    r3 = client.post("/sessions/planner-1/analyze", json=_payload())
    data = r3.json()
    assert [f["id"] for f in data["result"]["findings"]] == ["location-mismatch-a1"]
    assert data["dismissed_ids"] == ["flight-departure-f1"]
    assert data["result"]["snapshot_version"] == 2

    r4 = client.post("/sessions/planner-1/restore", json={"finding_id": "flight-departure-f1"})
    assert len(r4.json()["result"]["findings"]) == 2


def test_dismiss_unknown_session_is_404():
    r = client.post("/sessions/nobody/dismiss", json={"finding_id": "x"})
    assert r.status_code == 404


def test_invalid_session_id_is_rejected():
    r = client.post("/sessions/bad id!/analyze", json=_payload())
    assert r.status_code == 422
