from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def scenario_payload(**overrides) -> dict:
    payload = {
        "mode": "PMT",
        "principal": 0,
        "contribution": 0,
        "rate": 6,
        "years": 20,
        "targetValue": 100000,
        "compoundsPerYear": 12,
        "inflationRate": 3,
    }
    payload.update(overrides)
    return payload


def test_future_value_endpoint_returns_breakdown(client: FlaskClient):
    resp = client.post(
        "/api/calc/future-value",
        json={"principal": 10000, "rate": 7, "years": 10, "compoundsPerYear": 12, "inflationRate": 3},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert isclose(body["futureValue"], 20096.61, abs_tol=0.5)
    assert len(body["breakdown"]) == 11
    assert body["breakdown"][0] == {
        "year": 0.0,
        "principal": 10000.0,
        "interest": 0.0,
        "total": 10000.0,
        "realValue": 10000.0,
    }


def test_scenario_endpoint_solves_contribution(client: FlaskClient):
    resp = client.post("/api/calc/scenario", json=scenario_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["mode"] == "PMT"
    assert body["status"] == "solved"
    assert isclose(body["calculatedValue"], 216.35, abs_tol=1.0)
    assert body["params"]["contribution"] == body["calculatedValue"]
    # default currency comes from the app config fixture
    assert body["currency"] == "€"
    assert body["display"].startswith("€216.")
    assert isclose(body["progress"]["percentage"], 100.0, rel_tol=1e-6)


def test_scenario_endpoint_defaults_compounding(client: FlaskClient):
    payload = scenario_payload(mode="FV", principal=1000, rate=0)
    del payload["compoundsPerYear"]
    payload["contribution"] = 10

    resp = client.post("/api/calc/scenario", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["params"]["compoundsPerYear"] == 12
    assert body["calculatedValue"] == 1000 + 10 * 12 * 20


def test_time_scenario_reports_already_met(client: FlaskClient):
    resp = client.post(
        "/api/calc/scenario",
        json=scenario_payload(mode="TIME", principal=1000, targetValue=1000),
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["calculatedValue"] == 0
    assert body["status"] == "already_met"


def test_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/future-value", json={"principal": 100, "compoundsPerYear": 0})
    assert resp.status_code == 422
    assert "detail" in resp.get_json()

    resp = client.post("/api/calc/scenario", json=scenario_payload(mode="NPV"))
    assert resp.status_code == 422

    resp = client.post("/api/calc/scenario", json=scenario_payload(unexpected=True))
    assert resp.status_code == 422


def test_non_object_body_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/scenario", data="not json", content_type="application/json")
    assert resp.status_code == 400


def test_goal_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/goal",
        json={
            "name": "Retirement Fund",
            "targetAmount": 250000,
            "targetDate": "2055-01-01",
            "currentSavings": 20000,
            "strategy": "CONTRIBUTION",
            "currency": "$",
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["mode"] == "PMT"
    assert body["goalName"] == "Retirement Fund"
    assert body["label"] == "Required Contribution"
    assert isclose(body["result"]["futureValue"], 250000, rel_tol=1e-6)


def test_goal_endpoint_rejects_bad_date(client: FlaskClient):
    resp = client.post(
        "/api/goal",
        json={"name": "Car", "targetAmount": 20000, "targetDate": "next spring"},
    )
    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_years_until_endpoint(client: FlaskClient):
    resp = client.get("/api/goal/years-until", query_string={"date": "2000-01-01"})
    assert resp.status_code == 200
    assert resp.get_json() == {"date": "2000-01-01", "years": 0.1}

    missing = client.get("/api/goal/years-until")
    assert missing.status_code == 400


def test_ping_and_cors_headers(client: FlaskClient):
    resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.status_code == 200
    assert resp.json == {"message": "pong"}
    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_future_value_endpoint_survives_overflow(client: FlaskClient):
    resp = client.post(
        "/api/calc/future-value",
        json={"principal": 1000, "rate": 1000, "years": 80, "compoundsPerYear": 365},
    )

    assert resp.status_code == 200
    assert resp.get_json()["futureValue"] == float("inf")
