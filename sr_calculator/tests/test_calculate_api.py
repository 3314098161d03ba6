from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient

from sr_calculator.models import INPUT_FIELDS


def calculate_payload() -> dict:
    return {
        "currentAge": 30,
        "retirementAge": 60,
        "currentSavings": 500000,
        "monthlyContribution": 10000,
        "expectedAnnualReturnRate": 0.12,
        "currentMonthlyExpense": 30000,
        "annualInflationRate": 0.06,
        "postRetirementNominalReturnRate": 0.08,
    }


def test_calculate_returns_projection(client: FlaskClient):
    resp = client.post("/api/calculate", json=calculate_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True

    data = body["data"]
    assert data["input"] == calculate_payload()

    output = data["output"]
    assert "isValid" not in output
    assert output["yearsToRetirement"] == 30
    assert output["totalMonths"] == 360
    assert isclose(output["retirementCorpus"], output["fvSip"] + output["fvCurrent"])
    assert isclose(output["realPostRetReturn"], 0.018868, abs_tol=1e-6)
    assert output["retirementDurationYears"] == output["retirementDurationMonths"] / 12
    assert data["warnings"] == ["Calculated corpus seems unusually high - please verify inputs"]


def test_calculate_coerces_strings_and_missing_fields(client: FlaskClient):
    payload = calculate_payload()
    payload["currentSavings"] = "250000"
    payload["currentMonthlyExpense"] = "not a number"
    del payload["postRetirementNominalReturnRate"]

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 200
    echoed = resp.get_json()["data"]["input"]
    assert echoed["currentSavings"] == 250000.0
    assert echoed["currentMonthlyExpense"] == 0.0
    assert echoed["postRetirementNominalReturnRate"] == 0.0


def test_validation_failure_returns_400_with_details(client: FlaskClient):
    payload = calculate_payload()
    payload["currentSavings"] = -1
    payload["annualInflationRate"] = 0.2

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "Validation failed"
    assert body["details"] == ["Current savings cannot be negative"]
    assert body["warnings"] == ["Annual inflation rate should be between 0% and 15%"]


def test_empty_body_fails_age_validation(client: FlaskClient):
    resp = client.post("/api/calculate", json={})

    assert resp.status_code == 400
    details = resp.get_json()["details"]
    assert "Current age must be positive" in details
    assert "Retirement age must be greater than current age" in details


def test_non_object_body_returns_detail(client: FlaskClient):
    resp = client.post("/api/calculate", json=[1, 2, 3])

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_fractional_age_returns_detail(client: FlaskClient):
    payload = calculate_payload()
    payload["currentAge"] = 30.5

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_malformed_json_is_a_server_fault(client: FlaskClient):
    resp = client.post("/api/calculate", data="{not json", content_type="application/json")

    assert resp.status_code == 500
    assert resp.get_json() == {
        "error": "Internal server error",
        "message": "Failed to process calculation",
    }


def test_describe_calculate_lists_required_fields(client: FlaskClient):
    resp = client.get("/api/calculate")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["endpoint"] == "/api/calculate"
    assert body["method"] == "POST"
    assert body["requiredFields"] == list(INPUT_FIELDS)


def test_out_of_range_growth_is_reported_as_null(client: FlaskClient):
    payload = calculate_payload()
    payload.update(currentAge=20, retirementAge=110, expectedAnnualReturnRate=12)

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 200
    output = resp.get_json()["data"]["output"]
    assert output["fvSip"] is None
    assert output["retirementCorpus"] is None
    assert output["retirementDurationMonths"] == 1200
    assert output["futureMonthlyExpense"] > 0


def test_non_finite_input_echo_is_null(client: FlaskClient):
    payload = calculate_payload()
    payload["currentMonthlyExpense"] = "Infinity"

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["input"]["currentMonthlyExpense"] is None
    assert data["output"]["retirementDurationMonths"] == 1


def test_fault_outside_calculate_uses_neutral_message(client: FlaskClient, monkeypatch):
    def broken(**kwargs):
        raise RuntimeError("clock unavailable")

    monkeypatch.setattr("sr_calculator.app.api.routes.get_health_status", broken)

    resp = client.get("/api/health")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal server error", "message": "Failed to process request"}
