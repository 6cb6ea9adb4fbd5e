"""Tests for the FastAPI surface."""

from fastapi.testclient import TestClient

from plan_advisor.api import app, get_service
from plan_advisor.services.latency import LIST_PLANS, NoLatency
from plan_advisor.services.plans import InsurancePlanService
from plan_advisor.services.providers import MockPlanProvider


def _client(**failures) -> TestClient:
    service = InsurancePlanService(MockPlanProvider(NoLatency(failures=failures)))
    app.dependency_overrides[get_service] = lambda: service
    return TestClient(app)


def teardown_function():
    app.dependency_overrides.clear()


def test_health():
    body = _client().get("/health").json()
    assert body["status"] == "ok"
    assert body["backend"] in {"mock", "http"}


def test_list_plans_uses_camel_case_keys():
    resp = _client().post("/plans", json={"coverageType": "premium"})
    assert resp.status_code == 200
    first = resp.json()[0]
    assert first["monthlyPremium"] == 2999
    assert first["apiSource"] == "hdfc"
    assert "monthlyPremiumINR" not in first


def test_plan_details():
    resp = _client().get("/plans/1", params={"provider": "hdfc"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["monthlyPremiumINR"] == 2999 * 83.0
    assert body["waitingPeriods"] == {"general": "30 days", "preExisting": "2 years", "maternity": "9 months"}
    assert len(body["exclusions"]) == 4


def test_unknown_plan_is_404():
    resp = _client().get("/plans/9999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Plan not found."


def test_fetch_failure_is_502():
    resp = _client(**{LIST_PLANS: ConnectionError()}).post("/plans", json={})
    assert resp.status_code == 502


def test_comparison_and_providers():
    client = _client()
    body = client.post("/comparison", json={"selectedPlanId": 5, "size": 2}).json()
    assert [p["id"] for p in body["plans"]] == [5, 1]
    assert len(client.get("/providers").json()) == 5


def test_submit_selection():
    resp = _client().post(
        "/selections",
        json={"userData": {"name": "Demo User", "email": "demo@example.com"}, "selectedPlan": {"id": 1}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["referenceId"].startswith("REF-")
    assert len(body["nextSteps"]) == 3


def test_comparison_with_float_selection():
    body = _client().post("/comparison", json={"selectedPlanId": 3.0}).json()
    assert [p["id"] for p in body["plans"]] == [3, 1, 2]
