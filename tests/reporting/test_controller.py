import pytest

from src.workforce_revenue.workforce_revenue.main import create_app


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


BODY = {
    "start_date": "2025-01-01",
    "end_date": "2025-02-28",
    "fill_empty_months": True,
    "clients": [{"id": "c1", "currency": "USD", "commission_type": "percentage", "commission_value": 10}],
    "assignments": [
        {
            "employee_id": "e1",
            "project_id": "p1",
            "client_id": "c1",
            "client_billing": 1000,
            "billing_type": "Monthly",
            "salary": 50000,
            "salary_type": "Monthly",
            "salary_currency": "INR",
            "working_days_config": "all_days",
        }
    ],
    "time_logs": [
        {"employee_id": "e1", "date": "2025-01-15", "projects": [{"project_id": "p1", "hours": 8}]},
        {"employee_id": "e1", "date": "2024-12-31", "projects": [{"project_id": "p1", "hours": 8}]},
    ],
    "candidates": [
        {"id": "k1", "ctc": "$5000 Hourly", "job_type_category": "External", "joining_date": "2025-02-03", "client_id": "c1"}
    ],
}


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json()["base_currency"] == "INR"


def test_attribution_report(client):
    resp = client.post("/api/reports/attribution", json=BODY)
    assert resp.status_code == 200

    report = resp.get_json()["report"]
    revenue = 8 * 84000 * 12 / (365 * 8)
    cost = 8 * 50000 * 12 / (365 * 8)
    commission = 846_720_000 * 10 / 100

    assert [b["month"] for b in report["monthly_buckets"]] == ["Jan 2025", "Feb 2025"]
    assert report["monthly_buckets"][0]["revenue"] == pytest.approx(revenue)
    assert report["monthly_buckets"][1]["hires"] == 1
    assert report["total_revenue"] == pytest.approx(revenue + commission)
    assert report["total_profit"] == pytest.approx(revenue - cost + commission)
    assert report["placements"][0]["profit"] == pytest.approx(commission)


def test_bad_payload_is_400(client):
    resp = client.post("/api/reports/attribution", json={"time_logs": "nope"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_non_json_body_is_400(client):
    resp = client.post("/api/reports/attribution", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_non_finite_hours_are_400(client):
    body = dict(
        BODY,
        time_logs=[
            {"employee_id": "e1", "date": "2025-01-15", "projects": [{"project_id": "p1", "hours": 8}, {"project_id": "p1", "hours": "NaN"}]}
        ],
    )
    resp = client.post("/api/reports/attribution", json=body)
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert "finite" in resp.get_json()["message"]
