from __future__ import annotations

import math

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app
from investcalc.config import Settings
from investcalc.domain.registry import SPECS, CalculatorRegistry


@pytest.fixture()
def coming_soon_client(fake_ai) -> FlaskClient:
    specs = {slug: spec for slug, spec in SPECS.items() if slug != "market-timing-cost"}
    app = create_app(settings=Settings(), ai_client=fake_ai, registry=CalculatorRegistry(specs=specs))
    with app.test_client() as test_client:
        yield test_client


def test_health(client: FlaskClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json == {"status": "ok", "calculators": 25, "available": 25}


def test_health_counts_only_runnable_calculators(coming_soon_client: FlaskClient):
    body = coming_soon_client.get("/api/health").get_json()

    assert body["calculators"] == 25
    assert body["available"] == 24


def test_list_calculators_grouped_by_category(client: FlaskClient):
    body = client.get("/api/calculators").get_json()

    assert body["count"] == 25
    assert [group["name"] for group in body["categories"]][0] == "Stock Market"
    first = body["categories"][0]["calculators"][0]
    assert first["id"] == "compound-interest"
    assert first["status"] == "available"
    assert first["keywords"] == ["compound interest", "investment growth", "finance"]


def test_list_calculators_filtered_by_category(client: FlaskClient):
    body = client.get("/api/calculators", query_string={"category": "Retirement Planning"}).get_json()

    assert body["count"] == 2
    assert body["categories"][0]["name"] == "Retirement Planning"


def test_calculator_page_includes_seo_and_defaults(client: FlaskClient):
    response = client.get("/api/calculators/compound-interest")
    body = response.get_json()

    assert response.status_code == 200
    assert body["status"] == "available"
    assert body["defaults"]["principal"] == 10000
    assert body["seo"]["title"] == "Compound Interest Calculator: Grow Your Savings"
    assert "<h2>How it works</h2>" in body["seo"]["html"]


def test_calculator_page_uses_fallback_when_ai_fails(broken_ai):
    app = create_app(settings=Settings(), ai_client=broken_ai)
    with app.test_client() as test_client:
        body = test_client.get("/api/calculators/sip-calculator").get_json()

    assert body["seo"] == {
        "title": "SIP Calculator",
        "content": "Project Systematic Investment Plan returns.",
        "html": "Project Systematic Investment Plan returns.",
    }


def test_unknown_calculator_page_is_404(client: FlaskClient):
    response = client.get("/api/calculators/lottery-odds")

    assert response.status_code == 404
    assert response.json["detail"] == "Calculator not found."


def test_coming_soon_page_skips_ai(coming_soon_client: FlaskClient, fake_ai):
    body = coming_soon_client.get("/api/calculators/market-timing-cost").get_json()

    assert body["status"] == "coming_soon"
    assert body["defaults"] is None
    assert body["seo"]["title"] == "Market Timing Cost Calculator"
    assert fake_ai.calls == []


def test_coming_soon_calculation_is_501(coming_soon_client: FlaskClient):
    response = coming_soon_client.post("/api/calc/market-timing-cost", json={})

    assert response.status_code == 501


def test_compound_interest_endpoint(client: FlaskClient):
    payload = {"principal": 10000, "annual_rate": 7, "years": 10, "compounding": "monthly"}
    response = client.post("/api/calc/compound-interest", json=payload)

    assert response.status_code == 200
    body = response.get_json()
    assert body["future_value"] == 20096.61
    assert len(body["annual_breakdown"]) == 10
    assert math.isclose(body["annual_breakdown"][-1]["closing_balance"], 20096.61, abs_tol=0.01)


def test_swp_endpoint_reference_plan(client: FlaskClient):
    payload = {"initial_investment": 1_000_000, "monthly_withdrawal": 5000, "annual_rate": 7, "years": 20}
    body = client.post("/api/calc/swp-calculator", json=payload).get_json()

    assert body["depleted"] is False
    assert body["final_balance"] > 0


def test_validation_errors_are_422(client: FlaskClient):
    response = client.post("/api/calc/sip-calculator", json={"monthly_investment": 0})

    assert response.status_code == 422
    detail = response.get_json()["detail"]
    assert detail[0]["loc"] == ["monthly_investment"]


def test_oversized_amounts_are_422(client: FlaskClient):
    payload = {"principal": 1e308, "annual_rate": 100, "years": 100, "compounding": "monthly"}
    response = client.post("/api/calc/compound-interest", json=payload)

    assert response.status_code == 422
    assert response.get_json()["detail"][0]["loc"] == ["principal"]


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_amounts_are_422(client: FlaskClient, literal):
    response = client.post(
        "/api/calc/time-value-of-money",
        data='{"value": %s}' % literal,
        content_type="application/json",
    )

    assert response.status_code == 422
    assert response.get_json()["detail"][0]["loc"] == ["value"]


def test_largest_allowed_amount_stays_finite(client: FlaskClient):
    payload = {"principal": 1e12, "annual_rate": 100, "years": 100, "compounding": "monthly"}
    body = client.post("/api/calc/compound-interest", json=payload).get_json()

    assert math.isfinite(body["future_value"])
    assert all(math.isfinite(row["closing_balance"]) for row in body["annual_breakdown"])


def test_unknown_fields_are_rejected(client: FlaskClient):
    response = client.post("/api/calc/dividend-yield", json={"annual_dividend": 1, "price": 10})

    assert response.status_code == 422


def test_model_level_validation_is_422(client: FlaskClient):
    response = client.post("/api/calc/retirement-corpus", json={"current_age": 60, "retirement_age": 50})

    assert response.status_code == 422
    assert "retirement_age must be greater than current_age" in response.get_json()["detail"][0]["msg"]


def test_calculation_field_errors_are_422(client: FlaskClient):
    payload = {"north_america": 80, "europe": 20, "asia_pacific": 10, "emerging_markets": 0}
    response = client.post("/api/calc/global-allocation", json=payload)

    assert response.status_code == 422
    assert response.get_json()["detail"] == [
        {"loc": ["north_america"], "msg": "Total allocation cannot exceed 100%.", "type": "value_error"}
    ]


def test_global_allocation_endpoint_accepts_full_allocation(client: FlaskClient):
    payload = {"north_america": 60, "europe": 20, "asia_pacific": 10, "emerging_markets": 10}
    body = client.post("/api/calc/global-allocation", json=payload).get_json()

    assert body["total_percentage"] == 100
    assert body["unallocated_percentage"] == 0
    assert body["note"] is None


def test_unknown_calculation_is_404(client: FlaskClient):
    response = client.post("/api/calc/lottery-odds", json={})

    assert response.status_code == 404


def test_crypto_dca_units_keep_eight_decimals(client: FlaskClient):
    payload = {"periodic_investment": 100, "frequency": "monthly", "years": 1, "average_price": 30000}
    body = client.post("/api/calc/crypto-dca", json=payload).get_json()

    assert body["units_acquired"] == 0.04


def test_currencies(client: FlaskClient):
    body = client.get("/api/currencies").get_json()

    assert len(body["currencies"]) == 9
    assert body["default"] == "USD"
    assert {"code": "INR", "label": "INR (₹)", "symbol": "₹"} in body["currencies"]


def test_chat(client: FlaskClient):
    response = client.post("/api/chat", json={"query": "What is SIP?"})

    assert response.status_code == 200
    assert response.json == {"answer": "Compound interest is interest earned on interest."}


def test_chat_requires_a_query(client: FlaskClient):
    assert client.post("/api/chat", json={}).status_code == 422


def test_chat_fallback_when_ai_fails(broken_ai):
    app = create_app(settings=Settings(), ai_client=broken_ai)
    with app.test_client() as test_client:
        response = test_client.post("/api/chat", json={"query": "hi"})

    assert response.status_code == 200
    assert response.json["answer"].startswith("I'm having trouble connecting")


def test_projection(client: FlaskClient):
    payload = {
        "investment_type": "mutual fund",
        "historical_data": "[]",
        "projection_horizon": "1 year",
        "risk_tolerance": "high",
    }
    body = client.post("/api/projection", json=payload).get_json()

    assert body["projected_range"]["optimistic"] == "$14,000"
    assert body["disclaimer"] == "Not financial advice."
