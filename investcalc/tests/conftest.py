from __future__ import annotations

import json

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app
from investcalc.config import Settings


class FakeAIClient:
    """Stands in for GeminiClient: canned output per prompt name, or a raised error."""

    def __init__(self, responses=None, error: Exception = None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def generate(self, prompt_name, prompt, output_model):
        self.calls.append((prompt_name, prompt))
        if self.error is not None:
            raise self.error
        return self.responses[prompt_name]


CANNED_RESPONSES = {
    "chatbot": json.dumps({"answer": "Compound interest is interest earned on interest."}),
    "seo_content": {
        "title": "Compound Interest Calculator: Grow Your Savings",
        "content": "## How it works\n**Compounding** adds interest to the balance.\n- Monthly\n- Yearly\n",
    },
    "investment_projection": {
        "projection_summary": "Moderate growth expected.",
        "projected_range": {"optimistic": "$14,000", "pessimistic": "$9,000", "most_likely": "$11,500"},
        "disclaimer": "Not financial advice.",
    },
}


@pytest.fixture()
def fake_ai() -> FakeAIClient:
    return FakeAIClient(responses=CANNED_RESPONSES)


@pytest.fixture()
def broken_ai() -> FakeAIClient:
    return FakeAIClient(error=RuntimeError("model unavailable"))


@pytest.fixture()
def malformed_ai() -> FakeAIClient:
    return FakeAIClient(responses={"chatbot": json.dumps({"reply": "wrong field"})})


@pytest.fixture()
def flask_app(fake_ai):
    return create_app(settings=Settings(), ai_client=fake_ai)


@pytest.fixture()
def client(flask_app) -> FlaskClient:
    with flask_app.test_client() as test_client:
        yield test_client
