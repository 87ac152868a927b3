"""HTTP routes for the Flask API."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from investcalc.core.currency import PLACEHOLDER_DISCLAIMER
from investcalc.domain.catalog import CalculatorDefinition, group_by_category
from investcalc.domain.currencies import AVAILABLE_CURRENCIES, DEFAULT_CURRENCY
from investcalc.domain.registry import CalculatorRegistry, CalculatorStatus
from investcalc.errors import CalculatorInputError, CalculatorNotFound, CalculatorUnavailable
from investcalc.flows.chatbot import answer_query
from investcalc.flows.projection import project_investment
from investcalc.flows.seo import fallback_seo_content, generate_seo_content, render_seo_html

api_bp = Blueprint("api", __name__)


def _registry() -> CalculatorRegistry:
    return current_app.extensions["investcalc"]["registry"]


def _ai_client():
    return current_app.extensions["investcalc"]["ai_client"]


def _definition_payload(definition: CalculatorDefinition, status: CalculatorStatus) -> Dict[str, Any]:
    payload = definition.model_dump(mode="json")
    payload["status"] = status.value
    return payload


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculatorInputError)
def _handle_calculator_input_error(exc: CalculatorInputError):
    return jsonify({"detail": exc.to_detail()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculatorNotFound)
def _handle_not_found(exc: CalculatorNotFound):
    return jsonify({"detail": "Calculator not found.", "slug": exc.slug}), HTTPStatus.NOT_FOUND


@api_bp.errorhandler(CalculatorUnavailable)
def _handle_unavailable(exc: CalculatorUnavailable):
    return (
        jsonify({"detail": "This calculator is coming soon.", "slug": exc.slug}),
        HTTPStatus.NOT_IMPLEMENTED,
    )


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    registry = _registry()
    return jsonify({"status": "ok", "calculators": len(registry), "available": len(registry.available_ids())})


@api_bp.get("/calculators")
def list_calculators() -> Any:
    """Catalogue grouped by category, optionally filtered with ?category=."""
    registry = _registry()
    grouped = group_by_category(registry.catalog, request.args.get("category"))
    categories = [
        {
            "name": name,
            "calculators": [
                _definition_payload(definition, registry.status(definition.id)) for definition in definitions
            ],
        }
        for name, definitions in grouped.items()
    ]
    return jsonify({"categories": categories, "count": sum(len(item["calculators"]) for item in categories)})


@api_bp.get("/calculators/<slug>")
def calculator_page(slug: str) -> Any:
    """Everything a calculator page needs: definition, status, defaults and SEO copy."""
    registry = _registry()
    definition = registry.definition(slug)
    status = registry.status(slug)

    defaults = None
    if status is CalculatorStatus.AVAILABLE:
        _, spec = registry.resolve(slug)
        defaults = spec.defaults()
        seo = generate_seo_content(_ai_client(), definition)
    else:
        seo = fallback_seo_content(definition)

    return jsonify(
        {
            "calculator": _definition_payload(definition, status),
            "status": status.value,
            "defaults": defaults,
            "seo": {"title": seo.title, "content": seo.content, "html": render_seo_html(seo.content)},
        }
    )


@api_bp.post("/calc/<slug>")
def calculate(slug: str) -> Any:
    """Validate the form payload for ``slug`` and run its calculation."""
    registry = _registry()
    registry.resolve(slug)
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    result = registry.run(slug, raw_payload)
    return jsonify(result)


@api_bp.get("/currencies")
def currencies() -> Any:
    return jsonify(
        {
            "currencies": [currency.model_dump() for currency in AVAILABLE_CURRENCIES],
            "default": DEFAULT_CURRENCY,
            "disclaimer": PLACEHOLDER_DISCLAIMER,
        }
    )


@api_bp.post("/chat")
def chat() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    response = answer_query(_ai_client(), raw_payload)
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """AI investment projection; serves a static notice when the model is unavailable."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    response = project_investment(_ai_client(), raw_payload)
    return jsonify(response.model_dump())
