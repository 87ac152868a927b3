"""AI investment projection from user-supplied historical data."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.flows.base import Flow, GenerativeClient, run_with_fallback

PROJECTION_DISCLAIMER = (
    "These projections are generated by AI from historical data and are not financial advice. "
    "Past performance does not guarantee future results."
)


class InvestmentProjectionInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    investment_type: str = Field(..., min_length=1, description="e.g. stock, crypto, real estate, mutual fund")
    historical_data: str = Field(..., min_length=1, description="JSON string with dates and closing prices.")
    projection_horizon: str = Field(..., min_length=1, description="e.g. '6 months', '2 years'")
    risk_tolerance: str = Field("medium", min_length=1, description="low, medium or high")


class ProjectedRange(BaseModel):
    optimistic: str
    pessimistic: str
    most_likely: str


class InvestmentProjectionOutput(BaseModel):
    projection_summary: str
    projected_range: ProjectedRange
    disclaimer: str


INVESTMENT_PROJECTION_FLOW = Flow(
    name="investment_projection",
    input_model=InvestmentProjectionInput,
    output_model=InvestmentProjectionOutput,
    template=(
        "You are an AI-powered investment projection tool. You take historical data, investment "
        "type, projection horizon and risk tolerance as input.\n"
        "Based on the historical data:\n"
        "{historical_data}\n\n"
        "For the investment type: {investment_type}\n"
        "Over a period of: {projection_horizon}\n"
        "Given a risk tolerance of: {risk_tolerance}\n\n"
        "Provide a projection summary with an optimistic, pessimistic and most likely range for "
        "the investment. Also include a disclaimer that these are AI-based projections and not "
        "financial advice."
    ),
)


def _unavailable(data: InvestmentProjectionInput) -> InvestmentProjectionOutput:
    message = "Projection unavailable"
    return InvestmentProjectionOutput(
        projection_summary=(
            f"An AI projection for this {data.investment_type} investment over "
            f"{data.projection_horizon} could not be generated right now. Please try again later."
        ),
        projected_range=ProjectedRange(optimistic=message, pessimistic=message, most_likely=message),
        disclaimer=PROJECTION_DISCLAIMER,
    )


def project_investment(client: Optional[GenerativeClient], payload) -> InvestmentProjectionOutput:
    return run_with_fallback(INVESTMENT_PROJECTION_FLOW, client, payload, _unavailable)
