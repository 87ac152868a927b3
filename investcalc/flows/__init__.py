"""AI flows: chatbot, SEO content and investment projection."""

from investcalc.flows.base import Flow, FlowUnavailable, GenerativeClient, run_with_fallback
from investcalc.flows.chatbot import CHATBOT_FLOW, ChatbotInput, ChatbotOutput, answer_query
from investcalc.flows.projection import (
    INVESTMENT_PROJECTION_FLOW,
    InvestmentProjectionInput,
    InvestmentProjectionOutput,
    project_investment,
)
from investcalc.flows.seo import SEO_CONTENT_FLOW, SeoContentOutput, generate_seo_content, render_seo_html

__all__ = [
    "CHATBOT_FLOW",
    "INVESTMENT_PROJECTION_FLOW",
    "SEO_CONTENT_FLOW",
    "ChatbotInput",
    "ChatbotOutput",
    "Flow",
    "FlowUnavailable",
    "GenerativeClient",
    "InvestmentProjectionInput",
    "InvestmentProjectionOutput",
    "SeoContentOutput",
    "answer_query",
    "generate_seo_content",
    "project_investment",
    "render_seo_html",
    "run_with_fallback",
]
