"""SEO copy for calculator pages, plus the light markdown-to-HTML pass used to display it."""

from __future__ import annotations

import re
from typing import Optional

from markupsafe import escape
from pydantic import BaseModel, ConfigDict, Field

from investcalc.domain.catalog import CalculatorDefinition
from investcalc.flows.base import Flow, GenerativeClient, run_with_fallback


class SeoContentInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    calculator_name: str = Field(..., min_length=1)
    keywords: str = ""


class SeoContentOutput(BaseModel):
    title: str
    content: str


SEO_CONTENT_FLOW = Flow(
    name="seo_content",
    input_model=SeoContentInput,
    output_model=SeoContentOutput,
    template=(
        "You are an SEO expert specializing in creating content for financial calculators.\n"
        "Generate SEO-optimized content for the {calculator_name} calculator, using the following "
        "keywords: {keywords}.\n"
        "The content should be informative, engaging, and optimized for search engines.\n"
        "The content should include a title and a body.\n"
        "The content must be related to finance and investment.\n"
        "Include a detailed explanation of the calculator and the finance and investment "
        "calculations involved, how the calculator works, and how the user can benefit from it.\n"
        "Ensure that the content is original and not plagiarized."
    ),
)

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_LINE_END = r"(?:\n|<br />)"
_H3 = re.compile(r"### (.*?)" + _LINE_END)
_H2 = re.compile(r"## (.*?)" + _LINE_END)
_H1 = re.compile(r"# (.*?)" + _LINE_END)
_LIST_ITEM = re.compile(r"^- (.*?)" + _LINE_END, re.MULTILINE)
_LIST_RUN = re.compile(r"(<li>.*?</li>)+", re.DOTALL)


def render_seo_html(content: str) -> str:
    """Basic markdown subset: bold, italics, h1-h3, '-' bullet lists, newlines."""
    html = str(escape(content))
    html = _BOLD.sub(r"<strong>\1</strong>", html)
    html = _ITALIC.sub(r"<em>\1</em>", html)
    html = _H3.sub(r"<h3>\1</h3>", html)
    html = _H2.sub(r"<h2>\1</h2>", html)
    html = _H1.sub(r"<h1>\1</h1>", html)
    html = _LIST_ITEM.sub(r"<li>\1</li>", html)
    html = _LIST_RUN.sub(lambda match: f"<ul>{match.group(0)}</ul>", html)
    return html.replace("\n", "<br />")


def fallback_seo_content(definition: CalculatorDefinition) -> SeoContentOutput:
    return SeoContentOutput(title=definition.name, content=definition.description)


def generate_seo_content(client: Optional[GenerativeClient], definition: CalculatorDefinition) -> SeoContentOutput:
    payload = SeoContentInput(calculator_name=definition.name, keywords=", ".join(definition.keywords))
    return run_with_fallback(
        SEO_CONTENT_FLOW,
        client,
        payload,
        lambda _data: fallback_seo_content(definition),
    )
