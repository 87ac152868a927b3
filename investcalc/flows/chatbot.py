"""Site assistant answering questions about the calculators and investing."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.flows.base import Flow, GenerativeClient, run_with_fallback

FALLBACK_ANSWER = "I'm having trouble connecting right now. Please try again in a moment."


class ChatbotInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    query: str = Field(..., min_length=1, max_length=2000, description="The user query about the website or investing.")


class ChatbotOutput(BaseModel):
    answer: str


CHATBOT_FLOW = Flow(
    name="chatbot",
    input_model=ChatbotInput,
    output_model=ChatbotOutput,
    template=(
        "You are a helpful AI chatbot assistant. Your role is to answer user queries "
        "related to the website and investment-related topics.\n"
        "Use your knowledge to provide accurate and informative answers.\n"
        "User Query: {query}\n"
        "Answer:"
    ),
)


def answer_query(client: Optional[GenerativeClient], payload) -> ChatbotOutput:
    return run_with_fallback(
        CHATBOT_FLOW,
        client,
        payload,
        lambda _data: ChatbotOutput(answer=FALLBACK_ANSWER),
    )
