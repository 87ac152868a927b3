"""
Declarative AI flows.

A flow is a named prompt template with a typed input and a typed output. The
actual model call is delegated to whatever ``GenerativeClient`` the app was
built with; the flow only renders the prompt and validates both ends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, Type, Union

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class GenerativeClient(Protocol):
    def generate(self, prompt_name: str, prompt: str, output_model: Type[BaseModel]) -> Any:
        """Return the model output as a JSON string or a mapping matching ``output_model``."""
        ...


class FlowUnavailable(RuntimeError):
    """Raised when a flow is run without a configured client."""


@dataclass(frozen=True)
class Flow:
    name: str
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]
    template: str

    def validate_input(self, payload: Union[BaseModel, Mapping[str, Any]]) -> BaseModel:
        if isinstance(payload, self.input_model):
            return payload
        return self.input_model.model_validate(payload)

    def render(self, data: BaseModel) -> str:
        return self.template.format(**data.model_dump())

    def parse_output(self, raw: Any) -> BaseModel:
        if isinstance(raw, self.output_model):
            return raw
        if isinstance(raw, (str, bytes)):
            return self.output_model.model_validate_json(raw)
        return self.output_model.model_validate(raw)

    def run(self, client: Optional[GenerativeClient], payload: Union[BaseModel, Mapping[str, Any]]) -> BaseModel:
        data = self.validate_input(payload)
        if client is None:
            raise FlowUnavailable(f"No generative client configured for flow '{self.name}'")
        raw = client.generate(self.name, self.render(data), self.output_model)
        return self.parse_output(raw)


def run_with_fallback(
    flow: Flow,
    client: Optional[GenerativeClient],
    payload: Union[BaseModel, Mapping[str, Any]],
    fallback: Callable[[BaseModel], BaseModel],
) -> BaseModel:
    """
    Run ``flow`` and fail open.

    Input validation errors propagate to the caller. Anything that goes wrong
    after that (no client, SDK/network failure, unparseable output) is logged
    and answered with ``fallback(input)``.
    """
    data = flow.validate_input(payload)

    if client is None:
        logger.debug("No AI client configured; serving fallback for %s", flow.name)
        return fallback(data)

    try:
        return flow.run(client, data)
    except Exception:
        logger.exception("AI flow %s failed; serving fallback content", flow.name)
        return fallback(data)
