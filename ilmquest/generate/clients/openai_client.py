# Client for the OpenAI Chat Completions API.
# Same interface as HuggingFaceClient.

from typing import List, Tuple, Dict, Any, Optional

from openai import OpenAI, OpenAIError

from ilmquest.errors import GenerationError
from ..prompts import NO_RESPONSE_PLACEHOLDER
from ..types import Message, ModelParams


class OpenAIClient:
    def __init__(self, api_key: Optional[str], model: str = "gpt-4o-mini", client: Optional[OpenAI] = None):
        self.model = model
        self.client = client or OpenAI(api_key=api_key)

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in messages],
            "max_tokens": params.max_tokens or 700,
        }
        if params.temperature is not None:
            kwargs["temperature"] = params.temperature
        try:
            resp = self.client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            raise GenerationError(f"OpenAI request failed: {e}") from e

        content = resp.choices[0].message.content if resp.choices else None
        text = content or NO_RESPONSE_PLACEHOLDER
        return text, {"engine": "openai", "model": self.model}
