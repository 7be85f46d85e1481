# Client for the Hugging Face router (OpenAI-compatible chat completions).

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from ilmquest.errors import GenerationError
from ..prompts import NO_RESPONSE_PLACEHOLDER
from ..types import Message, ModelParams

logger = logging.getLogger(__name__)

HF_CHAT_URL = "https://router.huggingface.co/v1/chat/completions"
HF_MODEL = "deepseek-ai/DeepSeek-V3-0324:fastest"


def first_choice_text(data: Any) -> Optional[str]:
    """Content of the first generated choice, or None when there is none."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    msg = choices[0].get("message") or {}
    content = msg.get("content")
    return str(content) if content else None


class HuggingFaceClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = HF_MODEL,
        url: str = HF_CHAT_URL,
        timeout: float = 60.0,
    ):
        self.api_key = api_key
        self.model = model
        self.url = url
        self.timeout = timeout

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in messages],
            "max_tokens": int(params.max_tokens or 700),
        }
        if params.temperature is not None:
            payload["temperature"] = float(params.temperature)

        try:
            resp = requests.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise GenerationError(f"Hugging Face request failed: {e}") from e
        if not resp.ok:
            raise GenerationError(
                f"Hugging Face error {resp.status_code}: {resp.text[:500]}",
                status_code=resp.status_code,
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise GenerationError("Hugging Face returned a non-JSON body") from e

        text = first_choice_text(data)
        if text is None:
            logger.warning("[llm:hf] no generated choice; using placeholder")
            text = NO_RESPONSE_PLACEHOLDER
        logger.info("[llm:hf] OUT response_len=%d", len(text))
        return text, {"engine": "huggingface", "model": self.model}
