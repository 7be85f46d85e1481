# Client for Ollama local inference via /api/chat.

from typing import List, Tuple, Dict, Any

import requests

from ilmquest.errors import GenerationError
from ..prompts import NO_RESPONSE_PLACEHOLDER
from ..types import Message, ModelParams


class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434", timeout: float = 180.0):
        self.model = model
        self.host = host.rstrip("/")
        self.timeout = timeout

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        options: Dict[str, Any] = {"num_predict": int(params.max_tokens or 700)}
        if params.temperature is not None:
            options["temperature"] = float(params.temperature)
        payload = {
            "model": self.model,
            "messages": [m.to_dict() for m in messages],
            "stream": False,
            "options": options,
        }
        url = f"{self.host}/api/chat"
        try:
            resp = requests.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise GenerationError(f"Ollama request failed: {e}") from e
        text = (data.get("message") or {}).get("content") or NO_RESPONSE_PLACEHOLDER
        return text, {"engine": "ollama", "model": self.model}
