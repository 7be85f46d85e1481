# Dummy model client for local dev and testing without API calls.
# Replies in the delimited format the persona prompt asks for.

import json
from typing import List, Tuple, Dict, Any

from ..prompts import FOLLOWUPS_DELIMITER
from ..types import Message, ModelParams


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        user_inputs = [m.content for m in messages if m.role == "user"]
        question = user_inputs[-1] if user_inputs else "(no user input)"
        followups = [f"Tell me more about: {question}", "What are the sources for this?"]
        text = f"[ECHO RESPONSE]\n{question}\n{FOLLOWUPS_DELIMITER}\n{json.dumps(followups)}"
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta
