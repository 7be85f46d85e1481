# ChatGenerator:
# - accepts any model client (Hugging Face, OpenAI, Ollama, Echo)
# - builds the windowed message sequence from the persona prompt + history
# - splits the raw reply into answer + follow-ups
# - returns ChatResponse with the extended history

from __future__ import annotations
import logging
import os
from typing import List, Optional, Sequence

import yaml

from .history import DEFAULT_WINDOW_SIZE, HistoryWindowBuilder, TurnLike, as_message
from .prompts import DEFAULT_CITATIONS, SYSTEM_PROMPT, build_system_prompt
from .segmenter import segment
from .types import Citation, ChatResponse, Message, ModelParams

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")
DEFAULT_MAX_TOKENS = 700


class ChatGenerator:
    def __init__(
        self,
        model_client,
        history_builder: Optional[HistoryWindowBuilder] = None,
        config_path: Optional[str] = DEFAULT_CONFIG_PATH,
        max_tokens: Optional[int] = None,
        window_size: Optional[int] = None,
    ):
        self.model_client = model_client
        self.config_path = config_path
        self.cfg = self._load_config()
        if window_size is None:
            window_size = int(self.cfg.get("window_size", DEFAULT_WINDOW_SIZE))
        self.history_builder = history_builder or HistoryWindowBuilder(
            system_prompt=self._compose_system_message(),
            window_size=window_size,
        )
        self.max_tokens = max_tokens or self.cfg.get("max_tokens", DEFAULT_MAX_TOKENS)
        self.citations = self._load_citations()

    def _load_config(self) -> dict:
        if not self.config_path or not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _compose_system_message(self) -> str:
        """A full `system_prompt` wins over a `persona` block; both fall back to the built-in prompt."""
        prompt = self.cfg.get("system_prompt")
        if prompt:
            return prompt.strip()
        persona = self.cfg.get("persona")
        if persona:
            return build_system_prompt(
                persona.get("name", "Ilmquest"),
                persona.get("style", ""),
                persona.get("directives", "").strip(),
            )
        return SYSTEM_PROMPT

    def _load_citations(self) -> List[Citation]:
        raw = self.cfg.get("citations") or DEFAULT_CITATIONS
        return [Citation(source=str(c["source"]), content=str(c["content"])) for c in raw]

    def chat(
        self,
        question: str,
        history: Sequence[TurnLike] = (),
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> ChatResponse:
        """Main entry point for generation. Transport errors from the client propagate."""
        messages = self.history_builder.build(history, question)
        params = ModelParams(
            temperature=temperature if temperature is not None else self.cfg.get("temperature"),
            max_tokens=max_tokens or self.max_tokens,
        )
        logger.info(
            "[generator] IN  question_len=%d history=%d messages=%d",
            len(question), len(history), len(messages),
        )

        raw_text, meta = self.model_client.generate(messages, params)
        result = segment(raw_text)
        logger.info(
            "[generator] OUT tier=%s outcome=%s answer_len=%d followups=%d",
            result.tier, result.outcome.value, len(result.answer), len(result.followups),
        )

        turns = [as_message(t) for t in history]
        turns.append(Message(role="user", content=question))
        turns.append(Message(role="assistant", content=result.answer))

        return ChatResponse(
            text=result.answer,
            citations=list(self.citations),
            suggested_followups=result.followups,
            history=turns,
            meta={**meta, "tier": result.tier, "outcome": result.outcome.value},
        )
