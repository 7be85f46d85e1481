# Model client selection from settings:
# Ollama (USE_OLLAMA) > OpenAI (OPENAI_API_KEY) > Hugging Face (HUGGINGFACE_API_KEY) > Echo.

import logging

from ilmquest.settings import Settings
from .echo_dev_client import EchoDevClient
from .huggingface_client import HuggingFaceClient

logger = logging.getLogger(__name__)


def build_model_client(settings: Settings):
    if settings.USE_OLLAMA:
        from .ollama_client import OllamaClient
        client = OllamaClient(model=settings.OLLAMA_MODEL, host=settings.OLLAMA_HOST)
    elif settings.OPENAI_API_KEY:
        from .openai_client import OpenAIClient
        client = OpenAIClient(api_key=settings.OPENAI_API_KEY, model=settings.OPENAI_MODEL)
    elif settings.HUGGINGFACE_API_KEY:
        client = HuggingFaceClient(
            api_key=settings.HUGGINGFACE_API_KEY,
            model=settings.HF_MODEL,
            url=settings.HF_CHAT_URL,
            timeout=settings.REQUEST_TIMEOUT,
        )
    else:
        client = EchoDevClient()
    logger.info("Model client: %s model=%s", type(client).__name__, getattr(client, "model", None))
    return client
