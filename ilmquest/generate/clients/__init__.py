# Model clients: every client exposes generate(messages, params) -> (text, meta).

from .echo_dev_client import EchoDevClient
from .huggingface_client import HuggingFaceClient
from .factory import build_model_client

__all__ = ["EchoDevClient", "HuggingFaceClient", "build_model_client"]
