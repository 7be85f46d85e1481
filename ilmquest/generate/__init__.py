# Generator package

# Exposes the generator, the segmentation entry point and shared types.

from .generator import ChatGenerator
from .history import HistoryWindowBuilder
from .segmenter import segment
from .types import Message, ChatResponse, ModelParams, Citation, ParseOutcome, Segmentation
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ChatGenerator",
    "HistoryWindowBuilder",
    "segment",
    "Message",
    "ChatResponse",
    "ModelParams",
    "Citation",
    "ParseOutcome",
    "Segmentation",
    "EchoDevClient",
]
