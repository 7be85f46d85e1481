# ============================================================
# Ilmquest FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Model client selection (Hugging Face, OpenAI, Ollama, Echo)
#   - History window + generator + response segmentation
#   - A single chat route plus health checks
# ============================================================

import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

# --- Local imports ---
from ilmquest import __version__
from ilmquest.errors import GenerationError
from ilmquest.settings import settings
from ilmquest.generate import ChatGenerator
from ilmquest.generate.clients import build_model_client

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

QUESTION_REQUIRED = "Question is required"
GENERATION_FAILED = "Failed to get response from AI"


# ------------------------------------------------------------
# 🔧 Generator wiring
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_chat_generator() -> ChatGenerator:
    return ChatGenerator(
        model_client=build_model_client(settings),
        max_tokens=settings.MAX_TOKENS,
        window_size=settings.HISTORY_WINDOW,
    )


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Ilmquest API", version=__version__)


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    # Optional here so a missing question gets the 400 body below, not a 422.
    question: Optional[str] = None
    history: List[ChatTurn] = Field(default_factory=list)


class CitationOut(BaseModel):
    source: str
    content: str


class ChatPayload(BaseModel):
    text: str
    citations: List[CitationOut]
    suggested_followups: List[str]
    history: List[ChatTurn]


# ------------------------------------------------------------
# 💬 Main chat route
# ------------------------------------------------------------
@app.post("/api/chat", response_model=ChatPayload)
def chat(req: ChatRequest, gen: ChatGenerator = Depends(get_chat_generator)):
    if not req.question:
        return JSONResponse(status_code=400, content={"error": QUESTION_REQUIRED})
    try:
        history = [h.model_dump() for h in req.history]
        out = gen.chat(question=req.question, history=history)
    except GenerationError as e:
        logger.error("Chat API error: upstream status=%s detail=%s", e.status_code, e.message)
        return JSONResponse(status_code=500, content={"error": GENERATION_FAILED})
    except Exception:
        logger.exception("Chat API error")
        return JSONResponse(status_code=500, content={"error": GENERATION_FAILED})
    return out.to_payload()


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
