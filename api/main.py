# api/main.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from tarot_engine import logic
from tarot_engine.config import CORS_ORIGINS, configure_logging
from tarot_engine.sessions import default_session_store
from tarot_engine.spreads import list_spreads
from tarot_engine.tarot_core import Reading

configure_logging()


# ---------- Pydantic Schemas ----------
class ReadingRequest(BaseModel):
    spread_type: str = Field(..., description="Built-in spread id, e.g. three_card or celtic_cross")
    question: str = ""
    session_id: Optional[str] = None
    seed: Optional[Union[int, str]] = None


# Loose field types so the engine, not pydantic, reports bad custom input.
class CustomReadingRequest(BaseModel):
    spread_name: Any = None
    description: Any = None
    positions: Any = None
    question: Any = None
    session_id: Optional[str] = None
    seed: Optional[Union[int, str]] = None


class CombinationCard(BaseModel):
    name: str
    orientation: Optional[str] = None


class CombinationRequest(BaseModel):
    cards: List[CombinationCard] = Field(..., min_length=1)
    context: str = ""


class TextResponse(BaseModel):
    text: str


class HealthResponse(BaseModel):
    status: str
    version: str
    spread_count: int


class SessionResponse(BaseModel):
    session_id: str
    readings: List[Dict[str, Any]] = []


def _reading_summary(reading: Reading) -> Dict[str, Any]:
    return {
        "id": reading.id,
        "spread_type": reading.spread_type,
        "question": reading.question,
        "timestamp": reading.timestamp.isoformat(),
        "cards": [
            {
                "card_id": dc.card.id,
                "card_name": dc.card.name,
                "orientation": dc.orientation,
                "position": dc.position,
            }
            for dc in reading.cards
        ],
    }


# ---------- FastAPI app ----------
app = FastAPI(title="Tarot Reading Engine API", version="0.2.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"], allow_credentials=False
)


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", version=app.version, spread_count=len(list_spreads()))


@app.get("/v1/spreads", response_model=TextResponse)
def get_spreads():
    return TextResponse(text=logic.list_available_spreads())


@app.post("/v1/readings", response_model=TextResponse)
def create_reading(req: ReadingRequest):
    text = logic.perform_reading(req.spread_type, req.question, req.session_id, seed=req.seed)
    return TextResponse(text=text)


@app.post("/v1/readings/custom", response_model=TextResponse)
def create_custom_reading(req: CustomReadingRequest):
    text = logic.perform_custom_reading(
        req.spread_name,
        req.description,
        req.positions,
        req.question,
        req.session_id,
        seed=req.seed,
    )
    return TextResponse(text=text)


@app.post("/v1/combinations", response_model=TextResponse)
def interpret_combination(req: CombinationRequest):
    cards = [c.model_dump(exclude_none=True) for c in req.cards]
    return TextResponse(text=logic.interpret_card_combination(cards, req.context))


@app.post("/v1/sessions", response_model=SessionResponse)
def create_session():
    return SessionResponse(session_id=default_session_store.create_session())


@app.get("/v1/sessions/{session_id}", response_model=SessionResponse)
def get_session(session_id: str):
    history = default_session_store.get_history(session_id)
    if history is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return SessionResponse(session_id=session_id, readings=[_reading_summary(r) for r in history])
