"""
AuraPlay Adaptation API - dashboard and game consumer surface.
Each game fetches its settings once at start; the dashboard fetches the report.
"""

from dotenv import load_dotenv
load_dotenv()  # Load .env file into environment variables

from typing import Any, Dict

from fastapi import Body, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from auraplay.adaptation import GAME_RULES
from auraplay.engine import (
    AdaptationEngine,
    get_adaptation_engine,
    get_profile_store,
    reset_adaptation_engine,
)
from auraplay.observability import CollectingEventSink
from auraplay.profile import KeyValueStore, profile_from_payload

VERSION = "1.0.1"

app = FastAPI(
    title="AuraPlay Adaptation API",
    description="Calibration profile to per-game difficulty settings",
    version=VERSION,
)

# Game pages are served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": "AuraPlay Adaptation API",
        "version": VERSION,
        "status": "running",
        "games": list(GAME_RULES),
        "endpoints": {
            "profile": "GET/PUT /profile",
            "settings": "GET /settings/{game}",
            "report": "GET /report",
            "health": "GET /health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "version": VERSION}


@app.get("/profile")
def get_profile(engine: AdaptationEngine = Depends(get_adaptation_engine)):
    return engine.profile.to_payload()


@app.put("/profile")
def put_profile(
    payload: Dict[str, Any] = Body(...),
    engine: AdaptationEngine = Depends(get_adaptation_engine),
    store: KeyValueStore = Depends(get_profile_store),
):
    """Recalibration: replace the session profile and persist it."""
    new_engine = engine.with_profile(profile_from_payload(payload))
    saved = new_engine.save(store)
    reset_adaptation_engine(new_engine)
    return {"saved": saved, "profile": new_engine.profile.to_payload()}


@app.get("/settings/{game}")
def get_game_settings(
    game: str,
    trace: bool = False,
    engine: AdaptationEngine = Depends(get_adaptation_engine),
):
    if game not in GAME_RULES:
        raise HTTPException(status_code=404, detail=f"Unknown game: {game}")
    collector = CollectingEventSink()
    settings = engine.get_settings(game, sink=collector if trace else None)
    body: Dict[str, Any] = {"game": game, "settings": settings.to_dict()}
    if trace:
        body["events"] = collector.to_list()
    return body


@app.get("/report")
def get_report(
    trace: bool = False,
    engine: AdaptationEngine = Depends(get_adaptation_engine),
):
    collector = CollectingEventSink()
    report = engine.generate_adaptation_report(sink=collector if trace else None)
    body = report.to_dict()
    if trace:
        body["events"] = collector.to_list()
    return body


if __name__ == "__main__":
    import uvicorn
    from config.settings import settings

    uvicorn.run("auraplay.main:app", host=settings.api_host, port=settings.api_port)
