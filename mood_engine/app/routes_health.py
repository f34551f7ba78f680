# mood_engine/app/routes_health.py

from __future__ import annotations
from fastapi import APIRouter

from mood_engine.services.analysis_service import get_engine

router = APIRouter()

@router.get("/health")
async def health():
    """
    Health check.

    Also reports whether the lexicon loaded, since every analysis route
    depends on it.
    """
    engine = get_engine()
    return {
        "status": "ok",
        "service": "mood-engine",
        "lexicon_version": engine.lexicon.version,
        "lexicon_entries": len(engine.lexicon.all_entries()),
    }
