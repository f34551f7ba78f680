# mood_engine/app/routes_analysis.py
from __future__ import annotations
import logging
from typing import List, Literal, Union
from fastapi import APIRouter
from pydantic import BaseModel, Field
from mood_engine.domain.models import MoodCategory
from mood_engine.exceptions import ConfigError, InvalidArgument, LexiconLoadError
from mood_engine.services.analysis_service import analyze_entry, explain_mood

logger = logging.getLogger(__name__)
router = APIRouter()

# ---------------------------
# request schemas
# ---------------------------

class AnalyzeRequest(BaseModel):
    text: str = Field(..., description="journal text (draft or final)")


class ExplainRequest(BaseModel):
    text: str = Field(..., description="journal text")
    mood: str = Field(..., description="one of the ten mood labels")

# ---------------------------
# response schemas
# ---------------------------

class SignalInfo(BaseModel):
    phrase: str
    mood: str
    weight: float
    surface: str
    negated: bool


class AnalysisResult(BaseModel):
    mood: str
    emoji: str
    confidence: float
    insufficient_signal: bool
    explanation: str
    signals: List[SignalInfo]


class AnalyzeSuccessResponse(BaseModel):
    status: Literal["ok"] = "ok"
    result: AnalysisResult


class ExplainSuccessResponse(BaseModel):
    status: Literal["ok"] = "ok"
    mood: str
    explanation: str


class MoodInfo(BaseModel):
    mood: str
    emoji: str


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error_type: str
    message: str

# ---------------------------
# routes
# ---------------------------

@router.get("/moods", response_model=List[MoodInfo])
async def list_moods():
    """The ten mood labels in tie-break order."""
    return [MoodInfo(mood=m.value, emoji=m.emoji) for m in MoodCategory]


@router.post(
    "/analyze",
    response_model=Union[AnalyzeSuccessResponse, ErrorResponse],
)
async def analyze_route(req: AnalyzeRequest):
    """
    Classify one journal text and explain the result.

    - text shorter than the minimum length comes back as
      insufficient_signal with mood "content" and confidence 0
    """
    try:
        result = analyze_entry(req.text)
        return AnalyzeSuccessResponse(result=result)

    except (ConfigError, LexiconLoadError):
        raise

    except Exception:
        logger.exception("unexpected error in /analyze")
        return ErrorResponse(
            error_type="internal_error",
            message="Internal server error. Please try again later.",
        )


@router.post(
    "/explain",
    response_model=Union[ExplainSuccessResponse, ErrorResponse],
)
async def explain_route(req: ExplainRequest):
    """Explain why ``text`` reads as ``mood``; unknown moods are rejected."""
    try:
        explanation = explain_mood(req.text, req.mood)
        return ExplainSuccessResponse(
            mood=MoodCategory.parse(req.mood).value,
            explanation=explanation,
        )

    except InvalidArgument as e:
        logger.warning("invalid argument: %s", e)
        return ErrorResponse(error_type="invalid_argument", message=str(e))

    except (ConfigError, LexiconLoadError):
        raise

    except Exception:
        logger.exception("unexpected error in /explain")
        return ErrorResponse(
            error_type="internal_error",
            message="Internal server error. Please try again later.",
        )
