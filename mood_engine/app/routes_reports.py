# mood_engine/app/routes_reports.py
from __future__ import annotations
import logging
from datetime import datetime
from typing import Dict, List, Literal, Optional, Union
from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from mood_engine.app.routes_analysis import ErrorResponse
from mood_engine.domain.aggregation import hourly_breakdown
from mood_engine.domain.models import JournalEntry, MoodCategory
from mood_engine.exceptions import ConfigError, InvalidArgument, LexiconLoadError
from mood_engine.infra.report_export import hourly_csv
from mood_engine.services.analysis_service import get_engine
from mood_engine.services.report_service import buckets_to_list, build_report, buzz_words_to_list

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/reports")

# ---------------------------
# request schemas
# ---------------------------

class BuzzWordsRequest(BaseModel):
    texts: List[str] = Field(default_factory=list, description="journal texts")
    top_n: Optional[int] = Field(None, description="number of words (default from config)")


class MoodAtTime(BaseModel):
    date: datetime
    mood: str


class HourlyRequest(BaseModel):
    entries: List[MoodAtTime] = Field(default_factory=list)


class JournalEntryIn(BaseModel):
    content: str
    date: datetime
    mood: Optional[str] = Field(None, description="stored mood; classified when missing")


class SummaryRequest(BaseModel):
    entries: List[JournalEntryIn] = Field(default_factory=list)
    top_n: Optional[int] = None

# ---------------------------
# response schemas
# ---------------------------

class BuzzWordInfo(BaseModel):
    word: str
    count: int


class HourBucketInfo(BaseModel):
    hour: int
    count: int
    dominant_mood: Optional[str] = None
    mood_counts: Dict[str, int] = Field(default_factory=dict)


class BuzzWordsResponse(BaseModel):
    status: Literal["ok"] = "ok"
    buzz_words: List[BuzzWordInfo]


class HourlyResponse(BaseModel):
    status: Literal["ok"] = "ok"
    hourly: List[HourBucketInfo]


class MoodDistributionInfo(BaseModel):
    counts: Dict[str, int]
    percentages: Dict[str, float]
    dominant_mood: Optional[str] = None


class SummaryResponse(BaseModel):
    status: Literal["ok"] = "ok"
    generated_on: str
    total_entries: int
    summary: str
    mood_distribution: MoodDistributionInfo
    buzz_words: List[BuzzWordInfo]
    hourly: List[HourBucketInfo]


def _invalid(e: InvalidArgument) -> ErrorResponse:
    logger.warning("invalid argument: %s", e)
    return ErrorResponse(error_type="invalid_argument", message=str(e))


def _internal(route: str) -> ErrorResponse:
    logger.exception("unexpected error in %s", route)
    return ErrorResponse(
        error_type="internal_error",
        message="Internal server error. Please try again later.",
    )

# ---------------------------
# routes
# ---------------------------

@router.post("/buzzwords", response_model=Union[BuzzWordsResponse, ErrorResponse])
async def buzzwords_route(req: BuzzWordsRequest):
    """Recurring words across the given texts, most frequent first."""
    try:
        words = get_engine().themes.extract_buzz_words(req.texts, top_n=req.top_n)
        return BuzzWordsResponse(buzz_words=buzz_words_to_list(words))
    except InvalidArgument as e:
        return _invalid(e)
    except (ConfigError, LexiconLoadError):
        raise
    except Exception:
        return _internal("/reports/buzzwords")


@router.post("/hourly", response_model=Union[HourlyResponse, ErrorResponse])
async def hourly_route(req: HourlyRequest):
    """24 hour-of-day buckets (always 24, hour ascending)."""
    try:
        buckets = hourly_breakdown([(e.date, e.mood) for e in req.entries])
        return HourlyResponse(hourly=buckets_to_list(buckets))
    except InvalidArgument as e:
        return _invalid(e)
    except (ConfigError, LexiconLoadError):
        raise
    except Exception:
        return _internal("/reports/hourly")


@router.post("/hourly.csv")
async def hourly_csv_route(req: HourlyRequest):
    """Same breakdown as CSV: Hour,Count,Dominant Mood."""
    try:
        buckets = hourly_breakdown([(e.date, e.mood) for e in req.entries])
    except InvalidArgument as e:
        return JSONResponse(status_code=400, content=_invalid(e).model_dump())

    return Response(
        content=hourly_csv(buckets),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="hourly_breakdown.csv"'},
    )


@router.post("/summary", response_model=Union[SummaryResponse, ErrorResponse])
async def summary_route(req: SummaryRequest):
    """Full report: distribution, summary line, buzz words and hourly buckets."""
    try:
        entries = [
            JournalEntry(
                content=e.content,
                date=e.date,
                mood=MoodCategory.parse(e.mood) if e.mood else None,
            )
            for e in req.entries
        ]
        return SummaryResponse(**build_report(entries, top_n=req.top_n))
    except InvalidArgument as e:
        return _invalid(e)
    except (ConfigError, LexiconLoadError):
        raise
    except Exception:
        return _internal("/reports/summary")
