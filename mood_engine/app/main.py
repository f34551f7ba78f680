#mood_engine/app/main.py
from __future__ import annotations
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mood_engine import __version__
from mood_engine.core.config import CORS_ORIGINS, LOG_LEVEL
from mood_engine.exceptions import ConfigError, LexiconLoadError
from mood_engine.app.routes_analysis import ErrorResponse, router as analysis_router
from mood_engine.app.routes_reports import router as reports_router
from mood_engine.app.routes_health import router as health_router
from mood_engine.services.analysis_service import get_engine

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # load the lexicon before the first request; a broken lexicon is logged,
    # and requests then answer 503 through the handler below
    try:
        engine = get_engine()
        logger.info("lexicon %s ready (%d entries)", engine.lexicon.version or "-", len(engine.lexicon.all_entries()))
    except (ConfigError, LexiconLoadError) as e:
        logger.error("mood lexicon unavailable: %s", e)
    yield


async def lexicon_unavailable(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s: mood lexicon unavailable: %s", request.method, request.url.path, exc)
    body = ErrorResponse(error_type="lexicon_unavailable", message=str(exc))
    return JSONResponse(status_code=503, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Mood Engine",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LexiconLoadError, lexicon_unavailable)
    app.add_exception_handler(ConfigError, lexicon_unavailable)

    app.include_router(health_router)
    app.include_router(analysis_router)
    app.include_router(reports_router)

    logger.info("mood engine API created (log_level=%s, cors=%s)", LOG_LEVEL, CORS_ORIGINS)
    return app

app = create_app()
