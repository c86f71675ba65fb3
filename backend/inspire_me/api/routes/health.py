"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the corpus is empty (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from inspire_me.api.dependencies import get_corpus
from inspire_me.config import Settings, get_settings
from inspire_me.core.corpus import Corpus

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "inspire-me",
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check(corpus: Corpus = Depends(get_corpus)):
    """Readiness probe — the corpus must hold at least one quote."""
    if not corpus:
        logger.warning("Readiness check failed: corpus is empty")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "corpus_empty",
            },
        )
    return {"status": "ready", "checks": {"corpus": len(corpus)}}
