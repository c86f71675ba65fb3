"""Quote API — JSON endpoints for quote generation and the corpus listing.

Invariants:
    - POST and GET /api/v1/quotes return the same SelectionResponse shape
    - EmptyResultError is not caught here; the global handler maps it to 404
    - Topic of any length accepted; a non-string topic is rejected with 400
"""

import random

from fastapi import APIRouter, Depends, Query

from inspire_me.api.dependencies import get_corpus, get_rng
from inspire_me.config import Settings, get_settings
from inspire_me.core.corpus import Corpus
from inspire_me.schemas.quote import (
    CorpusResponse, QuoteOut, QuoteRequest, SelectionResponse,
)
from inspire_me.services.generate_quotes import generate_quotes

router = APIRouter(prefix="/api/v1/quotes", tags=["quotes"])


@router.post("", response_model=SelectionResponse)
async def create_selection(
    body: QuoteRequest,
    corpus: Corpus = Depends(get_corpus),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_settings),
):
    """Generate up to 3 quotes for the topic in the request body."""
    selection = await generate_quotes(
        corpus, body.topic, rng, settings.selection_delay_ms,
    )
    return SelectionResponse.from_selection(selection)


@router.get("", response_model=SelectionResponse)
async def get_selection(
    topic: str = Query(""),
    corpus: Corpus = Depends(get_corpus),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_settings),
):
    """Query-string form of POST /api/v1/quotes."""
    selection = await generate_quotes(
        corpus, topic, rng, settings.selection_delay_ms,
    )
    return SelectionResponse.from_selection(selection)


@router.get("/corpus", response_model=CorpusResponse)
async def list_corpus(corpus: Corpus = Depends(get_corpus)):
    """Every quote in the corpus, in corpus order."""
    return CorpusResponse(
        count=len(corpus), quotes=[QuoteOut.from_quote(q) for q in corpus],
    )
