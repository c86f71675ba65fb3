"""Pages — the single interactive quote page.

Invariants:
    - GET / with no topic shows random quotes (first-load behavior)
    - EmptyResultError becomes a user-visible message, still HTTP 200
"""

import random
from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from starlette.templating import Jinja2Templates

from inspire_me.api.dependencies import get_corpus, get_rng
from inspire_me.config import Settings, get_settings
from inspire_me.core.corpus import Corpus
from inspire_me.core.errors import EmptyResultError
from inspire_me.services.generate_quotes import generate_quotes

router = APIRouter(tags=["pages"])
template_dir = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(template_dir))


@router.get("/", response_class=HTMLResponse)
async def quote_page(
    request: Request,
    topic: str = Query(""),
    corpus: Corpus = Depends(get_corpus),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_settings),
):
    """Topic form plus up to 3 generated quotes."""
    quotes = []
    error = None
    try:
        selection = await generate_quotes(
            corpus, topic, rng, settings.selection_delay_ms,
        )
        quotes = selection.labelled()
    except EmptyResultError as exc:
        error = exc.context.user_message

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.app_name,
            "topic": topic,
            "quotes": quotes,
            "error": error,
            "corpus_size": len(corpus),
        },
    )
