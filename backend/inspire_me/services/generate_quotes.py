"""Quote Generation Service — async shell around select_quotes().

Invariants:
    - The artificial delay runs before selection and never changes its output
    - Every generation is logged with topic, matched_count and returned count
    - EmptyResultError propagates to the caller (API handler or page route)
"""

import asyncio
import logging
import random

from inspire_me.core.corpus import Corpus
from inspire_me.core.errors import EmptyResultError
from inspire_me.core.select_quotes import Selection, select_quotes

logger = logging.getLogger(__name__)


async def generate_quotes(
    corpus: Corpus,
    topic: str | None,
    rng: random.Random | None = None,
    delay_ms: int = 0,
) -> Selection:
    """Select quotes for `topic`, after an optional artificial delay."""
    if delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)

    try:
        selection = select_quotes(corpus, topic, rng)
    except EmptyResultError as exc:
        logger.warning(
            "No quotes available for selection",
            extra={"topic": exc.context.topic, "error_code": exc.code},
        )
        raise

    logger.info(
        "Generated quotes",
        extra={
            "topic": selection.topic,
            "matched_count": selection.matched_count,
            "returned": len(selection.quotes),
            "delay_ms": delay_ms or None,
        },
    )
    return selection
