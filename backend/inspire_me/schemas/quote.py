"""Quote Schemas — Pydantic models for the quote API boundary.

Invariants:
    - QuoteRequest.topic: optional, defaults to "" (random mode), any length
    - QuoteOut.source is "match" or "random", from SelectionSource
    - SelectionResponse.quotes keeps selection order (matches first)
"""

from pydantic import BaseModel

from inspire_me.core.domain_types import Quote, SelectionSource
from inspire_me.core.select_quotes import Selection


class QuoteRequest(BaseModel):
    """Quote generation request. Blank topic means random quotes."""
    topic: str = ""


class QuoteOut(BaseModel):
    """One quote as returned to clients."""
    id: str
    text: str
    author: str
    tags: list[str]
    source: SelectionSource | None = None

    @classmethod
    def from_quote(
        cls, quote: Quote, source: SelectionSource | None = None,
    ) -> "QuoteOut":
        return cls(
            id=quote.id, text=quote.text, author=quote.author,
            tags=list(quote.tags), source=source,
        )


class SelectionResponse(BaseModel):
    """Result of a quote generation."""
    topic: str
    matched_count: int
    quotes: list[QuoteOut]

    @classmethod
    def from_selection(cls, selection: Selection) -> "SelectionResponse":
        return cls(
            topic=selection.topic,
            matched_count=selection.matched_count,
            quotes=[QuoteOut.from_quote(q, src) for q, src in selection.labelled()],
        )


class CorpusResponse(BaseModel):
    """The full corpus, in order."""
    count: int
    quotes: list[QuoteOut]
