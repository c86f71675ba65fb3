"""Quote Corpus — the bundled, read-only set of quotes available to the selector.

Invariants:
    - Corpus is a tuple of Quote: ordered, immutable, built once at import time
    - All quote ids are unique; id, text and author are non-empty
    - Tag order is preserved as written

Design Decisions:
    - Records kept as plain dicts and validated by build_corpus(), so a test can
      build a tiny corpus the same way the bundled one is built
"""

from typing import Iterable

from inspire_me.core.domain_types import Quote, QuoteId
from inspire_me.core.errors import CorpusIntegrityError

Corpus = tuple[Quote, ...]


QUOTE_RECORDS: list[dict] = [
    {"id": "1", "text": "The only way to do great work is to love what you do.",
     "author": "Steve Jobs", "tags": ["work", "inspiration", "passion"]},
    {"id": "2", "text": "Innovation distinguishes between a leader and a follower.",
     "author": "Steve Jobs", "tags": ["innovation", "leadership"]},
    {"id": "3", "text": "Life is what happens when you're busy making other plans.",
     "author": "John Lennon", "tags": ["life", "planning"]},
    {"id": "4", "text": "The future belongs to those who believe in the beauty of their dreams.",
     "author": "Eleanor Roosevelt", "tags": ["future", "dreams", "inspiration"]},
    {"id": "5", "text": "Strive not to be a success, but rather to be of value.",
     "author": "Albert Einstein", "tags": ["success", "value", "life"]},
    {"id": "6", "text": "The best way to predict the future is to create it.",
     "author": "Peter Drucker", "tags": ["future", "action", "creation"]},
    {"id": "7", "text": "Believe you can and you're halfway there.",
     "author": "Theodore Roosevelt", "tags": ["belief", "motivation"]},
    {"id": "8", "text": "The mind is everything. What you think you become.",
     "author": "Buddha", "tags": ["mind", "thought", "spirituality"]},
    {"id": "9", "text": "Two things are infinite: the universe and human stupidity; "
                        "and I'm not sure about the universe.",
     "author": "Albert Einstein", "tags": ["humor", "philosophy"]},
    {"id": "10", "text": "The only true wisdom is in knowing you know nothing.",
     "author": "Socrates", "tags": ["wisdom", "philosophy"]},
    {"id": "11", "text": "It is during our darkest moments that we must focus to see the light.",
     "author": "Aristotle", "tags": ["darkness", "light", "hope"]},
    {"id": "12", "text": "The unexamined life is not worth living.",
     "author": "Socrates", "tags": ["life", "philosophy"]},
    {"id": "13", "text": "You miss 100% of the shots you don't take.",
     "author": "Wayne Gretzky", "tags": ["action", "opportunity", "sports"]},
    {"id": "14", "text": "The journey of a thousand miles begins with a single step.",
     "author": "Lao Tzu", "tags": ["journey", "beginning", "perseverance"]},
    {"id": "15", "text": "That which does not kill us makes us stronger.",
     "author": "Friedrich Nietzsche", "tags": ["strength", "adversity"]},
    {"id": "16", "text": "The only impossible journey is the one you never begin.",
     "author": "Tony Robbins", "tags": ["journey", "motivation"]},
    {"id": "17", "text": "Success is not final, failure is not fatal: "
                         "it is the courage to continue that counts.",
     "author": "Winston Churchill", "tags": ["success", "failure", "courage"]},
    {"id": "18", "text": "The purpose of our lives is to be happy.",
     "author": "Dalai Lama", "tags": ["purpose", "happiness"]},
    {"id": "19", "text": "In three words I can sum up everything I've learned about life: it goes on.",
     "author": "Robert Frost", "tags": ["life", "resilience"]},
    {"id": "20", "text": "The mind is its own place, and in itself can make "
                         "a heaven of hell, a hell of heaven.",
     "author": "John Milton", "tags": ["mind", "perception"]},
]


def _build_quote(record: dict) -> Quote:
    quote_id = str(record.get("id", ""))
    for name in ("id", "text", "author"):
        if not str(record.get(name, "")).strip():
            raise CorpusIntegrityError(f"'{name}' must be non-empty", quote_id)
    return Quote(
        id=QuoteId(quote_id),
        text=record["text"],
        author=record["author"],
        tags=tuple(record.get("tags") or ()),
    )


def build_corpus(records: Iterable[dict]) -> Corpus:
    """Validate records and freeze them into a Corpus, preserving order.

    Raises CorpusIntegrityError on duplicate ids or empty required fields.
    """
    seen: set[str] = set()
    quotes = []
    for record in records:
        quote = _build_quote(record)
        if quote.id in seen:
            raise CorpusIntegrityError("duplicate id", quote.id)
        seen.add(quote.id)
        quotes.append(quote)
    return tuple(quotes)


DEFAULT_CORPUS: Corpus = build_corpus(QUOTE_RECORDS)
