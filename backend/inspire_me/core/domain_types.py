"""Domain Types — the Quote record and the values selection is built from.

Invariants:
    - Quote is immutable (frozen dataclass); tags stored as a tuple
    - QuoteId wraps str — never use a bare str for quote identity in domain logic
    - SelectionSource encodes why a quote was chosen — no raw string matching

Design Decisions:
    - QuoteId is a NewType, not a wrapper class
    - str Enums serialize straight to JSON
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

QuoteId = NewType("QuoteId", str)


# ─── Constants ───────────────────────────────────────────────────

MAX_SELECTIONS = 3


# ─── Enums ───────────────────────────────────────────────────────

class SelectionSource(str, Enum):
    """Why a quote is in a selection."""
    MATCH = "match"     # primary selection, matched the topic
    RANDOM = "random"   # backfill


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Quote:
    """A single quote. Never created or mutated at runtime."""
    id: QuoteId
    text: str
    author: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on tags, text or author.

        `needle` must already be lowercased.
        """
        return (
            any(needle in tag.lower() for tag in self.tags)
            or needle in self.text.lower()
            or needle in self.author.lower()
        )
