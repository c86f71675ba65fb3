"""Quote Selection — topic filter with random backfill over a fixed corpus.

Invariants:
    - Pure function: no IO, no async, no global random state
    - Matches keep corpus order; no ranking or scoring
    - Only a blank topic is stripped; a padded topic matches with its padding
    - At most `limit` quotes returned, never a duplicate id
    - Backfill is uniform without replacement over the unselected quotes
    - Empty result raises EmptyResultError (only possible for an empty corpus)

Design Decisions:
    - Simple substring matching on tags, text and author, so "the" matches
      nearly every quote
    - Selection keeps primary and backfill apart; callers label the source
"""

import random
from dataclasses import dataclass

from inspire_me.core.corpus import Corpus
from inspire_me.core.domain_types import MAX_SELECTIONS, Quote, SelectionSource
from inspire_me.core.errors import EmptyResultError


@dataclass(frozen=True)
class Selection:
    """Result of one select_quotes() call."""
    topic: str
    primary: tuple[Quote, ...]
    backfill: tuple[Quote, ...]
    matched_count: int

    @property
    def quotes(self) -> tuple[Quote, ...]:
        return self.primary + self.backfill

    def labelled(self) -> list[tuple[Quote, SelectionSource]]:
        """Quotes in order, each paired with why it was chosen."""
        return (
            [(q, SelectionSource.MATCH) for q in self.primary]
            + [(q, SelectionSource.RANDOM) for q in self.backfill]
        )


def normalize_topic(topic: str | None) -> str:
    """Blank (empty or whitespace-only) becomes "" ("no topic").

    A non-blank topic is returned unchanged; its padding takes part in matching.
    """
    topic = topic or ""
    return topic if topic.strip() else ""


def find_matches(corpus: Corpus, topic: str | None) -> list[Quote]:
    """All quotes matching `topic` (case-insensitive), in corpus order."""
    needle = normalize_topic(topic).lower()
    if not needle:
        return []
    return [q for q in corpus if q.matches(needle)]


def _backfill(
    corpus: Corpus, selected: tuple[Quote, ...], count: int, rng: random.Random,
) -> tuple[Quote, ...]:
    if count <= 0:
        return ()
    taken = {q.id for q in selected}
    remaining = [q for q in corpus if q.id not in taken]
    return tuple(rng.sample(remaining, min(count, len(remaining))))


def select_quotes(
    corpus: Corpus,
    topic: str | None,
    rng: random.Random | None = None,
    limit: int = MAX_SELECTIONS,
) -> Selection:
    """Pick up to `limit` quotes for `topic`: matches first, random backfill after.

    Raises EmptyResultError when nothing could be selected.
    """
    rng = rng or random.Random()
    normalized = normalize_topic(topic)

    matches = find_matches(corpus, normalized)
    primary = tuple(matches[:limit])
    backfill = _backfill(corpus, primary, limit - len(primary), rng)

    if not primary and not backfill:
        raise EmptyResultError(normalized)

    return Selection(
        topic=normalized,
        primary=primary,
        backfill=backfill,
        matched_count=len(matches),
    )
