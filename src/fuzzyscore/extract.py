"""Best-match selection: score many candidates against one query."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any, Callable, Iterable, Iterator, Optional

from fuzzyscore import fuzz
from fuzzyscore.exceptions import InvalidScore
from fuzzyscore.models import Candidate
from fuzzyscore.text import full_process

logger = logging.getLogger(__name__)

Normalizer = Optional[Callable[[Any], str]]
Scorer = Callable[[str, str], float]

default_normalizer = full_process
default_scorer = fuzz.wratio

_DEDUPE_THRESHOLD = 70


def _identity(x: Any) -> Any:
    return x


def _plan(normalizer: Normalizer, scorer: Scorer) -> tuple[Callable, Scorer]:
    """
    Settle which normaliser and scorer a run will actually use.

    With the default normaliser and a scorer that normalises on its own,
    the normalisation is done once here (with the scorer's force_ascii
    setting) and switched off inside the scorer.
    """
    if normalizer is None:
        return _identity, scorer
    if normalizer is full_process and scorer in fuzz.SELF_PROCESSING:
        force_ascii = fuzz.SELF_PROCESSING[scorer]
        return (
            partial(full_process, force_ascii=force_ascii),
            partial(scorer, full_process=False),
        )
    return normalizer, scorer


def _score_all(
    query: Any,
    candidates: Iterable[Any] | Mapping,
    normalizer: Normalizer,
    scorer: Scorer,
) -> Iterator[Candidate]:
    """Yield a scored Candidate per choice, in input order."""
    normalise, score_fn = _plan(normalizer, scorer)

    processed_query = normalise(query)
    if isinstance(processed_query, str) and not processed_query:
        logger.warning(
            "Normalising reduced the query to an empty string; "
            "scores against it may be degenerate. [Query: %r]",
            query,
        )

    if isinstance(candidates, Mapping):
        pairs: Iterable[tuple[Any, Any]] = candidates.items()
        keyed = True
    else:
        pairs = ((None, choice) for choice in candidates)
        keyed = False

    for key, choice in pairs:
        processed = normalise(choice)
        score = score_fn(processed_query, processed)
        if not 0 <= score <= 100:
            raise InvalidScore(score, choice)
        yield Candidate(
            choice=choice,
            processed=processed,
            score=score,
            key=key,
            keyed=keyed,
        )


# ── Public API ────────────────────────────────────────────────


def extract_without_order(
    query: Any,
    candidates: Iterable[Any] | Mapping,
    normalizer: Normalizer = default_normalizer,
    scorer: Scorer = default_scorer,
    min_score: float = 0,
) -> Iterator[tuple]:
    """
    Lazily yield ``(choice, score)`` for every candidate scoring at least
    *min_score*, in input order.

    Mapping candidates are scored by value and yield
    ``(choice, score, key)``.
    """
    for candidate in _score_all(query, candidates, normalizer, scorer):
        if candidate.score >= min_score:
            yield candidate.as_tuple()


def extract_one(
    query: Any,
    candidates: Iterable[Any] | Mapping,
    normalizer: Normalizer = default_normalizer,
    scorer: Scorer = default_scorer,
    min_score: float = 0,
) -> Optional[tuple]:
    """
    Return the single best ``(choice, score)``, or None.

    A later candidate only replaces the current best on a strictly
    higher score, so ties go to the earliest candidate. Candidates
    below *min_score* never compete. None means nothing qualified.
    """
    best: Optional[Candidate] = None
    for candidate in _score_all(query, candidates, normalizer, scorer):
        if candidate.score < min_score:
            continue
        if best is None or candidate.score > best.score:
            best = candidate
    return best.as_tuple() if best is not None else None


def extract_bests(
    query: Any,
    candidates: Iterable[Any] | Mapping,
    normalizer: Normalizer = default_normalizer,
    scorer: Scorer = default_scorer,
    min_score: float = 0,
    limit: Optional[int] = None,
) -> list[tuple]:
    """
    Candidates scoring at least *min_score*, best first.

    Equal scores keep their input order. At most *limit* results when
    given.
    """
    ranked = sorted(
        (
            c
            for c in _score_all(query, candidates, normalizer, scorer)
            if c.score >= min_score
        ),
        key=lambda c: c.score,
        reverse=True,
    )
    if limit is not None:
        ranked = ranked[:limit]
    return [c.as_tuple() for c in ranked]


def extract(
    query: Any,
    candidates: Iterable[Any] | Mapping,
    normalizer: Normalizer = default_normalizer,
    scorer: Scorer = default_scorer,
    limit: Optional[int] = None,
) -> list[tuple]:
    """Every candidate ranked best first (top *limit* if given)."""
    return extract_bests(
        query, candidates, normalizer, scorer, min_score=0, limit=limit
    )


def dedupe(
    items: list[str],
    threshold: float = _DEDUPE_THRESHOLD,
    scorer: Scorer = fuzz.token_set_ratio,
) -> list[str]:
    """
    Collapse fuzzy duplicates in *items*.

    Each item is grouped with everything scoring above *threshold*
    against it, and the group is represented by its longest member
    (alphabetically first on a tie). First-seen order of the
    representatives is kept. Returns *items* unchanged when nothing
    was merged.
    """
    representatives: dict[str, None] = {}
    for item in items:
        matches = extract(item, items, scorer=scorer)
        group = [choice for choice, score in matches if score > threshold]
        if not group:
            # only possible for items that normalise to nothing
            group = [item]
        group.sort()
        group.sort(key=len, reverse=True)
        representatives[group[0]] = None

    if len(representatives) == len(items):
        return items
    return list(representatives)
