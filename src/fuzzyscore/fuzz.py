"""
Ratio functions: the 0-100 scorers built on the sequence matcher.

Every scorer takes two strings and returns an int. ``None`` on either
side scores 0. The token and weighted variants normalise their inputs
with :func:`fuzzyscore.text.full_process` unless ``full_process=False``.
"""

from __future__ import annotations

from typing import Callable, Optional

from fuzzyscore import text
from fuzzyscore.exceptions import UnknownScorer
from fuzzyscore.matcher import SequenceMatcher
from fuzzyscore.matcher import ratio as _matcher_ratio

# wratio weights, fixed to match the reference scores
UNBASE_SCALE = 0.95
PARTIAL_SCALE = 0.90
LONG_PARTIAL_SCALE = 0.6
PARTIAL_LENGTH_RATIO = 1.5
LONG_LENGTH_RATIO = 8

# A partial window scoring above this is treated as a perfect hit.
_PARTIAL_PERFECT = 0.995


def _intr(n: float) -> int:
    return int(round(n))


def _preprocess(s: str, force_ascii: bool, full_process: bool) -> str:
    return text.full_process(s, force_ascii=force_ascii) if full_process else s


def _pair(scorer: Callable[[str, str], int], s1: str, s2: str) -> int:
    """Score a derived pair: equal is 100, one side empty is 0."""
    if s1 == s2:
        return 100
    if not s1 or not s2:
        return 0
    return scorer(s1, s2)


# ── Basic scorers ─────────────────────────────────────────────


def ratio(s1: Optional[str], s2: Optional[str]) -> int:
    """Plain character similarity; symmetric."""
    if s1 is None or s2 is None:
        return 0
    if s1 == s2:
        return 100
    if not s1 or not s2:
        return 0
    return _matcher_ratio(s1, s2)


def partial_ratio(s1: Optional[str], s2: Optional[str]) -> int:
    """
    Best ratio of the shorter string against same-width windows of the
    longer one.

    Only windows lined up with a matching block are tried: for a block
    at ``(i, j)`` the window starts at ``max(0, j - i)``. Returns 100
    when either string is empty.

    Not symmetric in general and not meant to be: whichever string is
    shorter is the one searched for, so swapping arguments of equal
    length can change which windows are considered.
    """
    if s1 is None or s2 is None:
        return 0
    if s1 == s2 or not s1 or not s2:
        return 100

    if len(s1) <= len(s2):
        shorter, longer = s1, s2
    else:
        shorter, longer = s2, s1

    best = 0.0
    blocks = SequenceMatcher(shorter, longer).get_matching_blocks()
    for i, j, _ in blocks:
        start = max(j - i, 0)
        window = longer[start:start + len(shorter)]
        r = SequenceMatcher(shorter, window).ratio()
        if r > _PARTIAL_PERFECT:
            return 100
        best = max(best, r)
    return _intr(100 * best)


# ── Token scorers ─────────────────────────────────────────────


def _token_sort(
    s1: Optional[str],
    s2: Optional[str],
    partial: bool,
    force_ascii: bool,
    full_process: bool,
) -> int:
    if s1 is None or s2 is None:
        return 0
    sorted1 = text.sorted_tokens(_preprocess(s1, force_ascii, full_process))
    sorted2 = text.sorted_tokens(_preprocess(s2, force_ascii, full_process))
    return _pair(partial_ratio if partial else ratio, sorted1, sorted2)


def token_sort_ratio(
    s1: Optional[str],
    s2: Optional[str],
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    """Ratio of the two strings with their tokens sorted."""
    return _token_sort(s1, s2, False, force_ascii, full_process)


def partial_token_sort_ratio(
    s1: Optional[str],
    s2: Optional[str],
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    """Partial ratio of the two strings with their tokens sorted."""
    return _token_sort(s1, s2, True, force_ascii, full_process)


def _token_set(
    s1: Optional[str],
    s2: Optional[str],
    partial: bool,
    force_ascii: bool,
    full_process: bool,
) -> int:
    if s1 is None or s2 is None:
        return 0
    if not full_process and s1 == s2:
        return 100

    p1 = _preprocess(s1, force_ascii, full_process)
    p2 = _preprocess(s2, force_ascii, full_process)
    if not text.validate_string(p1) or not text.validate_string(p2):
        return 0

    tokens1 = set(text.tokenize(p1))
    tokens2 = set(text.tokenize(p2))
    sect = " ".join(sorted(tokens1 & tokens2))
    diff1 = " ".join(sorted(tokens1 - tokens2))
    diff2 = " ".join(sorted(tokens2 - tokens1))
    combined1 = " ".join(part for part in (sect, diff1) if part)
    combined2 = " ".join(part for part in (sect, diff2) if part)

    scorer = partial_ratio if partial else ratio
    return max(
        _pair(scorer, sect, combined1),
        _pair(scorer, sect, combined2),
        _pair(scorer, combined1, combined2),
    )


def token_set_ratio(
    s1: Optional[str],
    s2: Optional[str],
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    """
    Compare the shared tokens against each side's full token set.

    Insensitive to token order and to tokens repeated on one side only.
    """
    return _token_set(s1, s2, False, force_ascii, full_process)


def partial_token_set_ratio(
    s1: Optional[str],
    s2: Optional[str],
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    return _token_set(s1, s2, True, force_ascii, full_process)


# ── Combined scorers ──────────────────────────────────────────


def qratio(
    s1: Optional[str],
    s2: Optional[str],
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    """Quick ratio: normalise, then plain ratio; empty scores 0."""
    if s1 is None or s2 is None:
        return 0
    p1 = _preprocess(s1, force_ascii, full_process)
    p2 = _preprocess(s2, force_ascii, full_process)
    if not text.validate_string(p1) or not text.validate_string(p2):
        return 0
    return ratio(p1, p2)


def uqratio(
    s1: Optional[str], s2: Optional[str], full_process: bool = True
) -> int:
    """Unicode-preserving :func:`qratio`."""
    return qratio(s1, s2, force_ascii=False, full_process=full_process)


def wratio(
    s1: Optional[str],
    s2: Optional[str],
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    """
    Weighted best-of score across the other scorers.

    Strings of similar length (longer < 1.5x shorter) take the best of
    ratio and the token ratios scaled by 0.95. Otherwise the partial
    scorers are used instead, scaled by 0.9 (0.6 past 8x) so that a
    short string found inside a long one does not score a perfect 100.
    """
    if s1 is None or s2 is None:
        return 0
    p1 = _preprocess(s1, force_ascii, full_process)
    p2 = _preprocess(s2, force_ascii, full_process)
    if not text.validate_string(p1) or not text.validate_string(p2):
        return 0

    base = ratio(p1, p2)
    len_ratio = max(len(p1), len(p2)) / min(len(p1), len(p2))

    if len_ratio < PARTIAL_LENGTH_RATIO:
        tsor = token_sort_ratio(p1, p2, full_process=False) * UNBASE_SCALE
        tser = token_set_ratio(p1, p2, full_process=False) * UNBASE_SCALE
        return _intr(max(base, tsor, tser))

    partial_scale = (
        LONG_PARTIAL_SCALE if len_ratio > LONG_LENGTH_RATIO else PARTIAL_SCALE
    )
    partial = partial_ratio(p1, p2) * partial_scale
    ptsor = (
        partial_token_sort_ratio(p1, p2, full_process=False)
        * UNBASE_SCALE
        * partial_scale
    )
    ptser = (
        partial_token_set_ratio(p1, p2, full_process=False)
        * UNBASE_SCALE
        * partial_scale
    )
    return _intr(max(base, partial, ptsor, ptser))


def uwratio(
    s1: Optional[str], s2: Optional[str], full_process: bool = True
) -> int:
    """Unicode-preserving :func:`wratio`."""
    return wratio(s1, s2, force_ascii=False, full_process=full_process)


# ── Registry ──────────────────────────────────────────────────

SCORERS: dict[str, Callable[..., int]] = {
    "ratio": ratio,
    "partial_ratio": partial_ratio,
    "token_sort_ratio": token_sort_ratio,
    "partial_token_sort_ratio": partial_token_sort_ratio,
    "token_set_ratio": token_set_ratio,
    "partial_token_set_ratio": partial_token_set_ratio,
    "qratio": qratio,
    "uqratio": uqratio,
    "wratio": wratio,
    "uwratio": uwratio,
}

# Scorers that run full_process themselves, with their force_ascii default.
SELF_PROCESSING: dict[Callable[..., int], bool] = {
    token_sort_ratio: True,
    partial_token_sort_ratio: True,
    token_set_ratio: True,
    partial_token_set_ratio: True,
    qratio: True,
    wratio: True,
    uqratio: False,
    uwratio: False,
}


def get_scorer(name: str) -> Callable[..., int]:
    """Look up a scorer by name; raises UnknownScorer."""
    try:
        return SCORERS[name.lower()]
    except KeyError:
        raise UnknownScorer(name) from None
