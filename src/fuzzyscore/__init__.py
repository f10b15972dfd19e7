"""fuzzyscore — 0-100 fuzzy string similarity scores and best-match search."""

from fuzzyscore.exceptions import (
    FuzzyScoreError,
    InvalidConfig,
    InvalidScore,
    UnknownScorer,
)
from fuzzyscore.extract import (
    dedupe,
    extract,
    extract_bests,
    extract_one,
    extract_without_order,
)
from fuzzyscore.fuzz import (
    get_scorer,
    partial_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    qratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
    uqratio,
    uwratio,
    wratio,
)
from fuzzyscore.matcher import SequenceMatcher, find_matching_blocks
from fuzzyscore.models import Candidate, MatchingBlock
from fuzzyscore.text import full_process

__all__ = [
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
    "qratio",
    "uqratio",
    "wratio",
    "uwratio",
    "get_scorer",
    "extract",
    "extract_one",
    "extract_bests",
    "extract_without_order",
    "dedupe",
    "SequenceMatcher",
    "find_matching_blocks",
    "MatchingBlock",
    "Candidate",
    "full_process",
    "FuzzyScoreError",
    "InvalidScore",
    "UnknownScorer",
    "InvalidConfig",
]
