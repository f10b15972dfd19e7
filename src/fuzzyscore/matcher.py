"""
Longest-matching-block sequence alignment.

A difflib-compatible matcher: the blocks and ratios it produces are the
ones the reference scorers were calibrated against, autojunk heuristic
included. Any sequence of hashable elements works; strings compare
character by character.
"""

from __future__ import annotations

import logging
from typing import Callable, Hashable, Optional, Sequence

from fuzzyscore.models import MatchingBlock

logger = logging.getLogger(__name__)

# Autojunk only kicks in for second sequences at least this long...
AUTOJUNK_MIN_LENGTH = 200
# ...and then drops elements making up more than this percentage of it.
AUTOJUNK_PERCENT = 1


def score(matches: int, total: int) -> int:
    """
    Turn a matched length into a 0-100 score.

    *total* is the combined length of both sequences. Both empty counts
    as a perfect match.
    """
    if not total:
        return 100
    return int(round(100 * 2.0 * matches / total))


class SequenceMatcher:
    """
    Compare *a* against *b* by finding their longest matching blocks.

    The position index over *b* is built once on construction and the
    blocks are cached after the first call, so one instance can be
    queried repeatedly.
    """

    def __init__(
        self,
        a: Sequence[Hashable],
        b: Sequence[Hashable],
        isjunk: Optional[Callable[[Hashable], bool]] = None,
        autojunk: bool = True,
    ):
        self.a = a
        self.b = b
        self.isjunk = isjunk
        self.autojunk = autojunk
        self._blocks: Optional[list[MatchingBlock]] = None
        self._b2j, self._bjunk, self.bpopular = self._index_b()

    # ── Public API ────────────────────────────────────────────────

    def find_longest_match(
        self, alo: int, ahi: int, blo: int, bhi: int
    ) -> MatchingBlock:
        """
        Longest block with ``alo <= i < ahi`` and ``blo <= j < bhi``.

        Of all maximal blocks the one starting earliest in *a* wins, and
        of those the one starting earliest in *b*. Junk and popular
        elements never anchor a match but may extend the winner, including
        the empty match at ``(alo, blo)``. Returns a zero-size block at
        ``(alo, blo)`` when nothing matches.
        """
        a, b, b2j = self.a, self.b, self._b2j
        bjunk = self._bjunk
        besti, bestj, bestsize = alo, blo, 0

        # j2len[j] = length of the run ending at a[i-1] and b[j]
        j2len: dict[int, int] = {}
        for i in range(alo, ahi):
            newj2len: dict[int, int] = {}
            for j in b2j.get(a[i], ()):
                if j < blo:
                    continue
                if j >= bhi:
                    break
                k = newj2len[j] = j2len.get(j - 1, 0) + 1
                if k > bestsize:
                    besti, bestj, bestsize = i - k + 1, j - k + 1, k
            j2len = newj2len

        # Grow the winner over non-junk elements (popular ones included), then junk.
        for junk in (False, True):
            while (
                besti > alo
                and bestj > blo
                and (b[bestj - 1] in bjunk) is junk
                and a[besti - 1] == b[bestj - 1]
            ):
                besti, bestj, bestsize = besti - 1, bestj - 1, bestsize + 1
            while (
                besti + bestsize < ahi
                and bestj + bestsize < bhi
                and (b[bestj + bestsize] in bjunk) is junk
                and a[besti + bestsize] == b[bestj + bestsize]
            ):
                bestsize += 1

        return MatchingBlock(besti, bestj, bestsize)

    def get_matching_blocks(self) -> list[MatchingBlock]:
        """
        All matching blocks, left to right, adjacent runs merged.

        The last entry is always the sentinel ``(len(a), len(b), 0)``.
        """
        if self._blocks is not None:
            return list(self._blocks)

        la, lb = len(self.a), len(self.b)
        if la and self.a == self.b:
            # fast path; the block search reaches the same single block
            self._blocks = [MatchingBlock(0, 0, la), MatchingBlock(la, lb, 0)]
            return list(self._blocks)

        stack = [(0, la, 0, lb)]
        found: list[MatchingBlock] = []
        while stack:
            alo, ahi, blo, bhi = stack.pop()
            block = self.find_longest_match(alo, ahi, blo, bhi)
            i, j, k = block
            if k:
                found.append(block)
                if alo < i and blo < j:
                    stack.append((alo, i, blo, j))
                if i + k < ahi and j + k < bhi:
                    stack.append((i + k, ahi, j + k, bhi))
        found.sort()

        blocks: list[MatchingBlock] = []
        i1 = j1 = k1 = 0
        for i2, j2, k2 in found:
            if i1 + k1 == i2 and j1 + k1 == j2:
                k1 += k2
            else:
                if k1:
                    blocks.append(MatchingBlock(i1, j1, k1))
                i1, j1, k1 = i2, j2, k2
        if k1:
            blocks.append(MatchingBlock(i1, j1, k1))
        blocks.append(MatchingBlock(la, lb, 0))

        self._blocks = blocks
        return list(blocks)

    def matched_size(self) -> int:
        """Total number of elements covered by matching blocks."""
        return sum(block.size for block in self.get_matching_blocks())

    def ratio(self) -> float:
        """Similarity as a float in [0, 1]: ``2 * M / T``."""
        total = len(self.a) + len(self.b)
        if not total:
            return 1.0
        return 2.0 * self.matched_size() / total

    def score(self) -> int:
        """Similarity as an integer score in [0, 100]."""
        return score(self.matched_size(), len(self.a) + len(self.b))

    # ── Private helpers ───────────────────────────────────────────

    def _index_b(self) -> tuple[dict, set, set]:
        """
        Map each element of *b* to its ascending positions.

        Junk elements (per *isjunk*) and, for long enough *b*, popular
        elements are left out of the map.
        """
        b2j: dict[Hashable, list[int]] = {}
        for j, elt in enumerate(self.b):
            b2j.setdefault(elt, []).append(j)

        bjunk: set = set()
        if self.isjunk is not None:
            bjunk = {elt for elt in b2j if self.isjunk(elt)}
            for elt in bjunk:
                del b2j[elt]

        bpopular: set = set()
        n = len(self.b)
        if self.autojunk and n >= AUTOJUNK_MIN_LENGTH:
            ntest = n * AUTOJUNK_PERCENT // 100 + 1
            bpopular = {elt for elt, idxs in b2j.items() if len(idxs) > ntest}
            for elt in bpopular:
                del b2j[elt]
            if bpopular:
                logger.debug(
                    "autojunk dropped %d popular element(s) from a "
                    "%d-long sequence",
                    len(bpopular),
                    n,
                )
        return b2j, bjunk, bpopular


def find_matching_blocks(
    a: Sequence[Hashable], b: Sequence[Hashable], autojunk: bool = True
) -> list[MatchingBlock]:
    """Matching blocks of *a* against *b*, sentinel included."""
    return SequenceMatcher(a, b, autojunk=autojunk).get_matching_blocks()


def ratio(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """
    Integer similarity score of *a* and *b*.

    The greedy block search is order-sensitive ("tide" against "diet"
    finds one block, "diet" against "tide" finds two), so the pair is put
    in a canonical order first: shorter sequence first, equal lengths in
    sort order. That makes the score symmetric.
    """
    if len(a) > len(b) or (len(a) == len(b) and b < a):
        a, b = b, a
    return SequenceMatcher(a, b).score()
