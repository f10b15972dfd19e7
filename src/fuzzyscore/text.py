"""Text normalisation used before scoring."""

import re

# Anything str.isalnum() rejects, underscore included.
_NON_ALNUM = re.compile(r"[\W_]+")


def asciionly(raw: str) -> str:
    """Drop every non-ASCII character."""
    return raw.encode("ascii", "ignore").decode("ascii")


def full_process(raw: str, force_ascii: bool = False) -> str:
    """
    Reduce *raw* to its canonical comparison form.

    Non-ASCII characters are removed first when *force_ascii* is set, so
    ``"a¬4ሴ2€耀"`` becomes ``"a42"`` rather than ``"a 4 2"``. Then every
    non-alphanumeric character becomes a space, the text is lower-cased,
    runs of whitespace collapse to one space and the ends are trimmed.
    """
    if force_ascii:
        raw = asciionly(raw)
    return " ".join(_NON_ALNUM.sub(" ", raw).lower().split())


def validate_string(s: str) -> bool:
    """True when *s* is non-empty."""
    return bool(s)


def tokenize(s: str) -> list[str]:
    return s.split()


def sorted_tokens(s: str) -> str:
    """Whitespace tokens of *s* sorted and rejoined with single spaces."""
    return " ".join(sorted(tokenize(s)))
