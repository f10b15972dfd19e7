"""
Fuzzy Score — Interactive CLI
=============================
Thin wrapper around the fuzzyscore library.

Usage:
    fuzzyscore                                   # interactive mode
    fuzzyscore "cowboys" "Dallas Cowboys" "Jets" # rank choices

Settings are read from environment variables:
    FUZZYSCORE_SCORER      Scorer name (default: wratio)
    FUZZYSCORE_MIN_SCORE   Minimum score to report (default: 0)
    FUZZYSCORE_LIMIT       Report at most this many choices
    FUZZYSCORE_LOG_LEVEL   Logging level (default: WARNING)
"""

import logging
import os
import sys
from typing import Optional

from fuzzyscore import fuzz
from fuzzyscore.exceptions import FuzzyScoreError, InvalidConfig
from fuzzyscore.extract import extract_bests

_BANNER = """\
╔══════════════════════════════════════╗
║           Fuzzy Score                ║
║   Two strings → similarity scores    ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""

_QUIT = ("q", "quit", "exit")


def _int_setting(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidConfig(name, raw, "expected an integer") from None
    if value < 0:
        raise InvalidConfig(name, raw, "must not be negative")
    return value


def load_settings() -> dict:
    """Read the CLI settings from the environment."""
    level_name = os.environ.get("FUZZYSCORE_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise InvalidConfig(
            "FUZZYSCORE_LOG_LEVEL", level_name, "unknown logging level"
        )
    scorer_name = os.environ.get("FUZZYSCORE_SCORER", "wratio")
    min_score = _int_setting("FUZZYSCORE_MIN_SCORE", 0)
    if min_score > 100:
        raise InvalidConfig(
            "FUZZYSCORE_MIN_SCORE", str(min_score), "must be 0-100"
        )
    return {
        "scorer": fuzz.get_scorer(scorer_name),
        "scorer_name": scorer_name,
        "min_score": min_score,
        "limit": _int_setting("FUZZYSCORE_LIMIT", None),
        "log_level": level,
    }


def _run_interactive() -> None:
    print(_BANNER)

    while True:
        try:
            first = input("\nFirst string:    ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break
        if first.lower() in _QUIT:
            print("Bye!")
            break

        try:
            second = input("Second string:   ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        print()
        print("  ┌─────────────────────────────────────┐")
        for name, scorer in fuzz.SCORERS.items():
            print(f"  │  {name:<26}{scorer(first, second):>7}  │")
        print("  └─────────────────────────────────────┘")


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point — ranks choices from args, or runs interactively."""
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = load_settings()
    except FuzzyScoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings["log_level"],
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args:
        _run_interactive()
        return 0
    if len(args) < 2:
        print("Usage: fuzzyscore QUERY CHOICE [CHOICE ...]", file=sys.stderr)
        return 2

    query, choices = args[0], args[1:]
    results = extract_bests(
        query,
        choices,
        scorer=settings["scorer"],
        min_score=settings["min_score"],
        limit=settings["limit"],
    )
    if not results:
        print("No match found.", file=sys.stderr)
        return 1
    for choice, score in results:
        print(f"{score:>5}  {choice}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
