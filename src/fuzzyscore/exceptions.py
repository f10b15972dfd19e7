"""Custom exception hierarchy for fuzzyscore.

The scoring functions themselves never raise on string input; these
exceptions only surface at the seams where callers plug things in.
"""


class FuzzyScoreError(Exception):
    """Base exception for all fuzzyscore errors."""


class InvalidScore(FuzzyScoreError):
    """A scorer returned a value outside the 0-100 range."""

    def __init__(self, score: object, choice: object):
        self.score = score
        self.choice = choice
        super().__init__(
            f"Scorer returned {score!r} for {choice!r}; expected 0-100"
        )


class UnknownScorer(FuzzyScoreError):
    """No scorer is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown scorer: '{name}'")


class InvalidConfig(FuzzyScoreError):
    """An environment setting could not be parsed."""

    def __init__(self, variable: str, value: str, detail: str):
        self.variable = variable
        self.value = value
        super().__init__(f"Invalid {variable}={value!r}: {detail}")
