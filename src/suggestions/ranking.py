"""
Suggestion Ranker

Scores every candidate against a target with Jaro-Winkler, drops anything
not confidently similar, and orders the survivors from weakest to strongest.

Example:
    >>> rank_suggestions("tst", ["test", "possible", "values"])
    ['test']
    >>> rank_suggestions("teso", ["testing", "tempo"])
    ['testing', 'tempo']
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from suggestions.similarity import jaro_winkler

# A candidate must score strictly above this to be suggested
CONFIDENCE_THRESHOLD = 0.8


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate value paired with its similarity to the target."""

    value: str
    score: float

    @property
    def is_confident(self) -> bool:
        return self.score > CONFIDENCE_THRESHOLD


def score_candidates(target: str, candidates: Iterable[str]) -> List[ScoredCandidate]:
    """
    Score each candidate against `target`.

    Args:
        target: The token the user typed
        candidates: Possible values, consumed once

    Returns:
        One ScoredCandidate per input candidate, in input order (unfiltered)
    """
    return [ScoredCandidate(value, jaro_winkler(target, value)) for value in candidates]


def rank_suggestions(target: str, candidates: Iterable[str]) -> List[str]:
    """
    Suggest candidates that are similar to `target`.

    Candidates scoring above CONFIDENCE_THRESHOLD are returned ordered by
    ascending score, so the best match comes last. Equal scores keep their
    input order. Duplicates are scored independently and may both appear.

    Args:
        target: The token the user typed
        candidates: Possible values

    Returns:
        Suggested values, weakest first; empty if nothing is reasonably similar
    """
    survivors = [scored for scored in score_candidates(target, candidates) if scored.is_confident]
    survivors.sort(key=lambda scored: scored.score)
    return [scored.value for scored in survivors]


def best_suggestion(target: str, candidates: Iterable[str]) -> Optional[str]:
    """
    Suggest the single candidate most similar to `target`.

    Picks the highest-scoring confident candidate. On a tied top score the
    candidate latest in input order wins, which keeps the result equal to the
    last element of rank_suggestions().

    Note that several candidates may be almost equally plausible; this
    silently discards all but one. Prefer rank_suggestions() when the caller
    can show more than one option.

    Returns:
        The best value, or None if nothing is reasonably similar
    """
    best: Optional[ScoredCandidate] = None
    for scored in score_candidates(target, candidates):
        if not scored.is_confident:
            continue
        if best is None or scored.score >= best.score:
            best = scored
    return best.value if best is not None else None
