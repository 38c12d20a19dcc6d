"""
suggestions - "Did you mean?" suggestions for command-line tools.

Ranks possible values by Jaro-Winkler similarity to a mistyped token.
"""

__version__ = "1.0.0"

# Core exports
from suggestions.similarity import MAX_PREFIX_LENGTH, PREFIX_SCALE, jaro, jaro_winkler
from suggestions.ranking import (
    CONFIDENCE_THRESHOLD,
    ScoredCandidate,
    best_suggestion,
    rank_suggestions,
    score_candidates,
)

__all__ = [
    "__version__",
    "jaro",
    "jaro_winkler",
    "MAX_PREFIX_LENGTH",
    "PREFIX_SCALE",
    "CONFIDENCE_THRESHOLD",
    "ScoredCandidate",
    "score_candidates",
    "rank_suggestions",
    "best_suggestion",
]
