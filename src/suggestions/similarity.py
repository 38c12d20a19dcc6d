"""
Similarity Scorer

Jaro and Jaro-Winkler string similarity, scored over code points.
Both functions are pure and total: any pair of strings yields a value in [0.0, 1.0].
"""

from typing import List

# Winkler's prefix scaling factor
PREFIX_SCALE = 0.1

# Only the first four shared characters earn the prefix bonus
MAX_PREFIX_LENGTH = 4


def jaro(a: str, b: str) -> float:
    """
    Compute the Jaro similarity of two strings.

    Characters match when they are equal and no further apart than
    max(len(a), len(b)) // 2 - 1 positions. Each character of `b` can be
    claimed by at most one character of `a`.

    Args:
        a: Target string
        b: Candidate string

    Returns:
        Similarity in [0.0, 1.0]; 0.0 if either string is empty or nothing matches
    """
    len_a = len(a)
    len_b = len(b)
    if len_a == 0 or len_b == 0:
        return 0.0

    window = max(max(len_a, len_b) // 2 - 1, 0)

    b_claimed = [False] * len_b
    a_matches: List[str] = []
    for i, char in enumerate(a):
        low = max(0, i - window)
        high = min(len_b - 1, i + window)
        for j in range(low, high + 1):
            if not b_claimed[j] and b[j] == char:
                b_claimed[j] = True
                a_matches.append(char)
                break

    matches = len(a_matches)
    if matches == 0:
        return 0.0

    b_matches = [b[j] for j in range(len_b) if b_claimed[j]]
    transpositions = sum(1 for x, y in zip(a_matches, b_matches) if x != y) / 2

    return (
        matches / len_a
        + matches / len_b
        + (matches - transpositions) / matches
    ) / 3


def common_prefix_length(a: str, b: str, limit: int = MAX_PREFIX_LENGTH) -> int:
    """Length of the shared prefix of `a` and `b`, capped at `limit`."""
    length = 0
    for x, y in zip(a[:limit], b[:limit]):
        if x != y:
            break
        length += 1
    return length


def jaro_winkler(a: str, b: str) -> float:
    """
    Compute the Jaro-Winkler similarity of two strings.

    The Jaro score is boosted by PREFIX_SCALE for every leading character the
    strings share, up to MAX_PREFIX_LENGTH characters:

        jaro + prefix * PREFIX_SCALE * (1 - jaro)

    Args:
        a: Target string
        b: Candidate string

    Returns:
        Similarity in [0.0, 1.0]. Identical non-empty strings score 1.0;
        an empty string on either side scores 0.0.
    """
    score = jaro(a, b)
    if score == 0.0:
        return 0.0
    prefix = common_prefix_length(a, b)
    return score + prefix * PREFIX_SCALE * (1 - score)
