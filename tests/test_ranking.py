"""
Tests for the suggestion ranker.

Covers threshold filtering, ascending order, tie handling and the
single-suggestion shortcut.
"""

import pytest

pytestmark = pytest.mark.fast

from suggestions import (
    CONFIDENCE_THRESHOLD,
    ScoredCandidate,
    best_suggestion,
    jaro_winkler,
    rank_suggestions,
    score_candidates,
)


MIXED = ["testing", "tempo", "test", "temp", "things", "here", "tst", "teso", "possible", "values"]


class TestRankSuggestions:
    """Tests for rank_suggestions."""

    def test_single_match(self, possible_values):
        """Test a single close candidate is found."""
        assert rank_suggestions("tst", possible_values) == ["test"]

    def test_equal_scores_keep_input_order(self):
        """Test ties keep their input order."""
        # "te" scores exactly the same against both
        assert jaro_winkler("te", "test") == jaro_winkler("te", "temp")
        assert rank_suggestions("te", ["test", "temp"]) == ["test", "temp"]
        assert rank_suggestions("te", ["temp", "test"]) == ["temp", "test"]

    def test_nothing_similar(self, possible_values):
        """Test nothing is returned when nothing is close."""
        assert rank_suggestions("hahaahahah", possible_values) == []

    def test_multiple_matches_weakest_first(self):
        """Test several matches are kept, best last."""
        assert rank_suggestions("teso", ["testing", "tempo"]) == ["testing", "tempo"]
        assert rank_suggestions("teso", ["tempo", "testing"]) == ["testing", "tempo"]

    def test_no_candidates(self):
        """Test an empty candidate set is not an error."""
        assert rank_suggestions("anything", []) == []

    def test_duplicates_are_kept(self):
        """Test duplicate candidates are scored independently."""
        assert rank_suggestions("tst", ["test", "values", "test"]) == ["test", "test"]

    def test_accepts_any_iterable(self, possible_values):
        """Test iterators and generators are accepted."""
        assert rank_suggestions("tst", iter(possible_values)) == ["test"]
        assert rank_suggestions("tst", (value for value in possible_values)) == ["test"]

    def test_exact_match_ranks_last(self):
        """Test an exact match outranks near misses."""
        assert rank_suggestions("test", ["tests", "test", "tset"])[-1] == "test"

    @pytest.mark.parametrize("target", ["te", "tst", "teso", "temp", "--jsn"])
    def test_threshold_exclusion(self, target):
        """Test only scores above the threshold survive."""
        ranked = rank_suggestions(target, MIXED)
        for value in MIXED:
            if jaro_winkler(target, value) <= CONFIDENCE_THRESHOLD:
                assert value not in ranked
            else:
                assert value in ranked

    @pytest.mark.parametrize("target", ["te", "tst", "teso", "temp"])
    def test_scores_non_decreasing(self, target):
        """Test results are ordered by ascending score."""
        scores = [jaro_winkler(target, value) for value in rank_suggestions(target, MIXED)]
        assert scores == sorted(scores)


class TestBestSuggestion:
    """Tests for best_suggestion."""

    def test_single_match(self, possible_values):
        """Test a single close candidate is found."""
        assert best_suggestion("tst", possible_values) == "test"

    def test_nothing_similar(self):
        """Test nothing is returned when nothing is close."""
        assert best_suggestion("--something-completely-different", ["testing", "things", "here"]) is None

    def test_no_candidates(self):
        """Test an empty candidate set is not an error."""
        assert best_suggestion("anything", []) is None

    def test_highest_score_wins(self):
        """Test the top score wins regardless of input order."""
        assert best_suggestion("teso", ["testing", "tempo"]) == "tempo"
        assert best_suggestion("teso", ["tempo", "testing"]) == "tempo"

    def test_tie_goes_to_latest_candidate(self):
        """Test the later of two tied candidates wins."""
        assert best_suggestion("te", ["test", "temp"]) == "temp"
        assert best_suggestion("te", ["temp", "test"]) == "test"

    @pytest.mark.parametrize("target", ["te", "tst", "teso", "temp", "hahaahahah", ""])
    def test_matches_last_ranked(self, target):
        """Test the result equals the last ranked suggestion."""
        ranked = rank_suggestions(target, MIXED)
        expected = ranked[-1] if ranked else None
        assert best_suggestion(target, MIXED) == expected

    def test_accepts_generator(self):
        """Test a generator of candidates is accepted."""
        assert best_suggestion("tst", (v for v in ["values", "test"])) == "test"


class TestScoreCandidates:
    """Tests for score_candidates."""

    def test_unfiltered_in_input_order(self, possible_values):
        """Test every candidate is scored, in input order."""
        scored = score_candidates("tst", possible_values)
        assert [s.value for s in scored] == possible_values
        assert scored[0].score == pytest.approx(0.925)
        assert scored[2].score == 0.0

    def test_confidence_is_strict(self):
        """Test a score equal to the threshold is not confident."""
        assert not ScoredCandidate("x", CONFIDENCE_THRESHOLD).is_confident
        assert ScoredCandidate("x", 0.81).is_confident

    def test_threshold_constant(self):
        """Test the confidence threshold value."""
        assert CONFIDENCE_THRESHOLD == 0.8
