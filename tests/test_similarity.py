"""Tests for headline similarity."""

import pytest

from newslens.clustering import JaccardTitleScorer, significant_words, similarity


class TestSignificantWords:
    def test_lowercases_and_drops_short_words(self):
        assert significant_words("The Quick Brown Fox") == {"quick", "brown"}

    def test_strips_punctuation(self):
        assert significant_words("Fed's rate-hike: markets react!") == {"feds", "ratehike", "markets", "react"}

    def test_deduplicates(self):
        assert significant_words("Storm storm STORM warning") == {"storm", "warning"}

    def test_empty_text(self):
        assert significant_words("") == set()


class TestSimilarity:
    def test_identical_headlines_score_one(self):
        headline = "Senate passes sweeping climate bill"
        assert similarity(headline, headline) == 1.0

    def test_partial_overlap(self):
        assert similarity("The Quick Brown Fox", "quick brown fox jumps") == pytest.approx(2 / 3)

    def test_symmetric(self):
        a = "Senate passes sweeping climate bill after marathon debate"
        b = "Climate bill clears Senate"
        assert similarity(a, b) == similarity(b, a)

    def test_disjoint_headlines(self):
        assert similarity("Stocks fall on inflation fears", "Short update") == 0.0

    def test_too_few_significant_words_scores_zero(self):
        assert similarity("AI is up", "AI is up") == 0.0
        assert similarity("Election results", "Election") == 0.0

    def test_score_within_bounds(self):
        score = similarity("Storm hits coastal towns overnight", "Coastal towns brace for storm")
        assert 0.0 <= score <= 1.0


class TestJaccardTitleScorer:
    def test_matches_function(self):
        scorer = JaccardTitleScorer()
        a = "Senate passes sweeping climate bill"
        b = "Sweeping climate bill passes Senate after debate"
        assert scorer.score(a, b) == similarity(a, b)
