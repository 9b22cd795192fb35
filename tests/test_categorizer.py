"""Tests for keyword categorization."""

from newslens.clustering import CATEGORIES, Categorizer, categorize


class TestCategorize:
    def test_technology(self):
        assert categorize("New AI chip unveiled", "") == "technology"

    def test_environment(self):
        assert categorize("Climate summit agrees on carbon cuts", "") == "environment"

    def test_general_when_nothing_matches(self):
        assert categorize("Local bakery wins award", "") == "general"

    def test_politics(self):
        assert categorize("Senate passes budget bill", "") == "politics"

    def test_health(self):
        assert categorize("Hospital staff report flu surge", "") == "health"

    def test_business(self):
        assert categorize("Stock markets rally", "") == "business"

    def test_technology_wins_over_environment(self):
        assert categorize("Tech giants pledge climate action", "") == "technology"

    def test_summary_is_considered(self):
        assert categorize("Local bakery wins award", "Owner thanks investor") == "business"

    def test_keywords_match_inside_words(self):
        # "ai" is a substring of "rain"
        assert categorize("Rain delays match", "") == "technology"

    def test_case_insensitive(self):
        assert categorize("HOSPITAL STAFF REPORT FLU SURGE", "") == "health"


class TestCategorizer:
    def test_custom_groups_keep_order(self):
        categorizer = Categorizer(groups=[("sport", ["match"]), ("weather", ["rain"])], default="other")
        assert categorizer.categorize("Rain delays match") == "sport"
        assert categorizer.categorize("Sunny weekend ahead") == "other"


def test_category_enumeration():
    assert CATEGORIES == ["politics", "technology", "business", "health", "environment", "general"]
