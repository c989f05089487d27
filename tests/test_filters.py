"""Tests for category and difficulty filters."""

from topic_search.filters import by_category, by_difficulty


class TestCategoryFilter:
    """Test exact, case-insensitive category matching."""

    def test_matches_ignoring_case(self, cs_catalog):
        results = by_category(cs_catalog, "web development")

        assert [t.name for t in results] == [
            "React",
            "Vue.js",
            "Angular",
            "Node.js",
            "HTML & CSS",
            "REST APIs",
            "GraphQL",
            "WebSockets",
        ]

    def test_no_partial_matches(self, cs_catalog):
        assert by_category(cs_catalog, "Web") == []

    def test_unknown_category(self, cs_catalog):
        assert by_category(cs_catalog, "Underwater Basket Weaving") == []

    def test_keeps_catalog_order(self, small_catalog):
        assert [t.name for t in by_category(small_catalog, "LETTERS")] == ["Alpha", "Beta"]


class TestDifficultyFilter:
    """Test exact, case-insensitive difficulty matching."""

    def test_counts_in_bundled_catalog(self, cs_catalog):
        beginner = by_difficulty(cs_catalog, "beginner")
        intermediate = by_difficulty(cs_catalog, "Intermediate")
        advanced = by_difficulty(cs_catalog, "ADVANCED")

        assert len(beginner) + len(intermediate) + len(advanced) == len(cs_catalog)
        assert all(t.difficulty == "Advanced" for t in advanced)

    def test_unknown_difficulty(self, cs_catalog):
        assert by_difficulty(cs_catalog, "Expert") == []

    def test_empty_string(self, small_catalog):
        assert by_difficulty(small_catalog, "") == []
