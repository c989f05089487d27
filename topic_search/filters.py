"""Exact-match filters over the topic catalog."""

from collections.abc import Sequence

from .catalog import TopicRecord


def by_category(catalog: Sequence[TopicRecord], category: str) -> list[TopicRecord]:
    """Topics whose category equals `category`, ignoring case."""
    wanted = category.lower()
    return [t for t in catalog if t.category.lower() == wanted]


def by_difficulty(catalog: Sequence[TopicRecord], difficulty: str) -> list[TopicRecord]:
    """Topics whose difficulty equals `difficulty`, ignoring case."""
    wanted = difficulty.lower()
    return [t for t in catalog if t.difficulty.lower() == wanted]
