"""Pytest fixtures for the topic search tests."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from topic_search.catalog import TopicCatalog, TopicRecord


def _make_topic(name, category="General", difficulty="Beginner",
                description="A topic", keywords=()):
    """Build a TopicRecord with filler for the fields a test ignores."""
    return TopicRecord(
        name=name,
        category=category,
        difficulty=difficulty,
        description=description,
        keywords=tuple(keywords),
    )


@pytest.fixture
def make_topic():
    """Factory for synthetic TopicRecords."""
    return _make_topic


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def catalog_path(project_root):
    """Return path to the bundled topic catalog."""
    return project_root / "topic_search" / "data" / "cs_topics.json"


@pytest.fixture
def cs_catalog(catalog_path):
    """Load the bundled computer-science catalog."""
    return TopicCatalog.from_json(catalog_path)


@pytest.fixture
def small_catalog():
    """A synthetic catalog with predictable scores."""
    return TopicCatalog([
        _make_topic("Alpha", category="Letters", description="First letter",
                    keywords=["first", "a"]),
        _make_topic("Beta", category="Letters", description="Second letter",
                    keywords=["second"]),
        _make_topic("Gamma Rays", category="Physics", difficulty="Advanced",
                    description="High energy radiation", keywords=["radiation", "physics"]),
        _make_topic("Delta", category="Rivers", difficulty="Intermediate",
                    description="Where a river meets the sea", keywords=[]),
    ])


@pytest.fixture
def write_catalog(tmp_path):
    """Write topics to a JSON file and return its path."""
    def _write(data, name="topics.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_queries():
    """Return sample queries against the bundled catalog."""
    return [
        {
            "query": "react",
            "expected_order": ["React", "React Native", "JavaScript", "C Programming"],
        },
        {
            "query": "py",
            "expected_order": ["Python", "Data Science"],
        },
        {
            "query": "machine learning",
            "expected_order": [
                "Machine Learning Basics",
                "Python",
                "C Programming",
                "Neural Networks",
                "Natural Language Processing",
                "Computer Vision",
                "Data Science",
            ],
        },
        {
            "query": "sql",
            "expected_order": ["SQL Databases", "NoSQL Databases", "Web Security"],
        },
    ]
