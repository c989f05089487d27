"""Shared configuration for the topic search package.

Loads environment variables and provides centralized config access.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "cs_topics.json"

# Defaults used when the environment does not override them
DEFAULT_SEARCH_LIMIT = 8
DEFAULT_MIN_QUERY_LENGTH = 2
DEFAULT_SUGGESTION_COUNT = 6


def load_env() -> bool:
    """Load environment variables from the project .env file.

    Variables already set in the environment take precedence.

    Returns:
        True if a .env file was found and loaded.
    """
    return load_dotenv(PROJECT_ROOT / ".env", override=False)


# Load on import
_env_loaded = load_env()


def _get_int(name: str, default: int) -> int:
    """Read a non-negative integer setting from the environment."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def get_catalog_path() -> Path:
    """Get the topic catalog path.

    Returns:
        Path from TOPIC_CATALOG_PATH, or the bundled catalog.
    """
    raw = os.environ.get("TOPIC_CATALOG_PATH", "").strip()
    return Path(raw) if raw else DEFAULT_CATALOG_PATH


def get_search_limit() -> int:
    """Maximum number of results returned by a search."""
    return _get_int("TOPIC_SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT)


def get_min_query_length() -> int:
    """Trimmed query length below which search returns nothing."""
    return _get_int("TOPIC_MIN_QUERY_LENGTH", DEFAULT_MIN_QUERY_LENGTH)


def get_suggestion_count() -> int:
    """Number of topics suggested for an empty query."""
    return _get_int("TOPIC_SUGGESTION_COUNT", DEFAULT_SUGGESTION_COUNT)
