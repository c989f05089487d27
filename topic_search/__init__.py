"""Local search over a catalog of computer-science topics."""

from .catalog import CatalogError, TopicCatalog, TopicRecord, load_default_catalog
from .filters import by_category, by_difficulty
from .search_engine import SCORE_WEIGHTS, ScoreBreakdown, TopicSearchEngine, explain, search
from .suggestions import sample

__all__ = [
    "CatalogError",
    "TopicCatalog",
    "TopicRecord",
    "load_default_catalog",
    "TopicSearchEngine",
    "SCORE_WEIGHTS",
    "ScoreBreakdown",
    "search",
    "explain",
    "sample",
    "by_category",
    "by_difficulty",
]
