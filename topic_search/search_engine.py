"""Local topic search with additive, deterministic scoring.

Implements the scoring formula:
    TopicScore = NameAward + KeywordAward + CategoryAward
                 + DescriptionAward + Σ(per-word bonuses)

All matching is case-insensitive substring matching - same query and
catalog always produce the same ordered results.
"""

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from . import config
from .catalog import TopicCatalog, TopicRecord, load_default_catalog
from .filters import by_category, by_difficulty
from .suggestions import sample

logger = logging.getLogger(__name__)


# =============================================================================
# SCORE WEIGHTS
# =============================================================================
# Name awards are exclusive (exact > prefix > substring); every other award
# stacks on top.

SCORE_WEIGHTS = {
    "exact_name": 100,      # Name equals the query
    "name_prefix": 50,      # Name starts with the query
    "name_contains": 30,    # Name contains the query
    "keyword": 20,          # Any keyword contains the query, or vice versa
    "category": 15,         # Category contains the query
    "description": 10,      # Description contains the query
    "word_in_name": 5,      # Per query word found in the name
    "word_in_keyword": 3,   # Per query word, per keyword containing it
}

# Query words shorter than this are ignored by the per-word bonuses
MIN_WORD_LENGTH = 3

# Characters trimmed from both ends of a query: ASCII whitespace, Unicode
# space separators, line/paragraph separators and the byte-order mark.
# The ASCII information separators \x1c-\x1f and NEL (\x85) are kept.
QUERY_WHITESPACE = (
    "\t\n\v\f\r "
    "\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass
class Award:
    """A single scoring rule that fired for a topic."""

    rule: str       # Key into SCORE_WEIGHTS
    matched: str    # The text that satisfied the rule
    points: int


@dataclass
class ScoreBreakdown:
    """Debug trace of how a topic was scored against a query."""

    query: str
    topic: str
    awards: list[Award] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(a.points for a in self.awards)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "query": self.query,
            "topic": self.topic,
            "total": self.total,
            "awards": [
                {"rule": a.rule, "matched": a.matched, "points": a.points}
                for a in self.awards
            ],
        }


@dataclass(frozen=True)
class ScoredTopic:
    """A topic paired with its score for one search call.

    Kept separate from TopicRecord so scores never leak to callers.
    """

    record: TopicRecord
    score: int


# =============================================================================
# SCORING
# =============================================================================

def trim_query(query: Optional[str]) -> str:
    """Strip QUERY_WHITESPACE from both ends; None becomes ""."""
    if not query:
        return ""
    return query.strip(QUERY_WHITESPACE)


def normalize_query(query: Optional[str], min_query_length: int) -> Optional[str]:
    """Lower-case and trim a query, or return None if it is too short.

    With a minimum of 0 a whitespace-only query normalizes to "" and is
    still scored: "" is a prefix of every name.
    """
    if not query:
        return None
    term = trim_query(query)
    if len(term) < min_query_length:
        return None
    return term.lower()


def _collect_awards(record: TopicRecord, term: str) -> list[Award]:
    """Evaluate every scoring rule for a normalized query term."""
    awards = []
    name = record.name.lower()
    keywords = [k.lower() for k in record.keywords]

    if name == term:
        awards.append(Award("exact_name", record.name, SCORE_WEIGHTS["exact_name"]))
    elif name.startswith(term):
        awards.append(Award("name_prefix", record.name, SCORE_WEIGHTS["name_prefix"]))
    elif term in name:
        awards.append(Award("name_contains", record.name, SCORE_WEIGHTS["name_contains"]))

    # Fires once, however many keywords qualify
    for original, keyword in zip(record.keywords, keywords):
        if term in keyword or keyword in term:
            awards.append(Award("keyword", original, SCORE_WEIGHTS["keyword"]))
            break

    if term in record.category.lower():
        awards.append(Award("category", record.category, SCORE_WEIGHTS["category"]))

    if term in record.description.lower():
        awards.append(Award("description", term, SCORE_WEIGHTS["description"]))

    for word in term.split(" "):
        if len(word) < MIN_WORD_LENGTH:
            continue
        if word in name:
            awards.append(Award("word_in_name", word, SCORE_WEIGHTS["word_in_name"]))
        for original, keyword in zip(record.keywords, keywords):
            if word in keyword:
                awards.append(Award("word_in_keyword", original, SCORE_WEIGHTS["word_in_keyword"]))

    return awards


def score_topic(record: TopicRecord, term: str) -> int:
    """Score a topic against an already normalized query term."""
    return sum(a.points for a in _collect_awards(record, term))


def explain(
    query: str,
    record: TopicRecord,
    min_query_length: int = config.DEFAULT_MIN_QUERY_LENGTH,
) -> ScoreBreakdown:
    """Show which rules fire for a topic and what each contributes.

    Args:
        query: Raw user query.
        record: Topic to score.
        min_query_length: Queries shorter than this score nothing.

    Returns:
        ScoreBreakdown whose total equals the score search uses.
    """
    breakdown = ScoreBreakdown(query=query or "", topic=record.name)
    term = normalize_query(query, min_query_length)
    if term is not None:
        breakdown.awards = _collect_awards(record, term)
    return breakdown


# =============================================================================
# SEARCH
# =============================================================================

def rank(
    query: Optional[str],
    catalog: Sequence[TopicRecord],
    min_query_length: int = config.DEFAULT_MIN_QUERY_LENGTH,
) -> list[ScoredTopic]:
    """Score every topic and return the matches, best first.

    Equal scores keep catalog order.
    """
    term = normalize_query(query, min_query_length)
    if term is None:
        return []

    candidates = []
    for record in catalog:
        score = score_topic(record, term)
        if score > 0:
            candidates.append(ScoredTopic(record, score))

    # sorted() is stable, also with reverse=True
    return sorted(candidates, key=lambda c: c.score, reverse=True)


def search(
    query: Optional[str],
    catalog: Sequence[TopicRecord],
    limit: int = config.DEFAULT_SEARCH_LIMIT,
    min_query_length: int = config.DEFAULT_MIN_QUERY_LENGTH,
) -> list[TopicRecord]:
    """Search the catalog for topics matching a free-text query.

    Args:
        query: Raw user query. Empty or short queries return nothing.
        catalog: Topics to search, in tie-break order.
        limit: Maximum number of results.
        min_query_length: Minimum trimmed query length.

    Returns:
        Matching TopicRecords sorted by relevance, without scores.
    """
    if limit <= 0:
        return []
    return [c.record for c in rank(query, catalog, min_query_length)[:limit]]


class TopicSearchEngine:
    """Search, suggestions and filters bound to one catalog.

    Defaults come from the environment (see config) unless given here.
    """

    def __init__(
        self,
        catalog: Optional[TopicCatalog] = None,
        limit: Optional[int] = None,
        min_query_length: Optional[int] = None,
        suggestion_count: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.limit = limit if limit is not None else config.get_search_limit()
        self.min_query_length = (
            min_query_length if min_query_length is not None
            else config.get_min_query_length()
        )
        self.suggestion_count = (
            suggestion_count if suggestion_count is not None
            else config.get_suggestion_count()
        )
        self.rng = rng

    def search(self, query: Optional[str], limit: Optional[int] = None) -> list[TopicRecord]:
        """Search the bound catalog."""
        results = search(
            query,
            self.catalog,
            limit=limit if limit is not None else self.limit,
            min_query_length=self.min_query_length,
        )
        logger.debug("search %r -> %d topics", query, len(results))
        return results

    def suggest(self, count: Optional[int] = None) -> list[TopicRecord]:
        """Random topics for an empty search box."""
        count = count if count is not None else self.suggestion_count
        return sample(self.catalog, count, rng=self.rng)

    def by_category(self, category: str) -> list[TopicRecord]:
        """Topics in this catalog whose category matches, ignoring case."""
        return by_category(self.catalog, category)

    def by_difficulty(self, difficulty: str) -> list[TopicRecord]:
        """Topics in this catalog whose difficulty matches, ignoring case."""
        return by_difficulty(self.catalog, difficulty)

    def explain(self, query: str, record: TopicRecord) -> ScoreBreakdown:
        """Score breakdown for one topic using this engine's minimum length."""
        return explain(query, record, self.min_query_length)
