"""Remote fallback handling for topic search.

When the local catalog has nothing for a query, callers may ask a remote
service (typically a hosted language model) for topics instead. The network
call belongs to the caller; this module turns the service's reply into
TopicRecords and merges it behind the local results.
"""

import json
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Union

from . import config
from .catalog import CatalogError, TopicRecord
from .search_engine import search, trim_query

logger = logging.getLogger(__name__)

DEFAULT_DIFFICULTY = "Intermediate"

# Takes the trimmed query, returns topics in the serialized or record form
FallbackSearch = Callable[[str], Iterable[Union[TopicRecord, dict]]]


class FallbackPayloadError(ValueError):
    """Raised when a fallback reply holds no usable JSON list."""


def _strip_code_fence(text: str) -> str:
    """Pull the body out of a markdown code block, if there is one."""
    if "```json" in text:
        return text.split("```json")[1].split("```")[0]
    if "```" in text:
        return text.split("```")[1].split("```")[0]
    return text


def _to_record(entry) -> TopicRecord:
    """Validate one fallback entry, filling optional fields."""
    if not isinstance(entry, dict):
        raise CatalogError("not an object")
    for name in ("name", "description", "category"):
        if not entry.get(name):
            raise CatalogError(f"missing {name!r}")

    keywords = entry.get("keywords")
    if not isinstance(keywords, list):
        keywords = []

    return TopicRecord.from_dict({
        "name": entry["name"],
        "category": entry["category"],
        "difficulty": entry.get("difficulty") or DEFAULT_DIFFICULTY,
        "description": entry["description"],
        "keywords": [k for k in keywords if isinstance(k, str)],
    })


def parse_topic_payload(text: str, limit: int = 5) -> list[TopicRecord]:
    """Parse a fallback reply into topics.

    Args:
        text: Raw reply, possibly wrapped in prose or a code block.
        limit: Maximum number of topics to keep.

    Returns:
        Valid topics in reply order. Entries without a name, description
        or category are dropped; extra fields such as "icon" are ignored.

    Raises:
        FallbackPayloadError: If the reply contains no JSON list.
    """
    body = _strip_code_fence(text).strip()
    start = body.find("[")
    end = body.rfind("]") + 1
    if start == -1 or end == 0 or end <= start:
        raise FallbackPayloadError("No JSON list found in fallback reply")

    try:
        data = json.loads(body[start:end])
    except json.JSONDecodeError as e:
        raise FallbackPayloadError(f"Invalid JSON in fallback reply: {e}") from e
    if not isinstance(data, list):
        raise FallbackPayloadError("Fallback reply is not a list")

    topics = []
    for index, entry in enumerate(data):
        try:
            topics.append(_to_record(entry))
        except CatalogError as e:
            logger.debug("Skipping fallback topic #%d: %s", index, e)
    return topics[:max(limit, 0)]


def search_with_fallback(
    query: str,
    catalog: Sequence[TopicRecord],
    fallback: FallbackSearch,
    limit: int = config.DEFAULT_SEARCH_LIMIT,
    min_query_length: int = config.DEFAULT_MIN_QUERY_LENGTH,
    min_local_results: int = 1,
) -> list[TopicRecord]:
    """Search locally, topping up from a fallback when results are thin.

    Args:
        query: Raw user query.
        catalog: Local topics.
        fallback: Called with the trimmed query when local search finds
            fewer than `min_local_results` topics.
        limit: Maximum number of results overall.
        min_query_length: Minimum trimmed query length for both sources.
        min_local_results: Local hit count that makes the fallback
            unnecessary.

    Returns:
        Local results first, then fallback topics whose names are not
        already present. Fallback failures are logged and ignored.
    """
    results = search(query, catalog, limit=limit, min_query_length=min_query_length)
    if len(results) >= min_local_results or len(results) >= limit:
        return results
    term = trim_query(query)
    if not query or len(term) < min_query_length:
        return results

    try:
        remote = list(fallback(term))
    except Exception as e:
        logger.warning("Fallback search failed for %r: %s", query, e)
        return results

    local_count = len(results)
    seen = {t.name.lower() for t in results}
    for entry in remote:
        if len(results) >= limit:
            break
        if not isinstance(entry, TopicRecord):
            try:
                entry = _to_record(entry)
            except CatalogError as e:
                logger.debug("Skipping fallback topic: %s", e)
                continue
        if entry.name.lower() in seen:
            continue
        seen.add(entry.name.lower())
        results.append(entry)

    logger.info("Fallback added %d topics for %r", len(results) - local_count, query)
    return results
