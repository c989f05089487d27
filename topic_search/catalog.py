"""Topic catalog: the static collection of topics available for search.

Records validate themselves on construction, whether built directly or
parsed from JSON. Search code can then rely on every field being a
non-empty string and keywords being a tuple.
"""

import json
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .config import get_catalog_path

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "category", "difficulty", "description")


class CatalogError(ValueError):
    """Raised when catalog data does not have the expected shape."""


@dataclass(frozen=True)
class TopicRecord:
    """A single computer-science topic.

    Fields are checked on construction, so a record built directly and one
    parsed with from_dict obey the same rules. Keywords are stored as a tuple.

    Raises:
        CatalogError: If a field is blank or has the wrong type.
    """

    name: str                # Display name, e.g. "React"
    category: str            # e.g. "Web Development"
    difficulty: str          # Beginner / Intermediate / Advanced (not enforced)
    description: str         # One-sentence summary
    keywords: tuple[str, ...] = field(default_factory=tuple)  # Aliases and synonyms

    def __post_init__(self):
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise CatalogError(f"{name!r} must be a string")
            if not value.strip():
                raise CatalogError(f"{name!r} must not be blank")

        if not isinstance(self.keywords, (list, tuple)):
            raise CatalogError("'keywords' must be a list of strings")
        if not all(isinstance(k, str) for k in self.keywords):
            raise CatalogError("'keywords' must be a list of strings")
        # Frozen dataclass
        object.__setattr__(self, "keywords", tuple(self.keywords))

    @classmethod
    def from_dict(cls, data: dict) -> "TopicRecord":
        """Build a record from its serialized form.

        Args:
            data: Mapping with name, category, difficulty, description
                and an optional keywords list.

        Returns:
            A validated TopicRecord.

        Raises:
            CatalogError: If a field is missing, blank or has the wrong type.
        """
        if not isinstance(data, dict):
            raise CatalogError(f"expected an object, got {type(data).__name__}")

        for name in REQUIRED_FIELDS:
            if name not in data:
                raise CatalogError(f"missing {name!r}")

        return cls(
            name=data["name"],
            category=data["category"],
            difficulty=data["difficulty"],
            description=data["description"],
            keywords=data.get("keywords", []),
        )

    def to_dict(self) -> dict:
        """Convert to the JSON-serializable topic shape."""
        return {
            "name": self.name,
            "category": self.category,
            "difficulty": self.difficulty,
            "description": self.description,
            "keywords": list(self.keywords),
        }


class TopicCatalog(Sequence):
    """Immutable, ordered collection of TopicRecords.

    Order matters: it is the tie-break for equally scored search results.
    Names, keywords and difficulties are kept exactly as authored.
    """

    def __init__(self, records: Iterable[Union[TopicRecord, dict]] = ()):
        """Initialize from records or serialized topic dicts.

        Raises:
            CatalogError: If any entry is malformed. The message names the
                entry's position in the input.
        """
        topics = []
        for index, entry in enumerate(records):
            if isinstance(entry, TopicRecord):
                topics.append(entry)
                continue
            try:
                topics.append(TopicRecord.from_dict(entry))
            except CatalogError as e:
                raise CatalogError(f"topic #{index}: {e}") from None
        self._records = tuple(topics)

    @classmethod
    def from_json(cls, path: Path) -> "TopicCatalog":
        """Load a catalog from a JSON file.

        The file may hold a bare list of topics or an object with a
        "topics" list.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"{path}: invalid JSON ({e})") from e

        if isinstance(data, dict):
            data = data.get("topics")
        if not isinstance(data, list):
            raise CatalogError(f"{path}: expected a list of topics")

        catalog = cls(data)
        logger.info("Loaded %d topics from %s", len(catalog), path)
        return catalog

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TopicRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"TopicCatalog({len(self._records)} topics)"

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(t.category for t in self._records))

    def difficulties(self) -> list[str]:
        """Distinct difficulties in first-seen order."""
        return list(dict.fromkeys(t.difficulty for t in self._records))

    def find(self, name: str) -> Optional[TopicRecord]:
        """Return the first topic whose name matches, ignoring case."""
        wanted = name.strip().lower()
        for topic in self._records:
            if topic.name.lower() == wanted:
                return topic
        return None

    def to_list(self) -> list[dict]:
        """Serialize every topic."""
        return [t.to_dict() for t in self._records]


_loaded: dict[Path, TopicCatalog] = {}


def load_default_catalog(path: Optional[Path] = None) -> TopicCatalog:
    """Load the process-wide catalog, caching it per path.

    Args:
        path: Catalog file. Defaults to TOPIC_CATALOG_PATH or the bundled
            computer-science catalog.
    """
    path = Path(path) if path else get_catalog_path()
    if path not in _loaded:
        _loaded[path] = TopicCatalog.from_json(path)
    return _loaded[path]
