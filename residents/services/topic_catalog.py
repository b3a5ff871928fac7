"""
Topic Catalog - read-only store of reportable issue topics.

The catalog is loaded once from a JSON data file at startup and is the
single source of truth for department contact data. Nothing here
mutates after load.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from residents.core.errors import CatalogError
from residents.core.settings import settings
from residents.models.topic import Department, IssueCategory, IssueTopic

logger = logging.getLogger(__name__)


class TopicCatalog:
    """
    Immutable, ordered collection of IssueTopic records.

    Supports point lookup by id, filtering by category, and the derived
    department view. Insertion order is the order of the data file.
    """

    def __init__(self, topics: Iterable[IssueTopic], version: str = "1.0.0"):
        self.version = version
        self._topics: Tuple[IssueTopic, ...] = tuple(topics)
        self._by_id: Dict[str, IssueTopic] = {}

        for topic in self._topics:
            if topic.id in self._by_id:
                raise CatalogError(f"Duplicate topic id in catalog: {topic.id}")
            self._by_id[topic.id] = topic

        self._check_department_contacts()

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TopicCatalog":
        """
        Load a catalog from a JSON data file.

        Accepts either a bare list of topics or an object with
        "version" and "topics" keys.

        Raises:
            CatalogError: If the file is missing, unparsable, or violates
                catalog invariants
        """
        path = Path(path)
        if not path.exists():
            raise CatalogError(f"Topic catalog file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Topic catalog is not valid JSON ({path}): {e}") from e

        if isinstance(data, list):
            version = "1.0.0"
            raw_topics = data
        elif isinstance(data, dict):
            version = str(data.get("version", "1.0.0"))
            raw_topics = data.get("topics", [])
        else:
            raise CatalogError(f"Unexpected catalog format in {path}")

        try:
            topics = [IssueTopic.model_validate(item) for item in raw_topics]
        except ValidationError as e:
            raise CatalogError(f"Invalid topic record in {path}: {e}") from e

        catalog = cls(topics, version=version)
        logger.info(
            f"Loaded {len(catalog)} issue topics across "
            f"{len(catalog.list_departments())} departments from {path}"
        )
        return catalog

    def _check_department_contacts(self) -> None:
        """All topics of one department must share head and email."""
        contacts: Dict[str, Tuple[str, str, str]] = {}
        for topic in self._topics:
            contact = (topic.department_head, topic.department_email)
            known = contacts.get(topic.department)
            if known is None:
                contacts[topic.department] = (topic.id,) + contact
            elif known[1:] != contact:
                raise CatalogError(
                    f"Department '{topic.department}' has conflicting contact data: "
                    f"topic {known[0]} says {known[1:]}, topic {topic.id} says {contact}"
                )

    def __len__(self) -> int:
        return len(self._topics)

    def __iter__(self):
        return iter(self._topics)

    @property
    def topics(self) -> Tuple[IssueTopic, ...]:
        """All topics in catalog order."""
        return self._topics

    def get_by_id(self, topic_id: str) -> Optional[IssueTopic]:
        """Retrieve topic by id. Returns None if not found."""
        return self._by_id.get(topic_id)

    def get_by_category(self, category: Union[str, IssueCategory]) -> List[IssueTopic]:
        """Topics with the given category tag, in catalog order."""
        value = category.value if isinstance(category, IssueCategory) else category
        return [topic for topic in self._topics if topic.category.value == value]

    def list_departments(self) -> List[Department]:
        """
        Distinct departments with their contact data, sorted by name.
        Computed on every call.
        """
        departments: Dict[str, Department] = {}
        for topic in self._topics:
            if topic.department not in departments:
                departments[topic.department] = Department(
                    name=topic.department,
                    head=topic.department_head,
                    email=topic.department_email,
                )
        return sorted(departments.values(), key=lambda d: d.name)


# Global catalog instance (loaded on first use or at startup)
_catalog: Optional[TopicCatalog] = None


def load_catalog(path: Optional[Union[str, Path]] = None) -> TopicCatalog:
    """
    Load the catalog from disk and install it as the process-wide catalog.

    Args:
        path: Data file to load; defaults to settings.catalog_path
    """
    global _catalog
    _catalog = TopicCatalog.from_file(path or settings.catalog_path)
    return _catalog


def get_catalog() -> TopicCatalog:
    """
    Get the process-wide catalog, loading it if startup has not done so.

    Raises:
        CatalogError: If the catalog cannot be loaded
    """
    if _catalog is None:
        return load_catalog()
    return _catalog


def is_catalog_loaded() -> bool:
    return _catalog is not None
