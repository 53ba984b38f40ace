"""
Corpus Search

Case-insensitive substring search over every pattern in every category.

This is a linear scan with no index. It is fine for the small, static
corpora this server ships with and will not scale to large ones.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from .catalog import StoreFailure
from .errors import PatternError, StoreIOError
from .store import PatternStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchHit:
    """A pattern whose content contains the query."""
    category: str
    pattern: str
    file: str

    @property
    def path(self) -> str:
        return f"{self.category}/{self.pattern}"


@dataclass
class SearchResult:
    """Hits in category-then-item order, plus anything that was skipped."""
    query: str
    hits: list[SearchHit] = field(default_factory=list)
    failures: list[StoreFailure] = field(default_factory=list)

    def __iter__(self) -> Iterator[SearchHit]:
        return iter(self.hits)

    def __len__(self) -> int:
        return len(self.hits)


class CorpusSearch:
    """Full-scan keyword search over a pattern store."""

    def __init__(self, store: PatternStore):
        self.store = store

    def search(self, query: str) -> SearchResult:
        """
        Find every pattern whose raw content contains query (case-insensitive).

        Best-effort: categories or items that fail to read are skipped and
        recorded in the result's failures.

        Raises:
            ValueError: query is empty
        """
        if not query:
            raise ValueError("Search query must be a non-empty string")

        needle = query.lower()
        result = SearchResult(query=query)

        try:
            categories = self.store.list_categories()
        except StoreIOError as e:
            logger.warning(f"Error listing categories: {e}")
            result.failures.append(StoreFailure(category=None, reason=str(e)))
            return result

        for category in categories:
            try:
                items = self.store.list_items(category)
            except PatternError as e:
                logger.warning(f"Skipping category '{category}' during search: {e}")
                result.failures.append(StoreFailure(category=category, reason=str(e)))
                continue

            for item in items:
                try:
                    content = self.store.read_item(category, item.filename)
                except PatternError as e:
                    logger.warning(f"Skipping '{category}/{item.filename}' during search: {e}")
                    result.failures.append(StoreFailure(
                        category=category, filename=item.filename, reason=str(e)
                    ))
                    continue

                if needle in content.lower():
                    result.hits.append(SearchHit(
                        category=category, pattern=item.name, file=item.filename
                    ))

        return result
