"""
Resource Catalog

Builds the URI-addressable resource list from a pattern store and reads
single resources back by URI.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional
from urllib.parse import quote, unquote

from .errors import InvalidURIError, PatternError, StoreIOError
from .store import PatternStore, content_type_for, is_safe_segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resource:
    """Read-only projection of a stored item for enumeration."""
    uri: str
    name: str  # "<category>/<filename>"
    description: str
    mime_type: str


@dataclass(frozen=True)
class ResourceContent:
    """Content of a single resource read by URI."""
    uri: str
    mime_type: str
    text: str


@dataclass(frozen=True)
class StoreFailure:
    """A category or item skipped during best-effort enumeration."""
    category: Optional[str]
    reason: str
    filename: Optional[str] = None


@dataclass
class CatalogListing:
    """Resources that were listed, plus the categories that failed."""
    resources: list[Resource] = field(default_factory=list)
    failures: list[StoreFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failures

    def __iter__(self) -> Iterator[Resource]:
        return iter(self.resources)

    def __len__(self) -> int:
        return len(self.resources)


class ResourceCatalog:
    """Enumerates and reads resources of the form <scheme>://<category>/<filename>."""

    def __init__(self, store: PatternStore, scheme: str):
        self.store = store
        self.scheme = scheme

    @property
    def prefix(self) -> str:
        return f"{self.scheme}://"

    def build_uri(self, category: str, filename: str) -> str:
        """Segments are percent-encoded so any stored name is a valid URL."""
        return f"{self.prefix}{quote(category, safe='')}/{quote(filename, safe='')}"

    def parse_uri(self, uri: str) -> tuple[str, str]:
        """
        Split a resource URI into (category, filename), percent-decoding each.

        Raises:
            InvalidURIError: wrong scheme, or not exactly two safe path segments
        """
        if not uri.startswith(self.prefix):
            raise InvalidURIError(uri, f"expected scheme '{self.prefix}'")

        # Split before decoding: an encoded "/" never adds a segment and
        # a decoded "%2E%2E" is still rejected as "..".
        parts = [unquote(p) for p in uri[len(self.prefix):].split("/")]
        if len(parts) != 2 or not all(is_safe_segment(p) for p in parts):
            raise InvalidURIError(uri, "expected <category>/<filename>")

        return parts[0], parts[1]

    def list_resources(self) -> CatalogListing:
        """
        List every recognized item in every category.

        Best-effort: a category that fails to enumerate is skipped and
        recorded in the listing's failures; this call never raises.
        """
        listing = CatalogListing()

        try:
            categories = self.store.list_categories()
        except StoreIOError as e:
            logger.warning(f"Error listing categories: {e}")
            listing.failures.append(StoreFailure(category=None, reason=str(e)))
            return listing

        for category in categories:
            try:
                items = self.store.list_items(category)
            except PatternError as e:
                logger.warning(f"Skipping category '{category}': {e}")
                listing.failures.append(StoreFailure(category=category, reason=str(e)))
                continue

            for item in items:
                listing.resources.append(Resource(
                    uri=self.build_uri(category, item.filename),
                    name=f"{category}/{item.filename}",
                    description=f"Context pattern for {category} - {item.name}",
                    mime_type=item.content_type,
                ))

        return listing

    def list_patterns(self, category: str) -> list[str]:
        """
        Pattern names (filenames minus extension) in one category.

        Raises:
            CategoryNotFoundError: category does not exist
            StoreIOError: category could not be enumerated
        """
        return [item.name for item in self.store.list_items(category)]

    def read_resource(self, uri: str) -> ResourceContent:
        """
        Read a resource by URI.

        Raises:
            InvalidURIError: URI rejected before any store access
            ItemNotFoundError: no such category/file
            StoreIOError: file exists but could not be read
        """
        category, filename = self.parse_uri(uri)
        text = self.store.read_item(category, filename)
        return ResourceContent(uri=uri, mime_type=content_type_for(filename), text=text)
