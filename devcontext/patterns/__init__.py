"""Pattern store, catalog, lookup and search."""

from .catalog import CatalogListing, Resource, ResourceCatalog, ResourceContent, StoreFailure
from .errors import (
    CategoryNotFoundError,
    InvalidURIError,
    ItemNotFoundError,
    PatternError,
    PatternNotFoundError,
    StoreIOError,
    TemplateNotFoundError,
)
from .repository import PatternRepository
from .resolver import PatternResolver, ResolvedPattern
from .search import CorpusSearch, SearchHit, SearchResult
from .sections import extract_section
from .store import FileSystemStore, MemoryStore, PatternFile, PatternStore

__all__ = [
    "PatternRepository",
    # Store
    "PatternStore",
    "FileSystemStore",
    "MemoryStore",
    "PatternFile",
    # Catalog
    "ResourceCatalog",
    "Resource",
    "ResourceContent",
    "CatalogListing",
    "StoreFailure",
    # Lookup and search
    "PatternResolver",
    "ResolvedPattern",
    "CorpusSearch",
    "SearchHit",
    "SearchResult",
    "extract_section",
    # Errors
    "PatternError",
    "InvalidURIError",
    "CategoryNotFoundError",
    "ItemNotFoundError",
    "PatternNotFoundError",
    "StoreIOError",
    "TemplateNotFoundError",
]
