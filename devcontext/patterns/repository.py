"""
Pattern Repository

One constructed value that wires a store to the catalog, resolver,
search and template lookup. Tools and servers receive it explicitly.
"""

from pathlib import Path

from .catalog import CatalogListing, ResourceCatalog, ResourceContent
from .resolver import PatternResolver, ResolvedPattern
from .search import CorpusSearch, SearchResult
from .sections import extract_section
from .store import FileSystemStore, PatternStore
from .templates import get_template_ref


class PatternRepository:
    """
    Read-only facade over a pattern store.

    Usage:
        repo = PatternRepository.from_path(Path("contexts"), scheme="devcontext")
        repo.resolve_pattern("architecture", "front").content
    """

    def __init__(self, store: PatternStore, scheme: str = "devcontext"):
        self._store = store
        self._catalog = ResourceCatalog(store, scheme)
        self._resolver = PatternResolver(store)
        self._search = CorpusSearch(store)

    @classmethod
    def from_path(cls, root: Path, scheme: str = "devcontext") -> "PatternRepository":
        return cls(FileSystemStore(root), scheme=scheme)

    @property
    def store(self) -> PatternStore:
        return self._store

    @property
    def scheme(self) -> str:
        return self._catalog.scheme

    def list_resources(self) -> CatalogListing:
        return self._catalog.list_resources()

    def read_resource(self, uri: str) -> ResourceContent:
        return self._catalog.read_resource(uri)

    def list_categories(self) -> list[str]:
        return self._store.list_categories()

    def list_patterns(self, category: str) -> list[str]:
        return self._catalog.list_patterns(category)

    def resolve_pattern(self, category: str, pattern: str) -> ResolvedPattern:
        return self._resolver.resolve(category, pattern)

    def search(self, query: str) -> SearchResult:
        return self._search.search(query)

    def get_project_template(self, stack: str) -> str:
        """
        The section of a stack's template document that covers the stack.

        Raises:
            TemplateNotFoundError: no template mapped for stack
            ItemNotFoundError / StoreIOError: template document unreadable
        """
        ref = get_template_ref(stack)
        content = self._store.read_item(ref.category, ref.filename)
        return extract_section(content, stack)
