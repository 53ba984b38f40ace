"""
Pattern Resolver

Resolves (category, pattern name) to exactly one stored item.

Match order, first match wins:
1. Exact: filename minus extension equals the pattern name
2. Substring: filename contains the pattern name

Candidates are sorted lexically by filename before matching, so ties
are broken deterministically whatever order the store lists them in.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import PatternNotFoundError
from .store import PatternFile, PatternStore


@dataclass(frozen=True)
class ResolvedPattern:
    """A resolved item and its content."""
    item: PatternFile
    content: str
    exact: bool


class PatternResolver:
    """Exact-then-substring lookup of a pattern inside one category."""

    def __init__(self, store: PatternStore):
        self.store = store

    def find(self, category: str, pattern: str) -> tuple[Optional[PatternFile], list[PatternFile]]:
        """
        Locate the item a pattern name refers to without reading it.

        Returns:
            (match or None, all candidates in lexical order)

        Raises:
            CategoryNotFoundError: category does not exist
        """
        candidates = sorted(self.store.list_items(category), key=lambda i: i.filename)

        for item in candidates:
            if item.name == pattern:
                return item, candidates

        for item in candidates:
            if pattern in item.filename:
                return item, candidates

        return None, candidates

    def resolve(self, category: str, pattern: str) -> ResolvedPattern:
        """
        Resolve and read a pattern.

        Raises:
            CategoryNotFoundError: category does not exist
            PatternNotFoundError: no item matched; carries available names
            ItemNotFoundError / StoreIOError: the matched item could not be read
        """
        match, candidates = self.find(category, pattern)
        if match is None:
            raise PatternNotFoundError(category, pattern, [c.name for c in candidates])

        content = self.store.read_item(category, match.filename)
        return ResolvedPattern(item=match, content=content, exact=match.name == pattern)
