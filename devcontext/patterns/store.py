"""
Pattern Store

Read-only access to a hierarchical text store: category -> pattern file.

Two backends are provided:
1. FileSystemStore - a directory tree (contexts/<category>/<file>.md)
2. MemoryStore - an embedded bundle held in a dict

Enumeration order is unspecified by the store contract. Both backends
here return names sorted lexically, but callers must not rely on it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

from .errors import CategoryNotFoundError, ItemNotFoundError, StoreIOError


# Recognized extensions -> content type
CONTENT_TYPES = {
    ".md": "text/markdown",
    ".json": "application/json",
}

MARKDOWN = ".md"


@dataclass(frozen=True)
class PatternFile:
    """A stored item inside a category."""
    category: str
    filename: str

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix

    @property
    def name(self) -> str:
        """Filename minus its extension."""
        return Path(self.filename).stem

    @property
    def content_type(self) -> str:
        return content_type_for(self.filename)


def is_recognized(filename: str) -> bool:
    """True if the filename ends in .md or .json (case-sensitive)."""
    return Path(filename).suffix in CONTENT_TYPES


def content_type_for(filename: str) -> str:
    """Markdown for .md files, JSON for everything else."""
    if Path(filename).suffix == MARKDOWN:
        return CONTENT_TYPES[MARKDOWN]
    return CONTENT_TYPES[".json"]


def is_safe_segment(segment: str) -> bool:
    """A single path segment that cannot escape its parent directory."""
    if not segment or segment in (".", ".."):
        return False
    return not any(sep in segment for sep in ("/", "\\", "\0"))


@runtime_checkable
class PatternStore(Protocol):
    """Protocol for pattern store backends.

    Uses structural subtyping - no inheritance required.
    """

    def list_categories(self) -> list[str]:
        """Return every category at the store root."""
        ...

    def list_items(self, category: str) -> list[PatternFile]:
        """Return recognized items directly inside a category.

        Raises CategoryNotFoundError or StoreIOError.
        """
        ...

    def read_item(self, category: str, filename: str) -> str:
        """Return the full text of one item.

        Raises ItemNotFoundError or StoreIOError.
        """
        ...


class FileSystemStore:
    """Pattern store backed by a directory tree."""

    def __init__(self, root: Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def list_categories(self) -> list[str]:
        try:
            return sorted(entry.name for entry in self._root.iterdir() if entry.is_dir())
        except OSError as e:
            raise StoreIOError(str(self._root), e) from e

    def list_items(self, category: str) -> list[PatternFile]:
        category_path = self._category_path(category)
        if category_path is None or not category_path.is_dir():
            raise CategoryNotFoundError(category)

        try:
            filenames = sorted(
                entry.name for entry in category_path.iterdir()
                if entry.is_file() and is_recognized(entry.name)
            )
        except OSError as e:
            raise StoreIOError(f"{category}/", e) from e

        return [PatternFile(category=category, filename=f) for f in filenames]

    def read_item(self, category: str, filename: str) -> str:
        category_path = self._category_path(category)
        if category_path is None or not is_safe_segment(filename) or not is_recognized(filename):
            raise ItemNotFoundError(category, filename)

        file_path = category_path / filename
        try:
            return file_path.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as e:
            raise ItemNotFoundError(category, filename) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f"{category}/{filename}", e) from e

    def _category_path(self, category: str) -> Path | None:
        if not is_safe_segment(category):
            return None
        return self._root / category


class MemoryStore:
    """Pattern store backed by an in-memory bundle.

    Args:
        bundle: category -> {filename: text}
    """

    def __init__(self, bundle: Mapping[str, Mapping[str, str]]):
        self._bundle = {category: dict(files) for category, files in bundle.items()}

    def list_categories(self) -> list[str]:
        return sorted(self._bundle)

    def list_items(self, category: str) -> list[PatternFile]:
        if category not in self._bundle:
            raise CategoryNotFoundError(category)
        return [
            PatternFile(category=category, filename=f)
            for f in sorted(self._bundle[category])
            if is_recognized(f)
        ]

    def read_item(self, category: str, filename: str) -> str:
        files = self._bundle.get(category)
        if files is None or filename not in files or not is_recognized(filename):
            raise ItemNotFoundError(category, filename)
        return files[filename]
