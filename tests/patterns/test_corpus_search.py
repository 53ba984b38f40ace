"""Tests for CorpusSearch."""

import pytest
from devcontext.patterns import (
    CorpusSearch, FileSystemStore, ItemNotFoundError, MemoryStore, SearchHit
)


class BrokenItemStore(MemoryStore):
    """Lists an item it cannot read."""
    
    def read_item(self, category, filename):
        if filename == "gone.md":
            raise ItemNotFoundError(category, filename)
        return super().read_item(category, filename)


class TestCorpusSearch:
    """Test CorpusSearch."""
    
    def test_case_insensitive_single_hit(self, contexts_root):
        """Only ui-patterns mentions Tailwind."""
        search = CorpusSearch(FileSystemStore(contexts_root))
        
        result = search.search("tailwind")
        
        assert result.hits == [SearchHit(category="components", pattern="ui-patterns", file="ui-patterns.md")]
        assert result.hits[0].path == "components/ui-patterns"
    
    def test_no_match_is_empty(self, contexts_root):
        """An unmatched query yields an empty, non-error result."""
        result = CorpusSearch(FileSystemStore(contexts_root)).search("kubernetes")
        
        assert len(result) == 0
        assert result.failures == []
    
    def test_finds_every_containing_item(self, contexts_root):
        """No false negatives across categories and extensions."""
        result = CorpusSearch(FileSystemStore(contexts_root)).search("SRC/")
        
        assert [hit.path for hit in result] == ["naming/project-structure"]
        
        result = CorpusSearch(FileSystemStore(contexts_root)).search("services")
        
        assert {hit.path for hit in result} == {"architecture/frontend", "architecture/backend"}
    
    def test_searches_json(self, contexts_root):
        result = CorpusSearch(FileSystemStore(contexts_root)).search("React-Hook-Form")
        
        assert [hit.file for hit in result] == ["forms.json"]
    
    def test_ignores_unrecognized_files(self, contexts_root):
        """notes.txt is never searched."""
        result = CorpusSearch(FileSystemStore(contexts_root)).search("not a pattern")
        
        assert len(result) == 0
    
    def test_unreadable_item_is_skipped(self):
        """Read failures are recorded and the scan continues."""
        store = BrokenItemStore({"api": {"gone.md": "", "rest.md": "Use REST verbs"}})
        
        result = CorpusSearch(store).search("rest")
        
        assert [hit.pattern for hit in result] == ["rest"]
        assert result.failures[0].filename == "gone.md"
    
    def test_empty_query_rejected(self):
        with pytest.raises(ValueError):
            CorpusSearch(MemoryStore({})).search("")
