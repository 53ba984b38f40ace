"""
Shared pytest fixtures for DevContext MCP tests

Provides a small on-disk pattern corpus, a repository over it, and the
standard mock logger and tool context.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Corpus
# ============================================================================

CORPUS = {
    "architecture": {
        "frontend.md": "# Frontend\n\nRoutes, components and services.\n",
        "backend.md": "# Backend\n\nHandlers delegate to services.\n",
    },
    "components": {
        "ui-patterns.md": "# UI Patterns\n\nUse Tailwind utility classes.\n",
        "forms.json": '{"library": "react-hook-form"}\n',
    },
    "naming": {
        "project-structure.md": (
            "# Project Structure\n"
            "\n"
            "## Nextjs\n"
            "src/app/page.tsx\n"
            "\n"
            "## Vite React\n"
            "src/main.tsx\n"
            "\n"
            "## Express API\n"
            "src/routes/\n"
        ),
    },
}


def write_corpus(root: Path, corpus: dict) -> Path:
    """Write {category: {filename: text}} under root."""
    for category, files in corpus.items():
        category_path = root / category
        category_path.mkdir(parents=True, exist_ok=True)
        for filename, text in files.items():
            (category_path / filename).write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def contexts_root(tmp_path):
    """
    On-disk corpus with three categories plus files that must be ignored
    (a .txt file and a stray file at the root).
    """
    root = write_corpus(tmp_path / "contexts", CORPUS)
    (root / "architecture" / "notes.txt").write_text("not a pattern")
    (root / "README.md").write_text("root files are not categories")
    return root


@pytest.fixture
def repository(contexts_root):
    """PatternRepository over the on-disk corpus."""
    from devcontext.patterns import PatternRepository
    return PatternRepository.from_path(contexts_root, scheme="devcontext")


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from devcontext.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def mock_context():
    """
    Standard mock ToolContext for all tests.
    """
    from devcontext.mcp_types.tools import ToolContext

    return ToolContext(
        requestId='test_req_123',
        timestamp=1234567890.0,
        toolName=None
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables that would leak in from the shell."""
    for name in (
        "ENVIRONMENT", "LOG_LEVEL", "MCP_HOST", "MCP_PORT", "HTTP_PORT",
        "DEVCONTEXT_CONTEXTS_PATH", "DEVCONTEXT_URI_SCHEME",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
