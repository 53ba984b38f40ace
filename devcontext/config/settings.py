"""
Settings
Configuration management for the DevContext MCP Server.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_URI_SCHEME = "devcontext"

# Bundled corpus ships as package data: devcontext/contexts
BUNDLED_CONTEXTS_PATH = Path(__file__).resolve().parent.parent / "contexts"


def get_contexts_path() -> Path:
    """
    Get the root directory of the pattern store.
    
    Priority:
    1. DEVCONTEXT_CONTEXTS_PATH env var (explicit override)
    2. The contexts/ directory bundled inside the package
    """
    explicit_path = os.getenv("DEVCONTEXT_CONTEXTS_PATH")
    if explicit_path:
        return Path(os.path.expanduser(explicit_path))
    return BUNDLED_CONTEXTS_PATH


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    http_host: str = "0.0.0.0"
    http_port: int = 8000
    uri_scheme: str = DEFAULT_URI_SCHEME
    contexts_path: Path = field(default_factory=get_contexts_path)
    
    @property
    def is_production(self) -> bool:
        return self.environment == "production"
    
    @property
    def is_development(self) -> bool:
        return self.environment == "development"


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    def __init__(self, contexts_path: Optional[Path] = None):
        self._config: Optional[Config] = None
        self._contexts_override = contexts_path
    
    async def load(self) -> Config:
        """Load configuration from environment (and a local .env file)."""
        load_dotenv()
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            http_host=os.getenv("MCP_HOST", "0.0.0.0"),
            http_port=int(os.getenv("MCP_PORT", os.getenv("HTTP_PORT", "8000"))),
            uri_scheme=os.getenv("DEVCONTEXT_URI_SCHEME", DEFAULT_URI_SCHEME),
            contexts_path=self._contexts_override or get_contexts_path(),
        )
        return self._config
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
            if self._contexts_override:
                self._config.contexts_path = self._contexts_override
        return self._config
