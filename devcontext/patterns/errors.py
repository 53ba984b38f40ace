"""
Pattern Errors

Error taxonomy for the pattern store and everything built on it.
"""


class PatternError(Exception):
    """Base class for pattern store errors."""


class InvalidURIError(PatternError):
    """Resource identifier is malformed or uses the wrong scheme."""
    
    def __init__(self, uri: str, reason: str = ""):
        self.uri = uri
        self.reason = reason
        message = f"Invalid URI: {uri}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class CategoryNotFoundError(PatternError):
    """Requested category does not exist in the store."""
    
    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Category '{category}' not found")


class ItemNotFoundError(PatternError):
    """A specific file does not exist in a category."""
    
    def __init__(self, category: str, filename: str):
        self.category = category
        self.filename = filename
        super().__init__(f"Pattern file '{category}/{filename}' not found")


class PatternNotFoundError(PatternError):
    """Category exists but no item matches the requested pattern name.
    
    Carries the names available in the category so callers can render
    a helpful retry message.
    """
    
    def __init__(self, category: str, pattern: str, available: list[str]):
        self.category = category
        self.pattern = pattern
        self.available = list(available)
        super().__init__(
            f"Pattern '{pattern}' not found in category '{category}'. "
            f"Available patterns: {', '.join(self.available)}"
        )


class StoreIOError(PatternError):
    """Store read or enumeration failed for a reason other than absence."""
    
    def __init__(self, location: str, cause: Exception):
        self.location = location
        self.cause = cause
        super().__init__(f"Failed to read '{location}': {cause}")


class TemplateNotFoundError(PatternError):
    """No project template is mapped for the requested stack."""
    
    def __init__(self, stack: str):
        self.stack = stack
        super().__init__(f"Template for stack '{stack}' not found")
