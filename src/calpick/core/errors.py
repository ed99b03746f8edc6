class CalpickError(Exception):
    """Base error."""

class ConfigurationError(CalpickError, ValueError):
    """Raised by initialize() for an unusable configuration (unknown locale, inverted range, ...)."""

class InvalidInputError(CalpickError, ValueError):
    """Raised at the call site for malformed dates or intents."""
