"""
Error taxonomy for the admin adapters.

The adapters introduce very few failure modes of their own. Errors raised by
collaborators (model manager, admin pool, template engine) are never wrapped
here; they propagate to the caller unchanged.
"""

import logging

# Module logger
logger = logging.getLogger('AdminAdapters.validation.errors')


class AdminAdaptersError(Exception):
    """Base class for errors raised by the adapters themselves."""
    pass


class AdminNotFoundError(AdminAdaptersError, LookupError):
    """No admin is registered under the requested admin code."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"No admin registered for code {code!r}")


class ModelTransformError(AdminAdaptersError, ValueError):
    """Submitted array data cannot be mapped onto the model class."""

    def __init__(self, class_name: str, field: str):
        self.class_name = class_name
        self.field = field
        super().__init__(f"{class_name} has no attribute {field!r}")


class ConfigurationError(AdminAdaptersError):
    """Configuration value is well-formed but cannot be resolved."""
    pass


def describe_error(exc: Exception) -> str:
    """
    Build a short, log-friendly description of an exception.

    Adapter errors carry their own message. Anything else is prefixed
    with its type name so collaborator failures stay recognisable in logs.

    Args:
        exc: The exception to describe

    Returns:
        One-line description string
    """
    if isinstance(exc, AdminAdaptersError):
        return str(exc)
    message = str(exc)
    if message:
        return f"{type(exc).__name__}: {message}"
    return type(exc).__name__
