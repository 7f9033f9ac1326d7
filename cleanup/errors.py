"""Exceptions raised by the cleaner on caller misuse."""


class CleanupError(Exception):
    """Base class for cleanup errors."""


class MissingInputError(CleanupError, ValueError):
    """Raised when a ``Cleaner`` is built without an input stream."""


class ResourceReleasedError(CleanupError, RuntimeError):
    """Raised when the document tree is used after ``release()``."""
