class ValidationError(ValueError):
    """Rejected user input; nothing was written."""


class StorageError(RuntimeError):
    """The SQLite layer failed. Not retried."""
