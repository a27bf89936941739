class IngestionError(Exception):
    """Base exception for all ingestion-related errors."""


class RecordNotFoundError(IngestionError, IndexError):
    """Raised when a record index does not exist in a file collection."""
