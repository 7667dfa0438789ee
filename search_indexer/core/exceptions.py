"""
Exception hierarchy for the indexing worker.

Every failure of a single job maps to one of three kinds: the payload could
not be decoded, the embedding provider failed, or the storage transaction
failed. The job loop catches all of them at its boundary.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the worker
"""

from typing import Any


class IndexingError(Exception):
    """Base exception for all indexing errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DecodeError(IndexingError):
    """Raised when a queue payload does not match the job shape."""


class ProviderError(IndexingError):
    """Raised when the embedding provider fails or returns a mismatched batch."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            model: Embedding model identifier requested by the job
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class StorageError(IndexingError):
    """Raised when the search index transaction fails and is rolled back."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            document_id: Document whose rows were being replaced
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)
