"""Exception hierarchy for nano-vectordb.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from pathlib import Path
from typing import Any

__all__ = (
    'VectorDBError',
    'DimensionMismatchError',
    'CorruptStateError',
    'MatrixSizeMismatchError',
    'CountMismatchError',
    'StorageIOError',
    'SerializationError',
)


class VectorDBError(Exception):
    """Base exception for all nano-vectordb errors.

    All exceptions in the package inherit from this class, enabling
    catch-all handling at application boundaries.

    Attributes:
        context: Additional context for debugging.
        recoverable: Whether the error can potentially be recovered.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None, recoverable: bool = True) -> None:
        self.context = context or {}
        self.recoverable = recoverable
        super().__init__(message)


# =============================================================================
# Data Consistency Exceptions
# =============================================================================
class DimensionMismatchError(VectorDBError):
    """Raised when a vector or snapshot disagrees with the configured dimension.

    Attributes:
        expected: Dimension the store was configured with.
        actual: Dimension that was observed.
        item_id: Offending entry id, when the mismatch comes from an upsert.
    """

    def __init__(self, expected: int, actual: int, *, item_id: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.item_id = item_id
        if item_id is None:
            message = f'Embedding dimension mismatch: DB has {actual}, expected {expected}'
        else:
            message = f"Embedding dimension mismatch for item '{item_id}': expected {expected}, got {actual}"
        super().__init__(
            message,
            context={'expected': expected, 'actual': actual, 'item_id': item_id},
            recoverable=False,
        )


class CorruptStateError(VectorDBError):
    """Raised when persisted state cannot be trusted."""

    def __init__(self, message: str, *, expected: int | None = None, actual: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message, context={'expected': expected, 'actual': actual}, recoverable=False)


class MatrixSizeMismatchError(CorruptStateError):
    """Raised when the packed matrix length disagrees with entry count times dimension."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f'Matrix size mismatch: expected {expected}, got {actual}', expected=expected, actual=actual)


class CountMismatchError(VectorDBError):
    """Raised when parallel batch sequences have different lengths."""

    def __init__(self, embeddings: int, ids: int) -> None:
        self.embeddings = embeddings
        self.ids = ids
        super().__init__(
            f'Embeddings and IDs count mismatch: {embeddings} vs {ids}',
            context={'embeddings': embeddings, 'ids': ids},
        )


# =============================================================================
# Storage Exceptions
# =============================================================================
class StorageIOError(VectorDBError):
    """Raised when reading or writing the storage file fails."""

    def __init__(self, path: Path | str, operation: str, message: str) -> None:
        self.path = Path(path)
        self.operation = operation
        super().__init__(
            f'Storage {operation} failed for {self.path}: {message}',
            context={'path': str(self.path), 'operation': operation},
            recoverable=False,
        )


class SerializationError(VectorDBError):
    """Raised when the storage file is not a well-formed container."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(
            f'Malformed storage file {self.path}: {message}',
            context={'path': str(self.path)},
            recoverable=False,
        )
