"""Tests for core exceptions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

from pathlib import Path

from nano_vectordb.core.exceptions import (
    CorruptStateError,
    CountMismatchError,
    DimensionMismatchError,
    MatrixSizeMismatchError,
    SerializationError,
    StorageIOError,
    VectorDBError,
)

__all__ = ()


class TestVectorDBError:
    """Tests for the base VectorDBError."""

    def test_basic_creation(self) -> None:
        """Error should be created with message."""
        error = VectorDBError("Test error")

        assert str(error) == "Test error"
        assert error.context == {}
        assert error.recoverable is True

    def test_inheritance(self) -> None:
        """Should inherit from Exception."""
        assert isinstance(VectorDBError("Test"), Exception)


class TestDimensionMismatchError:
    """Tests for DimensionMismatchError."""

    def test_snapshot_message_names_both_dimensions(self) -> None:
        """Load-time mismatch should name stored and requested dimensions."""
        error = DimensionMismatchError(expected=3, actual=2)

        assert "DB has 2" in str(error)
        assert "expected 3" in str(error)
        assert error.recoverable is False

    def test_item_message_names_id(self) -> None:
        """Upsert-time mismatch should name the offending id."""
        error = DimensionMismatchError(expected=3, actual=5, item_id="doc-7")

        assert "'doc-7'" in str(error)
        assert error.item_id == "doc-7"
        assert error.context["actual"] == 5

    def test_inheritance(self) -> None:
        """Should inherit from VectorDBError."""
        assert isinstance(DimensionMismatchError(1, 2), VectorDBError)


class TestMatrixSizeMismatchError:
    """Tests for MatrixSizeMismatchError."""

    def test_creation(self) -> None:
        """Error should report expected and actual lengths."""
        error = MatrixSizeMismatchError(expected=2, actual=1)

        assert str(error) == "Matrix size mismatch: expected 2, got 1"
        assert isinstance(error, CorruptStateError)
        assert (error.expected, error.actual) == (2, 1)


class TestCountMismatchError:
    """Tests for CountMismatchError."""

    def test_creation(self) -> None:
        """Error should report both counts."""
        error = CountMismatchError(embeddings=3, ids=2)

        assert "3 vs 2" in str(error)
        assert error.context == {"embeddings": 3, "ids": 2}


class TestStorageErrors:
    """Tests for StorageIOError and SerializationError."""

    def test_storage_io_error(self) -> None:
        """I/O errors should carry path and operation."""
        error = StorageIOError("/tmp/db.json", "write", "disk full")

        assert error.path == Path("/tmp/db.json")
        assert error.operation == "write"
        assert "disk full" in str(error)
        assert error.recoverable is False

    def test_serialization_error(self) -> None:
        """Serialization errors should carry the path."""
        error = SerializationError(Path("db.json"), "not JSON")

        assert "db.json" in str(error)
        assert isinstance(error, VectorDBError)
