"""Single-file JSON persistence for the vector store.

The container keeps per-entry metadata human-readable while the dense matrix
is packed as little-endian float32 bytes and base64-encoded into one string:

    {
      "embedding_dim": 3,
      "data": [{"__id__": "a", "color": "red"}, ...],
      "matrix": "AACAPwAAAAAAAAAA...",
      "additional_data": {}
    }

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import base64
import binascii
from pathlib import Path
from typing import Annotated, Any

# Third-party (alphabetical)
import numpy as np
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator, ValidationError, field_validator
from pydantic_core import PydanticSerializationError

# Local imports (core first, then alphabetical)
from ..core.constants import F_ID, FLOAT_BYTES, MATRIX_DTYPE
from ..core.exceptions import (
    CorruptStateError,
    DimensionMismatchError,
    MatrixSizeMismatchError,
    SerializationError,
    StorageIOError,
)
from ..core.types import FloatArray
from ..infra.logging import get_logger

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "StoredDatabase",
    "decode_matrix",
    "encode_matrix",
    "load_database",
    "save_database",
)

logger = get_logger("storage.codec")


# =============================================================================
# Section 12: Functions (matrix packing)
# =============================================================================
def encode_matrix(matrix: FloatArray) -> str:
    """Pack a float matrix as base64 little-endian float32 bytes."""
    packed = np.ascontiguousarray(matrix, dtype=MATRIX_DTYPE).tobytes()
    return base64.b64encode(packed).decode("ascii")


def decode_matrix(value: Any) -> FloatArray:
    """Unpack a base64 matrix string into a flat float32 array.

    Raises:
        ValueError: If the string is not base64 or not a whole number of floats.
    """
    if isinstance(value, np.ndarray):
        return np.ascontiguousarray(value, dtype=np.float32).reshape(-1)
    if not isinstance(value, str):
        raise ValueError(f"matrix must be a base64 string, got {type(value).__name__}")
    try:
        raw = base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"matrix is not valid base64: {exc}") from exc
    if len(raw) % FLOAT_BYTES:
        raise ValueError(f"matrix byte length {len(raw)} is not a multiple of {FLOAT_BYTES}")
    return np.frombuffer(raw, dtype=MATRIX_DTYPE).astype(np.float32)


PackedMatrix = Annotated[
    np.ndarray,
    PlainValidator(decode_matrix),
    PlainSerializer(encode_matrix, return_type=str, when_used="json"),
]


# =============================================================================
# Section 11: Classes
# =============================================================================
class StoredDatabase(BaseModel):
    """On-disk container for a whole store snapshot."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    embedding_dim: int = Field(gt=0)
    data: list[dict[str, Any]] = Field(default_factory=list)
    matrix: PackedMatrix
    additional_data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("data")
    @classmethod
    def _require_ids(cls, value: list[dict[str, Any]]) -> list[dict[str, Any]]:
        for position, item in enumerate(value):
            if not isinstance(item.get(F_ID), str):
                raise ValueError(f"data[{position}] has no string {F_ID!r} field")
        return value

    @property
    def expected_matrix_len(self) -> int:
        return len(self.data) * self.embedding_dim


# =============================================================================
# Section 12: Functions (file I/O)
# =============================================================================
def load_database(path: Path, embedding_dim: int) -> StoredDatabase | None:
    """Load and validate a snapshot.

    Args:
        path: Storage file.
        embedding_dim: Dimension the caller expects.

    Returns:
        The validated snapshot, or None when the file is absent or empty.

    Raises:
        DimensionMismatchError: If the snapshot was written with another dimension.
        CorruptStateError: If the matrix is undecodable or has the wrong length.
        SerializationError: If the file is not a valid container.
        StorageIOError: If the file cannot be read.
    """
    try:
        if not path.exists() or path.stat().st_size == 0:
            return None
        contents = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageIOError(path, "read", str(exc)) from exc

    with logger.span("storage.load", path=str(path)):
        try:
            database = StoredDatabase.model_validate_json(contents)
        except ValidationError as exc:
            matrix_errors = [
                error for error in exc.errors() if error["loc"][:1] == ("matrix",) and error["type"] == "value_error"
            ]
            if matrix_errors:
                raise CorruptStateError(f"Undecodable matrix in {path}: {matrix_errors[0]['msg']}") from exc
            raise SerializationError(path, str(exc)) from exc

        if database.embedding_dim != embedding_dim:
            raise DimensionMismatchError(embedding_dim, database.embedding_dim)
        if database.matrix.size != database.expected_matrix_len:
            raise MatrixSizeMismatchError(database.expected_matrix_len, database.matrix.size)

        logger.debug("Loaded {count} entries from {path}", count=len(database.data), path=str(path))
        return database


def save_database(path: Path, database: StoredDatabase) -> None:
    """Rewrite the whole storage file with the given snapshot.

    The snapshot is serialized before the file is touched, so a value that
    cannot be written as JSON leaves the previous file intact.

    Raises:
        SerializationError: If a field or additional_data value is not JSON-serializable.
        StorageIOError: If the file cannot be written.
    """
    with logger.span("storage.save", path=str(path), count=len(database.data)):
        try:
            payload = database.model_dump_json(indent=2)
        except PydanticSerializationError as exc:
            raise SerializationError(path, str(exc)) from exc
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(path, "write", str(exc)) from exc
