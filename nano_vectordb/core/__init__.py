"""Core types, constants, settings and errors for nano-vectordb.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Local imports (core first, then alphabetical)
from .constants import F_ID, F_METRICS, METRIC_COSINE
from .exceptions import (
    CorruptStateError,
    CountMismatchError,
    DimensionMismatchError,
    MatrixSizeMismatchError,
    SerializationError,
    StorageIOError,
    VectorDBError,
)
from .settings import NanoVectorDBSettings, load_settings
from .types import DataFilter, Fields, FloatArray, Score, VectorId, VectorLike

__all__ = (
    "F_ID",
    "F_METRICS",
    "METRIC_COSINE",
    "VectorDBError",
    "DimensionMismatchError",
    "CorruptStateError",
    "MatrixSizeMismatchError",
    "CountMismatchError",
    "StorageIOError",
    "SerializationError",
    "NanoVectorDBSettings",
    "load_settings",
    "DataFilter",
    "Fields",
    "FloatArray",
    "Score",
    "VectorId",
    "VectorLike",
)
