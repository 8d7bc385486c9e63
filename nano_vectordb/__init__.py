"""nano-vectordb package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .core.exceptions import (
    CorruptStateError,
    CountMismatchError,
    DimensionMismatchError,
    SerializationError,
    StorageIOError,
    VectorDBError,
)
from .core.settings import NanoVectorDBSettings, load_settings
from .storage.store import Entry, NanoVectorDB
from .search.similarity import QueryResult, normalize
from .index import AnnIndex

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "AnnIndex",
    "Entry",
    "NanoVectorDB",
    "NanoVectorDBSettings",
    "QueryResult",
    "load_settings",
    "normalize",
    "VectorDBError",
    "DimensionMismatchError",
    "CorruptStateError",
    "CountMismatchError",
    "StorageIOError",
    "SerializationError",
)
