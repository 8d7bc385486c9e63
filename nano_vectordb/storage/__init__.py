"""Vector store and its single-file persistence.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Local imports (core first, then alphabetical)
from .codec import StoredDatabase, decode_matrix, encode_matrix, load_database, save_database
from .store import Entry, NanoVectorDB

__all__ = (
    "Entry",
    "NanoVectorDB",
    "StoredDatabase",
    "decode_matrix",
    "encode_matrix",
    "load_database",
    "save_database",
)
