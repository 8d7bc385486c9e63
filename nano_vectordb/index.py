"""Positional-id search index over a persisted vector store.

Callers typically key entries by the stringified position of a record in
their own list (``"0"``, ``"1"``, ...). That list and the store must stay
aligned; if they diverge, ids resolve to the wrong record without error.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

# Local imports (core first, then alphabetical)
from .core.constants import DEFAULT_TOP_K
from .core.exceptions import CountMismatchError
from .infra.logging import get_logger
from .storage.store import Entry, NanoVectorDB

if TYPE_CHECKING:
    from .core.settings import NanoVectorDBSettings
    from .core.types import VectorLike

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("AnnIndex",)

logger = get_logger("index")


# =============================================================================
# Section 11: Classes
# =============================================================================
class AnnIndex:
    """Batch-insert and id-only search facade over ``NanoVectorDB``."""

    def __init__(self, db: NanoVectorDB, default_k: int = DEFAULT_TOP_K) -> None:
        if default_k <= 0:
            raise ValueError(f"default_k must be positive, got {default_k}")
        self._db = db
        self._default_k = default_k

    @classmethod
    def open(cls, dimension: int, storage_file: str | Path, default_k: int = DEFAULT_TOP_K) -> AnnIndex:
        """Open (or create) the store at ``storage_file``."""
        return cls(NanoVectorDB(dimension, storage_file), default_k)

    @classmethod
    def from_settings(cls, settings: NanoVectorDBSettings) -> AnnIndex:
        """Open the store described by ``settings``, searching ``default_top_k`` ids by default."""
        return cls.open(settings.embedding_dim, settings.storage_file, settings.default_top_k)

    @property
    def db(self) -> NanoVectorDB:
        return self._db

    @property
    def dimension(self) -> int:
        return self._db.embedding_dim

    @property
    def default_k(self) -> int:
        return self._default_k

    def add_batch(self, embeddings: Sequence[VectorLike], ids: Sequence[str]) -> None:
        """Upsert ``embeddings`` under the parallel ``ids`` and save.

        Raises:
            CountMismatchError: If the sequences differ in length.
            DimensionMismatchError: If any embedding has the wrong length.
        """
        if len(embeddings) != len(ids):
            raise CountMismatchError(len(embeddings), len(ids))
        if not ids:
            return

        entries = [Entry(id=item_id, vector=embedding) for embedding, item_id in zip(embeddings, ids, strict=True)]
        with logger.span("index.add_batch", count=len(entries)):
            self._db.upsert(entries)
            self._db.save()

    def build_index(self) -> None:
        """No-op: the exact scan needs no build step."""

    def search(self, query_vector: VectorLike, k: int | None = None) -> list[str]:
        """Return ids of the ``k`` nearest entries, best first.

        ``k`` defaults to the index's ``default_k``.
        """
        if k is None:
            k = self._default_k
        return [result.id for result in self._db.query(query_vector, k)]

    def item_count(self) -> int:
        return len(self._db)
