"""Dense in-memory vector store with single-file persistence.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

# Third-party (alphabetical)
import numpy as np
from pydantic import ValidationError

# Local imports (core first, then alphabetical)
from ..core.constants import DEFAULT_TOP_K, F_ID, METRIC_COSINE
from ..core.exceptions import CorruptStateError, DimensionMismatchError, SerializationError
from ..infra.logging import get_logger
from ..search.similarity import normalize, query
from .codec import StoredDatabase, load_database, save_database

if TYPE_CHECKING:
    from ..core.types import DataFilter, Fields, FloatArray, VectorLike
    from ..search.similarity import QueryResult

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Entry", "NanoVectorDB")

logger = get_logger("storage.store")


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True, slots=True, eq=False)
class Entry:
    """Single vector entry.

    Entries passed to ``upsert`` carry the raw vector; entries returned by the
    store carry the unit-normalized float32 copy that backs the matrix row.
    """

    id: str
    vector: VectorLike
    fields: Fields = field(default_factory=dict)


# =============================================================================
# Section 11: Classes
# =============================================================================
class NanoVectorDB:
    """Exact cosine-similarity vector store backed by one JSON file.

    Row ``i`` of the matrix always belongs to ``entries[i]``. Mutations keep
    that alignment in memory; nothing reaches disk until ``save`` is called.
    Not safe for concurrent mutation.
    """

    def __init__(self, embedding_dim: int, storage_file: str | Path) -> None:
        if embedding_dim <= 0:
            raise ValueError(f"embedding_dim must be positive, got {embedding_dim}")
        self.embedding_dim = embedding_dim
        self.metric = METRIC_COSINE
        self.storage_file = Path(storage_file)
        self._entries: list[Entry] = []
        self._positions: dict[str, int] = {}
        self._matrix: FloatArray = np.zeros((0, embedding_dim), dtype=np.float32)
        self._additional_data: dict[str, Any] = {}

        database = load_database(self.storage_file, embedding_dim)
        if database is not None:
            self._restore(database)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._positions

    def __repr__(self) -> str:
        return f"NanoVectorDB(embedding_dim={self.embedding_dim}, entries={len(self)}, storage_file='{self.storage_file}')"

    @property
    def ids(self) -> list[str]:
        """Entry ids in store order."""
        return [entry.id for entry in self._entries]

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Entries in store order."""
        return tuple(self._entries)

    @property
    def matrix(self) -> FloatArray:
        """Read-only view of the ``(len, embedding_dim)`` matrix."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def is_empty(self) -> bool:
        """Return True when the store holds no entries."""
        return not self._entries

    def upsert(self, entries: Iterable[Entry]) -> tuple[list[str], list[str]]:
        """Insert new entries and overwrite existing ones.

        Every vector is checked before anything is written, so a bad item
        leaves the store untouched. Updating an id replaces its fields
        wholesale. An id repeated inside the batch is applied in order.

        Args:
            entries: Entries with raw (unnormalized) vectors.

        Returns:
            Tuple of ``(updated_ids, inserted_ids)``.

        Raises:
            DimensionMismatchError: If any vector has the wrong length.
        """
        batch = list(entries)
        vectors = [self._checked_vector(entry) for entry in batch]

        updated: list[str] = []
        inserted: list[str] = []
        seen_updates: set[str] = set()
        existing_rows = len(self._matrix)
        new_rows: list[FloatArray] = []

        for entry, vector in zip(batch, vectors, strict=True):
            stored = Entry(id=entry.id, vector=vector, fields=dict(entry.fields))
            position = self._positions.get(entry.id)
            if position is None:
                self._positions[entry.id] = len(self._entries)
                self._entries.append(stored)
                new_rows.append(vector)
                inserted.append(entry.id)
                continue

            self._entries[position] = stored
            if position < existing_rows:
                self._matrix[position] = vector
                if entry.id not in seen_updates:
                    seen_updates.add(entry.id)
                    updated.append(entry.id)
            else:
                new_rows[position - existing_rows] = vector

        if new_rows:
            self._matrix = np.vstack([self._matrix, np.stack(new_rows)])

        logger.debug("Upserted {updated} updated, {inserted} inserted", updated=len(updated), inserted=len(inserted))
        return updated, inserted

    def get(self, ids: Iterable[str]) -> list[Entry]:
        """Return entries whose id is requested, in store order; unknown ids are skipped."""
        wanted = set(ids)
        return [entry for entry in self._entries if entry.id in wanted]

    def delete(self, ids: Iterable[str]) -> int:
        """Remove entries by id and compact the matrix.

        Returns:
            Number of entries removed.
        """
        doomed = set(ids)
        survivors = [entry for entry in self._entries if entry.id not in doomed]
        removed = len(self._entries) - len(survivors)
        if not removed:
            return 0

        self._entries = survivors
        self._positions = {entry.id: position for position, entry in enumerate(survivors)}
        if survivors:
            self._matrix = np.stack([entry.vector for entry in survivors]).astype(np.float32, copy=False)
        else:
            self._matrix = np.zeros((0, self.embedding_dim), dtype=np.float32)

        logger.debug("Deleted {removed} entries, {remaining} remain", removed=removed, remaining=len(survivors))
        return removed

    def query(
        self,
        query_vector: VectorLike,
        top_k: int = DEFAULT_TOP_K,
        better_than: float | None = None,
        data_filter: DataFilter | None = None,
    ) -> list[QueryResult]:
        """Return the ``top_k`` most similar entries, best first."""
        return query(self, query_vector, top_k, better_than=better_than, data_filter=data_filter)

    def save(self) -> None:
        """Rewrite the storage file with the current state.

        Raises:
            SerializationError: If fields or additional_data cannot be stored as JSON.
            StorageIOError: If the file cannot be written.
        """
        try:
            database = StoredDatabase(
                embedding_dim=self.embedding_dim,
                data=[_to_record(entry) for entry in self._entries],
                matrix=self._matrix.reshape(-1),
                additional_data=self._additional_data,
            )
        except ValidationError as exc:
            raise SerializationError(self.storage_file, str(exc)) from exc
        save_database(self.storage_file, database)

    def get_additional_data(self) -> dict[str, Any]:
        """Return the free-form metadata stored alongside the index."""
        return dict(self._additional_data)

    def store_additional_data(self, data: Mapping[str, Any]) -> None:
        """Replace the free-form metadata stored alongside the index."""
        self._additional_data = dict(data)

    def vector_bytes_len(self) -> int:
        """Size of the matrix buffer in bytes."""
        return int(self._matrix.nbytes)

    def _checked_vector(self, entry: Entry) -> FloatArray:
        vector = np.asarray(entry.vector, dtype=np.float32)
        if vector.ndim != 1 or vector.shape[0] != self.embedding_dim:
            raise DimensionMismatchError(self.embedding_dim, int(vector.size), item_id=entry.id)
        normalized = normalize(vector)
        normalized.flags.writeable = False
        return normalized

    def _restore(self, database: StoredDatabase) -> None:
        matrix = database.matrix.reshape(len(database.data), self.embedding_dim).copy()
        entries: list[Entry] = []
        positions: dict[str, int] = {}
        for position, record in enumerate(database.data):
            item_id = record[F_ID]
            if item_id in positions:
                raise CorruptStateError(f"Duplicate id {item_id!r} in {self.storage_file}")
            positions[item_id] = position
            fields = {key: value for key, value in record.items() if key != F_ID}
            entries.append(Entry(id=item_id, vector=_frozen(matrix[position]), fields=fields))

        self._entries = entries
        self._positions = positions
        self._matrix = matrix
        self._additional_data = dict(database.additional_data)


# =============================================================================
# Section 12: Functions
# =============================================================================
def _to_record(entry: Entry) -> dict[str, Any]:
    record: dict[str, Any] = {F_ID: entry.id}
    record.update((key, value) for key, value in entry.fields.items() if key != F_ID)
    return record


def _frozen(row: FloatArray) -> FloatArray:
    vector = row.copy()
    vector.flags.writeable = False
    return vector
