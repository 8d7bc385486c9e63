"""Exact top-k cosine similarity over a vector store.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import heapq
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

# Third-party (alphabetical)
import numpy as np

# Local imports (core first, then alphabetical)
from ..core.constants import F_ID, F_METRICS
from ..infra.logging import get_logger

if TYPE_CHECKING:
    from ..core.types import DataFilter, Fields, FloatArray, VectorLike
    from ..storage.store import NanoVectorDB

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("QueryResult", "ScoredIndex", "compare_scores", "normalize", "query")

logger = get_logger("search.similarity")


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True, slots=True)
class QueryResult:
    """Single similarity match."""

    id: str
    score: float
    fields: Fields = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a record carrying ``__id__`` and ``__metrics__``."""
        record = dict(self.fields)
        record[F_METRICS] = self.score
        record[F_ID] = self.id
        return record


@dataclass(frozen=True, slots=True, eq=False)
class ScoredIndex:
    """Heap item ordered by score, with NaN below every real score."""

    score: float
    index: int

    def __lt__(self, other: ScoredIndex) -> bool:
        return compare_scores(self.score, other.score) < 0


# =============================================================================
# Section 12: Functions
# =============================================================================
def compare_scores(left: float, right: float) -> int:
    """Three-way score comparison where NaN is less than any number."""
    left_nan = math.isnan(left)
    right_nan = math.isnan(right)
    if left_nan or right_nan:
        return int(right_nan) - int(left_nan)
    return (left > right) - (left < right)


def normalize(vector: VectorLike) -> FloatArray:
    """Scale a vector to unit L2 norm; the zero vector stays zero."""
    array = np.asarray(vector, dtype=np.float32)
    norm_sq = float(np.dot(array, array.astype(np.float64)))
    if norm_sq == 0.0:
        return np.zeros_like(array)
    return (array / math.sqrt(norm_sq)).astype(np.float32)


def query(
    db: NanoVectorDB,
    query_vector: VectorLike,
    top_k: int,
    *,
    better_than: float | None = None,
    data_filter: DataFilter | None = None,
) -> list[QueryResult]:
    """Return the ``top_k`` entries most similar to ``query_vector``.

    Every live entry is scored with a dot product against the normalized
    query (stored rows are already unit length), so the scan is exact.
    Only the best ``top_k`` candidates are retained while scanning.

    Args:
        db: Store to scan. It must not be mutated during the call.
        query_vector: Vector of length ``db.embedding_dim``.
        top_k: Maximum number of results.
        better_than: Optional minimum score (inclusive).
        data_filter: Optional predicate over entries.

    Returns:
        Matches sorted by descending score. A query of the wrong length
        yields an empty list instead of raising.
    """
    vector = np.asarray(query_vector, dtype=np.float32)
    if vector.ndim != 1 or vector.shape[0] != db.embedding_dim:
        logger.warning(
            "Query dimension mismatch: expected {expected}, got {actual}",
            expected=db.embedding_dim,
            actual=int(vector.size),
        )
        return []
    if top_k <= 0 or db.is_empty():
        return []

    entries = db.entries
    scores = db.matrix @ normalize(vector)

    heap: list[ScoredIndex] = []
    for index, entry in enumerate(entries):
        if data_filter is not None and not data_filter(entry):
            continue
        score = float(scores[index])
        if better_than is not None and not score >= better_than:
            continue
        heapq.heappush(heap, ScoredIndex(score=score, index=index))
        if len(heap) > top_k:
            heapq.heappop(heap)

    ranked = sorted(heap, reverse=True)
    return [
        QueryResult(id=entries[item.index].id, score=item.score, fields=dict(entries[item.index].fields))
        for item in ranked
    ]
