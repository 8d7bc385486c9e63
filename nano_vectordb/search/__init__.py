"""Similarity search over a vector store.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Local imports (core first, then alphabetical)
from .similarity import QueryResult, ScoredIndex, compare_scores, normalize, query

__all__ = ("QueryResult", "ScoredIndex", "compare_scores", "normalize", "query")
