"""Type aliases for nano-vectordb.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

# Third-party (alphabetical)
import numpy as np
import numpy.typing as npt
from typing_extensions import TypeAliasType

if TYPE_CHECKING:
    from ..storage.store import Entry

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "VectorId",
    "Score",
    "Fields",
    "FloatArray",
    "VectorLike",
    "DataFilter",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
VectorId = TypeAliasType("VectorId", str)
Score = TypeAliasType("Score", float)

Fields = TypeAliasType("Fields", dict[str, Any])
FloatArray = TypeAliasType("FloatArray", npt.NDArray[np.float32])
VectorLike = TypeAliasType("VectorLike", Sequence[float] | npt.NDArray[np.floating[Any]])
DataFilter = TypeAliasType("DataFilter", Callable[["Entry"], bool])
