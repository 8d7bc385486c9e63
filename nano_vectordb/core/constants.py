"""Module-level constants for nano-vectordb.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # Record field names
    'F_ID',
    'F_METRICS',
    # Similarity
    'METRIC_COSINE',
    # Persistence
    'MATRIX_DTYPE',
    'FLOAT_BYTES',
    'DEFAULT_STORAGE_FILE',
    # Defaults
    'DEFAULT_EMBEDDING_DIM',
    'DEFAULT_TOP_K',
]

# =============================================================================
# Section 2: Record Field Names
# =============================================================================
F_ID: Final[str] = '__id__'
F_METRICS: Final[str] = '__metrics__'

# =============================================================================
# Section 3: Similarity Constants
# =============================================================================
METRIC_COSINE: Final[str] = 'cosine'

# =============================================================================
# Section 4: Persistence Constants
# =============================================================================
MATRIX_DTYPE: Final[str] = '<f4'  # little-endian float32
FLOAT_BYTES: Final[int] = 4
DEFAULT_STORAGE_FILE: Final[str] = 'nano_vectordb.json'

# =============================================================================
# Section 5: Defaults
# =============================================================================
DEFAULT_EMBEDDING_DIM: Final[int] = 512
DEFAULT_TOP_K: Final[int] = 5
