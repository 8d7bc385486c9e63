"""Runtime settings for nano-vectordb.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from pathlib import Path

# Third-party (alphabetical)
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from .constants import DEFAULT_EMBEDDING_DIM, DEFAULT_STORAGE_FILE, DEFAULT_TOP_K

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("NanoVectorDBSettings", "load_settings")


# =============================================================================
# Section 11: Classes
# =============================================================================
class NanoVectorDBSettings(BaseSettings):
    """Storage and search defaults, overridable via ``NANO_VECTORDB_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="NANO_VECTORDB_",
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )

    storage_file: Path = Field(default=Path(DEFAULT_STORAGE_FILE))
    embedding_dim: int = Field(default=DEFAULT_EMBEDDING_DIM, gt=0)
    default_top_k: int = Field(default=DEFAULT_TOP_K, gt=0)


# =============================================================================
# Section 12: Functions
# =============================================================================
def load_settings() -> NanoVectorDBSettings:
    """Load settings from environment."""
    return NanoVectorDBSettings()
