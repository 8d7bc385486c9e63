"""Shared test fixtures for nano-vectordb tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import pytest

from nano_vectordb.infra.logging import configure_logging
from nano_vectordb.storage.store import Entry, NanoVectorDB

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ()


@pytest.fixture(scope="session", autouse=True)
def local_logging() -> None:
    """Keep logfire output local and quiet during tests."""
    configure_logging(environment="test", send_to_logfire=False, console=False)


@pytest.fixture
def storage_file(tmp_path: Path) -> Path:
    """Provide a temporary path for the store file."""
    return tmp_path / "vectors.json"


@pytest.fixture
def db(storage_file: Path) -> NanoVectorDB:
    """Provide an empty three-dimensional store."""
    return NanoVectorDB(3, storage_file)


@pytest.fixture
def abc_db(db: NanoVectorDB) -> NanoVectorDB:
    """Store with two axis vectors and one vector close to ``a``."""
    db.upsert(
        [
            Entry(id="a", vector=[1.0, 0.0, 0.0], fields={"color": "red"}),
            Entry(id="b", vector=[0.0, 1.0, 0.0], fields={"color": "green"}),
            Entry(id="c", vector=[0.9, 0.1, 0.0], fields={"color": "dark red"}),
        ]
    )
    return db


@pytest.fixture
def random_vectors() -> Callable[[int, int], list[list[float]]]:
    """Factory for reproducible random embeddings."""

    def factory(count: int, dim: int) -> list[list[float]]:
        rng = np.random.default_rng(seed=count * 1000 + dim)
        return rng.random((count, dim), dtype=np.float32).tolist()

    return factory
