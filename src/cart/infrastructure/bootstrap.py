"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from cart.infrastructure.persistence.json_store import JsonDataStore, JsonUnitOfWork

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "shop.json"


def data_file() -> Path:
    return Path(os.getenv("CART_DATA_FILE", str(_DEFAULT_DATA_FILE)))


@lru_cache(maxsize=None)
def _data_store(path: Path) -> JsonDataStore:
    # One store per file; the lock file next to it also serializes other processes.
    return JsonDataStore(path)


def unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(_data_store(data_file().resolve()))
