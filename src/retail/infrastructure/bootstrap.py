"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from retail.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

DATA_DIR_ENV = "RETAIL_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: str | Path | None = None) -> Path:
    """Pick the store directory: explicit override, then env var, then default."""
    if override:
        return Path(override)
    from_env = os.environ.get(DATA_DIR_ENV)
    if from_env:
        return Path(from_env)
    return _DEFAULT_DATA_DIR


def unit_of_work(override: str | Path | None = None) -> JsonUnitOfWork:
    return JsonUnitOfWork(data_dir(override))
