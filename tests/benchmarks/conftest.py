"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 100-value flat, ~5k-value nested, 2k-level deep chain.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested(sections: int, rows: int, fields: int) -> dict[str, Any]:
    """Generate sections x rows x fields leaves under arrays of records.

    Structure mirrors API payloads: each section holds an array of records,
    each record a flat object plus a small tag array.
    """
    doc: dict[str, Any] = {}
    for i in range(sections):
        doc[f"section_{i}"] = [
            {
                **{f"field_{k}": f"v_{i}_{j}_{k}" for k in range(fields)},
                "tags": [f"t{j}", f"t{j + 1}"],
                "active": j % 2 == 0,
            }
            for j in range(rows)
        ]
    return doc


def _make_deep_chain(depth: int) -> dict[str, Any]:
    """Generate an object chain nested ``depth`` levels deep."""
    doc: dict[str, Any] = {"leaf": True}
    for i in range(depth):
        doc = {f"level_{i}": doc}
    return doc


# --- Fixtures for each size tier ---


@pytest.fixture
def doc_flat_100() -> dict[str, Any]:
    """100-key flat object."""
    return generate_flat_object(100)


@pytest.fixture
def doc_nested_5k() -> dict[str, Any]:
    """10 sections x 50 records x 8 fields (~5.6k nodes)."""
    return _make_nested(10, 50, 8)


@pytest.fixture
def doc_deep_2k() -> dict[str, Any]:
    """Object chain 2000 levels deep (beyond the default recursion limit)."""
    return _make_deep_chain(2000)
