# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Hairmatch -- Perceptual hair color matching against a product catalog.

Converts an estimated hair color to CIE L*a*b*, scores every catalog
product by ΔE76, and returns the closest products with a bounded
confidence percentage.

Quick start::

    from hairmatch import CatalogIndex, rank

    index = CatalogIndex.from_path("catalog.json")
    for m in rank("#3B2A20", index, top_n=5):
        print(m.sku, m.delta_e, m.match_percent)
"""

from __future__ import annotations

__version__ = "1.0.0"

from hairmatch.catalog import CatalogIndex, CatalogStore, normalize_catalog
from hairmatch.color import delta_e_76, hex_to_lab
from hairmatch.match import MatchConfig, rank, recommend
from hairmatch.schema import (
    CatalogEntry,
    HairEstimate,
    Lab,
    MatchResult,
    Recommendation,
)

__all__ = [
    # Core API
    "rank",
    "recommend",
    "hex_to_lab",
    "delta_e_76",
    "normalize_catalog",
    "CatalogIndex",
    "CatalogStore",
    "MatchConfig",
    # Types (commonly needed)
    "Lab",
    "CatalogEntry",
    "MatchResult",
    "HairEstimate",
    "Recommendation",
    # Version
    "__version__",
]
