# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Schema definitions for catalog matching.

All types in this module are immutable (frozen dataclasses).
A catalog is loaded once and only read afterwards; match results are
created fresh for every ranking call.
"""

from hairmatch.schema.catalog import (
    PERCENT_CEILING,
    PERCENT_FLOOR,
    CatalogEntry,
    HairEstimate,
    Lab,
    MatchResult,
    Recommendation,
)

__all__ = [
    # Bounds
    "PERCENT_FLOOR",
    "PERCENT_CEILING",
    # Core types
    "Lab",
    "CatalogEntry",
    # Ranking output
    "MatchResult",
    # Estimator input / pipeline output
    "HairEstimate",
    "Recommendation",
]
