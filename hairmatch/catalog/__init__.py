# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Catalog loading for Hairmatch.

Raw product feeds are normalized once into an immutable index that
ranking calls share read-only.
"""

from hairmatch.catalog.index import (
    FIELD_KEYS,
    CatalogIndex,
    normalize_catalog,
    normalize_record,
    parse_lab,
    resolve_field,
)
from hairmatch.catalog.store import CatalogStore

__all__ = [
    "FIELD_KEYS",
    "normalize_catalog",
    "normalize_record",
    "parse_lab",
    "resolve_field",
    "CatalogIndex",
    "CatalogStore",
]
