# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Catalog normalization and indexing.

Product feeds arrive in many shapes: a bare list of records, or a list
wrapped under ``products`` or ``items``; field names vary between
exports (``sku``/``SKU``/``id``, ``hex``/``color_hex``, ...). This module
turns any of those into an ordered tuple of :class:`CatalogEntry`.

Normalization never fails. An unrecognized root becomes an empty catalog,
a bad ``lab`` value becomes None, and an entry with no usable color is
kept but skipped at ranking time.

Entry order follows the source. Ranking uses it to break ties.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from hairmatch.schema import CatalogEntry, Lab


logger = logging.getLogger(__name__)


# =============================================================================
# Field Resolution Table
# =============================================================================

# Alternative spellings per field, highest priority first
FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "sku": ("sku", "SKU", "id", "ID"),
    "name": ("name", "title", "product_name", "ProductName"),
    "url": ("url", "link", "product_url", "ProductURL"),
    "lab": ("lab", "Lab", "LAB"),
    "hex": ("hex", "Hex", "color_hex", "ColorHex"),
    "product_type": ("type", "product_type", "category"),
}

# Component spellings inside an object-shaped lab value
LAB_COMPONENT_KEYS: tuple[tuple[str, ...], ...] = (
    ("L", "l"),
    ("a", "A"),
    ("b", "B"),
)

# Keys that may wrap the record list, checked in order
ROOT_KEYS = ("products", "items")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return len(value) == 0
    return False


def resolve_field(record: Mapping[str, Any], field_name: str) -> Any:
    """
    Return the first present, non-empty value among a field's spellings.

    Returns:
        The raw value, or None if no spelling carries one.
    """
    for key in FIELD_KEYS[field_name]:
        value = record.get(key)
        if not _is_empty(value):
            return value
    return None


def _as_number(value: Any) -> Optional[float]:
    """Real, finite, non-bool number as float; None otherwise."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def parse_lab(value: Any) -> Optional[Lab]:
    """
    Parse a supplied Lab value.

    Accepts a 3-element list/tuple of numbers, or a mapping with
    ``L``/``l``, ``a``/``A`` and ``b``/``B``. All three components must be
    numbers; anything else yields None.
    """
    if isinstance(value, Mapping):
        components = []
        for spellings in LAB_COMPONENT_KEYS:
            component = None
            for key in spellings:
                if value.get(key) is not None:
                    component = value[key]
                    break
            components.append(component)
    elif isinstance(value, (list, tuple)):
        if len(value) != 3:
            return None
        components = list(value)
    else:
        return None

    numbers = [_as_number(c) for c in components]
    if any(n is None for n in numbers):
        return None
    return Lab(*numbers)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


# =============================================================================
# Normalization
# =============================================================================


def _records(raw: Any) -> Optional[Sequence[Any]]:
    """Locate the record list inside a raw catalog root."""
    if isinstance(raw, (list, tuple)):
        return raw
    if isinstance(raw, Mapping):
        for key in ROOT_KEYS:
            value = raw.get(key)
            if isinstance(value, (list, tuple)):
                return value
    return None


def normalize_record(record: Mapping[str, Any], index: int) -> CatalogEntry:
    """
    Normalize one raw record.

    Args:
        record: Source mapping with any of the spellings in FIELD_KEYS
        index: Position in the source, used for the synthetic sku

    Returns:
        CatalogEntry (possibly unmatchable)
    """
    sku = _as_text(resolve_field(record, "sku")) or f"item_{index}"
    name = _as_text(resolve_field(record, "name")) or sku
    url = _as_text(resolve_field(record, "url")) or ""

    raw_lab = resolve_field(record, "lab")
    lab = parse_lab(raw_lab) if raw_lab is not None else None
    if raw_lab is not None and lab is None:
        logger.debug("Catalog entry %s: ignoring malformed lab %r", sku, raw_lab)

    hex_value = resolve_field(record, "hex")
    product_type = _as_text(resolve_field(record, "product_type")) or ""

    return CatalogEntry(
        sku=sku,
        name=name,
        url=url,
        lab=lab,
        hex=hex_value if isinstance(hex_value, str) else None,
        product_type=product_type,
        raw=record,
    )


def normalize_catalog(raw: Any) -> tuple[CatalogEntry, ...]:
    """
    Normalize a raw catalog structure into an ordered tuple of entries.

    Args:
        raw: A list of records, or a mapping with the list under
            ``products`` or ``items``. Any other shape is treated as empty.

    Returns:
        Entries in source order. Non-mapping records are dropped, but
        their position still counts toward synthetic ``item_<index>`` ids.
    """
    records = _records(raw)
    if records is None:
        if raw is not None:
            logger.warning(
                "Unrecognized catalog root of type %s; using empty catalog",
                type(raw).__name__,
            )
        return ()

    entries = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            logger.debug("Skipping non-mapping catalog record at %d", index)
            continue
        entries.append(normalize_record(record, index))
    return tuple(entries)


# =============================================================================
# Index
# =============================================================================


@dataclass(frozen=True)
class CatalogIndex:
    """
    Read-only, ranking-ready view of a catalog.

    Built once; colors are resolved at construction so every ranking call
    is a single vectorized ΔE pass. Safe to share between threads.

    Attributes:
        entries: All normalized entries, in source order
        matchable: Entries with a resolvable color, in source order
        labs: Array of shape (len(matchable), 3) aligned with ``matchable``
    """
    entries: tuple[CatalogEntry, ...] = ()
    matchable: tuple[CatalogEntry, ...] = field(init=False, repr=False)
    labs: NDArray[np.float64] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        labs = _resolve_labs(self.entries)
        mask = ~np.isnan(labs).any(axis=1)

        skipped = len(self.entries) - int(mask.sum())
        if skipped:
            logger.debug("%d catalog entries have no usable color", skipped)

        labs = labs[mask]
        labs.setflags(write=False)
        object.__setattr__(
            self, "matchable",
            tuple(e for e, ok in zip(self.entries, mask) if ok),
        )
        object.__setattr__(self, "labs", labs)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    @classmethod
    def from_raw(cls, raw: Any) -> CatalogIndex:
        """Normalize a raw catalog structure and index it."""
        return cls(normalize_catalog(raw))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> CatalogIndex:
        """
        Load a JSON catalog file.

        A missing or unparseable file gives an empty index (logged), so a
        service can still start and answer with empty match lists.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError:
            logger.warning("Catalog file %s not found; using empty catalog", path)
            return cls()
        except (OSError, ValueError) as exc:
            logger.warning("Could not read catalog %s: %s", path, exc)
            return cls()

        index = cls.from_raw(raw)
        logger.info(
            "Loaded catalog %s: %d entries, %d matchable",
            path, len(index), len(index.matchable),
        )
        return index


def _resolve_labs(entries: Sequence[CatalogEntry]) -> NDArray[np.float64]:
    """
    Resolve every entry's color into one (N, 3) array.

    Each entry goes through :meth:`CatalogEntry.resolve_lab`, the same
    scalar path used for target colors. Unresolvable rows are NaN.
    """
    labs = np.full((len(entries), 3), np.nan, dtype=np.float64)
    for i, entry in enumerate(entries):
        lab = entry.resolve_lab()
        if lab is not None:
            labs[i] = lab.as_tuple()
    return labs
