# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Catalog ranking by perceptual distance.

For a target hex color, every matchable catalog entry gets a ΔE76 score
and a bounded ``match_percent``; results are sorted closest first and cut
to the top N.

Ranking is total over request data: an unparseable target or a catalog
with no usable colors both give an empty list, never an exception.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

import numpy as np

from hairmatch.catalog import CatalogIndex
from hairmatch.color.colorspace import hex_to_lab
from hairmatch.color.distance import delta_e_76_batch
from hairmatch.schema import PERCENT_CEILING, PERCENT_FLOOR, CatalogEntry, Lab, MatchResult


logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5

# Checked in order
TOP_N_ENV_VARS = ("HAIRMATCH_TOP_N", "TOP_N")


@dataclass(frozen=True)
class MatchConfig:
    """Configuration for catalog ranking."""

    # Maximum results per ranking call
    top_n: int = DEFAULT_TOP_N

    # match_percent clamp. 1 ΔE point ≈ 1 percent point in between:
    # ΔE 0 → 99, ΔE 20 → 80, ΔE 40 → 60, ΔE ≥ 65 → 35
    percent_floor: int = PERCENT_FLOOR
    percent_ceiling: int = PERCENT_CEILING

    def __post_init__(self) -> None:
        _check_top_n(self.top_n)
        if not PERCENT_FLOOR <= self.percent_floor <= self.percent_ceiling <= PERCENT_CEILING:
            raise ValueError(
                f"Percent bounds must satisfy {PERCENT_FLOOR} <= floor <= ceiling "
                f"<= {PERCENT_CEILING}, got {self.percent_floor}-{self.percent_ceiling}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> MatchConfig:
        """
        Build from environment variables.

        ``HAIRMATCH_TOP_N`` wins over the legacy ``TOP_N``; unset or blank
        falls back to the default.
        """
        env = os.environ if environ is None else environ
        for name in TOP_N_ENV_VARS:
            value = (env.get(name) or "").strip()
            if value:
                try:
                    return cls(top_n=int(value))
                except ValueError:
                    raise ValueError(f"{name} must be a positive integer, got {value!r}") from None
        return cls()


def _check_top_n(top_n: int) -> None:
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0:
        raise ValueError(f"top_n must be a positive integer, got {top_n!r}")


def delta_e_to_percent(
    delta_e: float,
    floor: int = PERCENT_FLOOR,
    ceiling: int = PERCENT_CEILING,
) -> int:
    """
    Map ΔE to a display confidence.

    ``round(100 - ΔE)`` (halves round up), clamped to [floor, ceiling].
    ΔE 0 would give 100 and is clamped to 99; an exact match is never
    shown as 100%. A non-finite ΔE maps to the floor.
    """
    if not math.isfinite(delta_e):
        return floor
    percent = math.floor(100.0 - delta_e + 0.5)
    return max(floor, min(ceiling, percent))


def rank(
    target_hex: object,
    catalog: Union[CatalogIndex, Iterable[CatalogEntry]],
    top_n: Optional[int] = None,
    *,
    product_type: Optional[str] = None,
    config: Optional[MatchConfig] = None,
) -> list[MatchResult]:
    """
    Rank catalog entries by closeness to a target color.

    Args:
        target_hex: Target color as ``#RRGGBB`` / ``#RGB``
        catalog: A CatalogIndex, or any iterable of CatalogEntry
        top_n: Maximum number of results (positive); defaults to
            ``config.top_n``
        product_type: If given, only entries with this product type
            (case-insensitive) are ranked
        config: Ranking configuration (defaults to MatchConfig())

    Returns:
        Up to ``top_n`` matches, ascending by ``delta_e``. Entries with equal
        ``delta_e`` keep their catalog order. Empty if the target does not
        parse or no entry has a usable color.

    Raises:
        ValueError: If ``top_n`` is not a positive integer.

    Example:
        >>> index = CatalogIndex.from_raw([{"sku": "A", "hex": "#000000"}])
        >>> rank("#101010", index, 1)[0].sku
        'A'
    """
    cfg = config or MatchConfig()
    if top_n is None:
        top_n = cfg.top_n
    _check_top_n(top_n)

    target = hex_to_lab(target_hex)
    if target is None:
        return []
    return rank_lab(target, catalog, top_n, product_type=product_type, config=cfg)


def rank_lab(
    target: Lab,
    catalog: Union[CatalogIndex, Iterable[CatalogEntry]],
    top_n: int,
    *,
    product_type: Optional[str] = None,
    config: Optional[MatchConfig] = None,
) -> list[MatchResult]:
    """
    Rank catalog entries against an already converted target color.

    Same ordering and scoring as :func:`rank`. Entries whose distance
    overflows (huge precomputed lab components) are dropped like
    unresolvable ones.
    """
    _check_top_n(top_n)
    cfg = config or MatchConfig()

    index = catalog if isinstance(catalog, CatalogIndex) else CatalogIndex(tuple(catalog))
    entries = index.matchable
    labs = index.labs

    if product_type is not None:
        wanted = product_type.strip().lower()
        mask = np.array(
            [e.product_type.strip().lower() == wanted for e in entries], dtype=bool
        )
        entries = tuple(e for e, keep in zip(entries, mask) if keep)
        labs = labs[mask]

    if not entries:
        return []

    with np.errstate(over="ignore", invalid="ignore"):
        distances = delta_e_76_batch(target, labs)
    finite = np.isfinite(distances)

    scored = []
    for entry, de, ok in zip(entries, distances, finite):
        if not ok:
            logger.debug("Catalog entry %s: distance overflows, skipping", entry.sku)
            continue
        de = float(de)
        scored.append(
            MatchResult(
                sku=entry.sku,
                name=entry.name,
                url=entry.url,
                delta_e=round(de, 2),
                match_percent=delta_e_to_percent(de, cfg.percent_floor, cfg.percent_ceiling),
            )
        )

    # sorted() is stable: ties keep catalog order
    scored = sorted(scored, key=lambda m: m.delta_e)
    return scored[:top_n]
