# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Estimate-to-recommendation pipeline.

Takes the upstream estimator's ``{tone, hair_hex}`` output and ranks the
catalog against it. The result records whether the hair color itself was
understood, which :func:`rank` alone cannot tell apart from an empty catalog.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from hairmatch.catalog import CatalogIndex
from hairmatch.color.colorspace import hex_to_lab
from hairmatch.match.ranker import MatchConfig, rank_lab
from hairmatch.schema import CatalogEntry, HairEstimate, Recommendation


def recommend(
    estimate: Union[HairEstimate, dict, Any],
    catalog: Union[CatalogIndex, Iterable[CatalogEntry]],
    config: Optional[MatchConfig] = None,
    *,
    product_type: Optional[str] = None,
) -> Recommendation:
    """
    Rank the catalog against an estimated hair color.

    Args:
        estimate: HairEstimate, or the estimator's raw JSON object
        catalog: A CatalogIndex, or any iterable of CatalogEntry
        config: Ranking configuration (defaults to MatchConfig())
        product_type: Optional product type filter, see :func:`rank`

    Returns:
        Recommendation with the ranked matches. ``target_resolved`` is
        False when the estimate had no usable hair color.
    """
    if not isinstance(estimate, HairEstimate):
        estimate = HairEstimate.from_dict(estimate)
    cfg = config or MatchConfig()

    target = hex_to_lab(estimate.hair_hex)
    if target is not None:
        matches = rank_lab(target, catalog, cfg.top_n, config=cfg, product_type=product_type)
    else:
        matches = []

    return Recommendation(
        tone=estimate.tone,
        hair_hex=estimate.hair_hex,
        matches=tuple(matches),
        target_resolved=target is not None,
    )
