# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Response serializers for ranked matches.

Formats match results the way the service layer hands them to clients:
a full ``recommendations`` list, a short ``top_matches`` card list for
UIs, and a complete JSON body combining both with the estimate.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Sequence

from hairmatch.schema import MatchResult, Recommendation


DEFAULT_CARD_LIMIT = 3


class SerializerFormat(Enum):
    """Layout of the JSON body produced by :func:`to_json`."""

    # Single line, no spaces after separators
    JSON = "json"
    # Two-space indent, for logs and debugging
    JSON_PRETTY = "json_pretty"


def to_recommendations(matches: Sequence[MatchResult]) -> list[dict]:
    """
    Full ranked list as plain dicts.

    Example::

        [
          {"sku": "IB-1B", "name": "Natural Black", "url": "https://...",
           "deltaE": 4.12, "match_percent": 96}
        ]
    """
    return [m.to_dict() for m in matches]


def to_top_matches(
    matches: Sequence[MatchResult],
    *,
    limit: int = DEFAULT_CARD_LIMIT,
) -> list[dict]:
    """
    UI cards for the closest matches.

    Args:
        matches: Ranked matches, closest first.
        limit: Maximum number of cards.

    Returns:
        Cards with ``rank`` (1-based), ``title``, ``match``, ``url``, ``sku``.
    """
    return [
        {
            "rank": i + 1,
            "title": m.name,
            "match": m.match_percent,
            "url": m.url,
            "sku": m.sku,
        }
        for i, m in enumerate(matches[:limit])
    ]


def to_json(
    recommendation: Recommendation,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    card_limit: int = DEFAULT_CARD_LIMIT,
) -> str:
    """Serialize a Recommendation as a response body.

    Args:
        recommendation: The pipeline output to serialize.
        format: Output format (JSON or JSON_PRETTY).
        card_limit: Number of ``top_matches`` cards.

    Returns:
        JSON string.

    Example::

        {
          "tone": "dark_brown",
          "hair_hex": "#3B2A20",
          "target_resolved": true,
          "top_matches": [
            { "rank": 1, "title": "Dark Chocolate", "match": 97, "url": "...", "sku": "IB-4" }
          ],
          "recommendations": [
            { "sku": "IB-4", "name": "Dark Chocolate", "url": "...", "deltaE": 2.61, "match_percent": 97 }
          ]
        }
    """
    matches = list(recommendation.matches)
    data = {
        "tone": recommendation.tone,
        "hair_hex": recommendation.hair_hex,
        "target_resolved": recommendation.target_resolved,
        "top_matches": to_top_matches(matches, limit=card_limit),
        "recommendations": to_recommendations(matches),
    }

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2, ensure_ascii=False)
    else:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
