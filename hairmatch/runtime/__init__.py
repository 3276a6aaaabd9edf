# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Hairmatch.

Turns ranked matches into the payloads the service layer returns:

1. Recommendations -- Full ranked list with scores
2. Top Matches -- Short card list for UIs
3. JSON -- Complete response body

The delivery layer never modifies ranking content.
"""

from hairmatch.runtime.serializers import (
    SerializerFormat,
    to_json,
    to_recommendations,
    to_top_matches,
)

__all__ = [
    "to_recommendations",
    "to_top_matches",
    "to_json",
    "SerializerFormat",
]
