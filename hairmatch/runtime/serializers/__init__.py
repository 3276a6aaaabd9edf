# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Serializers for match results.

Each serializer formats ranked matches for the surrounding service layer.
All serializers preserve values exactly -- ordering and scores are never
changed.
"""

from hairmatch.runtime.serializers.results import (
    SerializerFormat,
    to_json,
    to_recommendations,
    to_top_matches,
)

__all__ = [
    "SerializerFormat",
    "to_recommendations",
    "to_top_matches",
    "to_json",
]
