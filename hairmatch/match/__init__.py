# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Matching core for Hairmatch.

Ranks catalog entries by ΔE76 distance to a target hair color.
"""

from hairmatch.match.ranker import MatchConfig, delta_e_to_percent, rank, rank_lab
from hairmatch.match.recommend import recommend

__all__ = ["rank", "rank_lab", "recommend", "delta_e_to_percent", "MatchConfig"]
