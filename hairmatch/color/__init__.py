# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Color science core: hex → CIE L*a*b* conversion and ΔE76 distance.

Stateless and deterministic. Invalid colors come back as None, never
as exceptions.
"""

from hairmatch.color.colorspace import (
    hex_to_lab,
    hex_to_rgb,
    normalize_hex,
)
from hairmatch.color.distance import delta_e_76, delta_e_76_batch

__all__ = [
    "normalize_hex",
    "hex_to_rgb",
    "hex_to_lab",
    "delta_e_76",
    "delta_e_76_batch",
]
