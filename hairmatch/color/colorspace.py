# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: hex → sRGB → Linear RGB → CIE XYZ (D65) → CIE L*a*b*

The constants below are fixed. Catalog entries that ship a precomputed Lab
value must compare consistently with entries converted from hex, so every
hex color goes through exactly this path.

All conversions are pure NumPy for determinism.
"""

from __future__ import annotations

import re
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from hairmatch.schema import Lab


_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


# =============================================================================
# Hex → sRGB
# =============================================================================


def normalize_hex(hex_color: object) -> Optional[str]:
    """
    Normalize a hex color token to six lowercase hex digits.

    Accepts ``#RGB`` / ``#RRGGBB`` with or without the ``#``, any case,
    surrounding whitespace ignored. Short form is expanded by duplicating
    each digit (``abc`` → ``aabbcc``).

    Returns:
        Six hex digits, or None if the token is not a valid color.
    """
    if not isinstance(hex_color, str):
        return None

    h = hex_color.strip()
    if h.startswith("#"):
        h = h[1:]
    if len(h) == 3:
        h = "".join(c + c for c in h)
    if not _HEX_RE.fullmatch(h):
        return None
    return h.lower()


def hex_to_rgb(hex_color: object) -> Optional[tuple[int, int, int]]:
    """Parse a hex color into an ``(r, g, b)`` tuple of ints in [0, 255]."""
    h = normalize_hex(hex_color)
    if h is None:
        return None
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    - Otherwise: value / 12.92
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb > 0.04045,
        np.power((srgb + 0.055) / 1.055, 2.4),
        srgb / 12.92,
    )
    return linear


# =============================================================================
# Linear RGB → XYZ → L*a*b*
# =============================================================================

# Linear sRGB to XYZ (D65), rows are X, Y, Z
_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

# D65 reference white, 0-100 scale
D65_WHITE = np.array([95.047, 100.0, 108.883], dtype=np.float64)

_EPSILON = 0.008856
_KAPPA_SLOPE = 7.787
_OFFSET = 16.0 / 116.0


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ scaled to 0-100.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y = 100 for white)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ) * 100.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """CIE nonlinearity: cube root above the epsilon, linear segment below."""
    return np.where(t > _EPSILON, np.cbrt(t), _KAPPA_SLOPE * t + _OFFSET)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ (0-100) to CIE L*a*b* relative to D65.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with Lab values (L, a, b)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / D65_WHITE)

    fx = f[..., 0]
    fy = f[..., 1]
    fz = f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: full chain
# =============================================================================


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB values [0,255] to L*a*b*.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with Lab values
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def hex_to_lab(hex_color: object) -> Optional[Lab]:
    """
    Convert a hex color string to CIE L*a*b*.

    Args:
        hex_color: Hex string like "#3941C8", "3941c8" or "#abc"

    Returns:
        Lab value, or None if the input is not a valid hex color
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None

    lab = srgb_uint8_to_lab(np.array(rgb, dtype=np.float64))
    return Lab(float(lab[0]), float(lab[1]), float(lab[2]))

