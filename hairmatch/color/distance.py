# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
ΔE distance (CIE 1976).

Plain Euclidean distance in L*a*b*. It is a true metric: symmetric,
zero only for identical colors, and satisfies the triangle inequality.

Rough reading of ΔE76 values:
- ΔE < 1: not perceptible
- ΔE ≈ 2-3: perceptible at a glance
- ΔE > 10: clearly different colors
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def delta_e_76(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """
    Calculate ΔE76 between two Lab colors.

    Args:
        lab1: First color as (L, a, b); a Lab instance works too
        lab2: Second color as (L, a, b)

    Returns:
        ΔE value (lower = more similar)
    """
    dL = lab1[0] - lab2[0]
    da = lab1[1] - lab2[1]
    db = lab1[2] - lab2[2]
    return float(np.sqrt(dL * dL + da * da + db * db))


def delta_e_76_batch(
    target: Sequence[float],
    labs: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized ΔE76 from one color to many.

    Args:
        target: Reference color as (L, a, b)
        labs: Array of shape (N, 3) with Lab values

    Returns:
        Array of shape (N,) with ΔE values
    """
    labs = np.asarray(labs, dtype=np.float64).reshape(-1, 3)
    delta = labs - np.asarray(target, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))
