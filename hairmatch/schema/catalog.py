# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Catalog and match schema.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same catalog + same target → same ranking
- Serializable: JSON-ready dicts for the surrounding service layer

CIE L*a*b* Color Space:
- L (Lightness): 0 = black, 100 = white
- a: green (-) to red (+)
- b: blue (-) to yellow (+)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional


# =============================================================================
# Match Bounds
# =============================================================================

# match_percent is a display heuristic; 100 is never shown
PERCENT_FLOOR = 35
PERCENT_CEILING = 99


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Lab:
    """
    A single color in CIE L*a*b* (D65).

    Behaves like a 3-tuple: ``L, a, b = lab`` and ``lab[0]`` both work.

    Attributes:
        L: Lightness, conventionally 0-100
        a: Green-red axis, bounded in practice by the sRGB gamut
        b: Blue-yellow axis, bounded in practice by the sRGB gamut
    """
    L: float
    a: float
    b: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.L, self.a, self.b))

    def __getitem__(self, index: int) -> float:
        return (self.L, self.a, self.b)[index]

    def __len__(self) -> int:
        return 3

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.L, self.a, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Lab:
        """Deserialize from dictionary."""
        return cls(L=data["L"], a=data["a"], b=data["b"])


# =============================================================================
# Catalog Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """
    One sellable product with an associated color.

    Built by :func:`hairmatch.catalog.normalize_catalog` from a loosely-typed
    source record. An entry whose ``lab`` is missing and whose ``hex`` does
    not parse can never be matched; ranking skips it.

    Attributes:
        sku: Product id. Synthetic ``item_<index>`` when the source has none;
           synthetic ids are positional and may change between reloads.
        name: Display name (defaults to sku)
        url: Product page URL, may be empty
        lab: Precomputed color, if the source supplied a valid one
        hex: Fallback color as a hex string
        product_type: Free-form product category, may be empty
        raw: The source record as loaded
    """
    sku: str
    name: str
    url: str = ""
    lab: Optional[Lab] = None
    hex: Optional[str] = None
    product_type: str = ""
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.sku:
            raise ValueError("sku cannot be empty")

    def resolve_lab(self) -> Optional[Lab]:
        """
        Color used for matching.

        The precomputed ``lab`` wins; otherwise the hex fallback is
        converted. None means the entry is unmatchable.
        """
        if self.lab is not None:
            return self.lab
        if self.hex is None:
            return None
        from hairmatch.color.colorspace import hex_to_lab
        return hex_to_lab(self.hex)

    @property
    def is_matchable(self) -> bool:
        return self.resolve_lab() is not None

    def to_dict(self) -> dict:
        """Serialize to dictionary (without the raw record)."""
        d = {"sku": self.sku, "name": self.name, "url": self.url}
        if self.lab is not None:
            d["lab"] = list(self.lab)
        if self.hex is not None:
            d["hex"] = self.hex
        if self.product_type:
            d["type"] = self.product_type
        return d


# =============================================================================
# Match Output
# =============================================================================


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    One ranked catalog match.

    Attributes:
        sku: Matched product id
        name: Matched product name
        url: Matched product URL
        delta_e: ΔE76 to the target, rounded to 2 decimals
        match_percent: Confidence heuristic, integer in [35, 99]
    """
    sku: str
    name: str
    url: str
    delta_e: float
    match_percent: int

    def __post_init__(self) -> None:
        if not math.isfinite(self.delta_e) or self.delta_e < 0.0:
            raise ValueError(f"deltaE must be finite and >= 0, got {self.delta_e}")
        if not PERCENT_FLOOR <= self.match_percent <= PERCENT_CEILING:
            raise ValueError(
                f"match_percent must be {PERCENT_FLOOR}-{PERCENT_CEILING}, "
                f"got {self.match_percent}"
            )

    def to_dict(self) -> dict:
        """Serialize using the wire key names (``deltaE``)."""
        return {
            "sku": self.sku,
            "name": self.name,
            "url": self.url,
            "deltaE": self.delta_e,
            "match_percent": self.match_percent,
        }

    @classmethod
    def from_dict(cls, data: dict) -> MatchResult:
        """Deserialize from dictionary."""
        return cls(
            sku=data["sku"],
            name=data["name"],
            url=data.get("url", ""),
            delta_e=data["deltaE"],
            match_percent=data["match_percent"],
        )


# =============================================================================
# Estimator Input and Pipeline Output
# =============================================================================


@dataclass(frozen=True, slots=True)
class HairEstimate:
    """
    Hair color estimate produced by the upstream image analysis step.

    Attributes:
        tone: Coarse tone label (e.g. "dark_brown"), or None
        hair_hex: Dominant hair color as hex, or None
    """
    tone: Optional[str] = None
    hair_hex: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> HairEstimate:
        """
        Build from the estimator's JSON object.

        Accepts ``hair_hex`` or ``hairHex``. Anything that is not a mapping
        yields an empty estimate.
        """
        if not isinstance(data, Mapping):
            return cls()
        tone = data.get("tone") or None
        hair_hex = data.get("hair_hex") or data.get("hairHex") or None
        return cls(
            tone=tone if isinstance(tone, str) else None,
            hair_hex=hair_hex if isinstance(hair_hex, str) else None,
        )

    def to_dict(self) -> dict:
        return {"tone": self.tone, "hair_hex": self.hair_hex}


@dataclass(frozen=True, slots=True)
class Recommendation:
    """
    Ranked matches for one estimate.

    ``target_resolved`` is False when ``hair_hex`` was missing or not a valid
    color. An empty ``matches`` with ``target_resolved`` True means the color
    was understood but no catalog entry could be compared against it.
    """
    tone: Optional[str]
    hair_hex: Optional[str]
    matches: tuple[MatchResult, ...]
    target_resolved: bool

    @property
    def has_matches(self) -> bool:
        return len(self.matches) > 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "tone": self.tone,
            "hair_hex": self.hair_hex,
            "target_resolved": self.target_resolved,
            "recommendations": [m.to_dict() for m in self.matches],
        }
