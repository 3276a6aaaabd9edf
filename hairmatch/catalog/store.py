# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""
Holder for the process-wide catalog.

Reloading builds a complete new :class:`CatalogIndex` first and then swaps
the reference in a single assignment. A ranking call that already grabbed
``store.index`` keeps working on the old index until it returns.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from hairmatch.catalog.index import CatalogIndex


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = "catalog.json"


class CatalogStore:
    """Current catalog plus the source it is reloaded from."""

    def __init__(
        self,
        index: Optional[CatalogIndex] = None,
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._index = index if index is not None else CatalogIndex()

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> CatalogStore:
        return cls(CatalogIndex.from_path(path), path=path)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CatalogStore:
        """Load from ``HAIRMATCH_CATALOG`` (default ``catalog.json``)."""
        env = os.environ if environ is None else environ
        return cls.from_path(env.get("HAIRMATCH_CATALOG") or DEFAULT_CATALOG_PATH)

    @property
    def index(self) -> CatalogIndex:
        return self._index

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def replace(self, index: CatalogIndex) -> CatalogIndex:
        """Swap in a prebuilt index. Returns the previous one."""
        previous, self._index = self._index, index
        logger.info(
            "Catalog replaced: %d -> %d entries", len(previous), len(index)
        )
        return previous

    def reload(self, raw: Any = None) -> CatalogIndex:
        """
        Rebuild the index and swap it in.

        Args:
            raw: Raw catalog structure. If omitted, the store's file path
                is read again.

        Returns:
            The new index.
        """
        if raw is not None:
            index = CatalogIndex.from_raw(raw)
        elif self._path is not None:
            index = CatalogIndex.from_path(self._path)
        else:
            raise ValueError("No catalog source: pass raw data or create the store from a path")
        self.replace(index)
        return index
