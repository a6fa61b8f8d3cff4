"""In-memory asset store."""
from __future__ import annotations

from typing import Iterator, List

from asset_tracker.models import Asset


class AssetStore:
    """Append-only, insertion-ordered collection of assets for one session."""

    def __init__(self) -> None:
        self._assets: List[Asset] = []

    def add(self, asset: Asset) -> None:
        self._assets.append(asset)

    def all(self) -> List[Asset]:
        return list(self._assets)

    def is_empty(self) -> bool:
        return not self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets)
