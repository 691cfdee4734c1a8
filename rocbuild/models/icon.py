"""Icon records and the manifest shared by every output stage."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from rocbuild.exceptions import DuplicateIconError


class IconSource(BaseModel):
    """One SVG file as authored, before optimization."""

    model_config = ConfigDict(frozen=True)

    style: str
    name: str
    raw: str
    path: Path | None = None


class IconVariant(BaseModel):
    """One (style, name) icon after optimization."""

    model_config = ConfigDict(frozen=True)

    style: str
    name: str
    raw: str = ""
    optimized: str
    # Optimized document without the outer <svg> wrapper
    inner: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.style, self.name)


class Manifest:
    """Ordered collection of IconVariant, unique by (style, name)."""

    def __init__(self, variants: Iterable[IconVariant] = ()) -> None:
        self._variants: list[IconVariant] = []
        self._keys: set[tuple[str, str]] = set()
        for variant in variants:
            self.add(variant)

    def add(self, variant: IconVariant) -> None:
        if variant.key in self:
            raise DuplicateIconError(variant.style, variant.name)
        self._keys.add(variant.key)
        self._variants.append(variant)

    def __iter__(self) -> Iterator[IconVariant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def styles_by_name(self) -> dict[str, list[str]]:
        """Icon name → styles it exists in, in manifest order."""
        grouped: dict[str, list[str]] = {}
        for variant in self._variants:
            grouped.setdefault(variant.name, []).append(variant.style)
        return grouped

    def names(self) -> list[str]:
        """Unique icon names, sorted."""
        return sorted({variant.name for variant in self._variants})
