"""Ontology model — descriptive metadata per icon name."""

from __future__ import annotations

from pydantic import BaseModel, Field

UNCATEGORIZED = "Uncategorized"


def default_label(name: str) -> str:
    """Icon name with its first character upper-cased."""
    return name[:1].upper() + name[1:]


class OntologyEntry(BaseModel):
    label: str | None = None
    description: str | None = None
    category: str | None = None
    tags: list[str] | None = None


class IconDescription(BaseModel):
    """Fully resolved display metadata for one icon name."""

    label: str
    description: str = ""
    category: str = UNCATEGORIZED
    tags: list[str] = Field(default_factory=list)


class Ontology(BaseModel):
    categories: list[str] = Field(default_factory=list)
    icons: dict[str, OntologyEntry] = Field(default_factory=dict)

    def describe(self, name: str) -> IconDescription:
        """Resolve metadata for ``name``; each missing field falls back on its own."""
        entry = self.icons.get(name) or OntologyEntry()
        return IconDescription(
            label=entry.label or default_label(name),
            description=entry.description or "",
            category=entry.category or UNCATEGORIZED,
            tags=list(entry.tags or []),
        )

    def unknown_categories(self) -> list[tuple[str, str]]:
        """(icon name, category) pairs whose category is not declared."""
        valid = set(self.categories)
        return [
            (name, entry.category)
            for name, entry in self.icons.items()
            if entry.category and entry.category not in valid
        ]
