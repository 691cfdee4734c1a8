"""Barrel (index.js) and declaration (index.d.ts) files for a component set."""

from __future__ import annotations

from dataclasses import dataclass, field

from rocbuild.codegen.naming import export_name, to_pascal_case


@dataclass(frozen=True)
class BarrelEntry:
    style: str
    name: str

    @property
    def component(self) -> str:
        return to_pascal_case(self.name)

    @property
    def export(self) -> str:
        return export_name(self.name, self.style)


@dataclass
class ComponentSet:
    """Names generated for one framework, tracked per style and globally."""

    extension: str
    declaration_header: str
    by_style: dict[str, list[BarrelEntry]] = field(default_factory=dict)

    def add(self, style: str, name: str) -> BarrelEntry:
        entry = BarrelEntry(style=style, name=name)
        self.by_style.setdefault(style, []).append(entry)
        return entry

    def style_entries(self, style: str) -> list[BarrelEntry]:
        return sorted(self.by_style.get(style, []), key=lambda e: e.component)

    def root_entries(self) -> list[BarrelEntry]:
        every = [e for entries in self.by_style.values() for e in entries]
        return sorted(every, key=lambda e: e.export)

    def style_barrel(self, style: str) -> str:
        lines = [
            f"export {{ default as {e.component} }} from './{e.component}.{self.extension}';"
            for e in self.style_entries(style)
        ]
        return "\n".join(lines) + "\n"

    def root_barrel(self) -> str:
        lines = [
            f"export {{ default as {e.export} }} from './{e.style}/{e.component}.{self.extension}';"
            for e in self.root_entries()
        ]
        return "\n".join(lines) + "\n"

    def style_declarations(self, style: str) -> str:
        return self._declarations([e.component for e in self.style_entries(style)])

    def root_declarations(self) -> str:
        return self._declarations([e.export for e in self.root_entries()])

    def _declarations(self, names: list[str]) -> str:
        lines = [f"export declare const {n}: Icon;" for n in names]
        return self.declaration_header + "\n".join(lines) + "\n"
