"""Check that generated barrels and their declaration files agree.

Every ``index.js`` under a framework directory (root and one per style) must
have an ``index.d.ts`` beside it that declares the same exports in the same
order.
"""

from __future__ import annotations

import re
from pathlib import Path

_BARREL_EXPORT_RE = re.compile(r"^export \{ default as (\w+) \} from ", re.MULTILINE)
_DECLARED_EXPORT_RE = re.compile(r"^export declare const (\w+):", re.MULTILINE)


def barrel_exports(text: str) -> list[str]:
    return _BARREL_EXPORT_RE.findall(text)


def declared_exports(text: str) -> list[str]:
    return _DECLARED_EXPORT_RE.findall(text)


def compare_exports(barrel: list[str], declared: list[str]) -> list[str]:
    """Problems between one barrel's exports and its declarations; empty when they agree."""
    problems: list[str] = []
    missing = [n for n in barrel if n not in set(declared)]
    extra = [n for n in declared if n not in set(barrel)]
    if missing:
        problems.append(f"not declared: {', '.join(missing)}")
    if extra:
        problems.append(f"declared but not exported: {', '.join(extra)}")
    if not missing and not extra and barrel != declared:
        problems.append("declaration order differs from barrel order")
    return problems


def check_declarations(framework_dir: Path) -> list[str]:
    """Check the root barrel and every per-style barrel under ``framework_dir``."""
    framework_dir = Path(framework_dir)
    if not (framework_dir / "index.js").exists():
        return [f"{framework_dir}: no index.js (was the framework built?)"]

    barrels = [framework_dir / "index.js"]
    barrels += sorted(p / "index.js" for p in framework_dir.iterdir() if (p / "index.js").is_file())

    problems: list[str] = []
    for barrel in barrels:
        declarations = barrel.with_name("index.d.ts")
        if not declarations.exists():
            problems.append(f"{declarations}: missing")
            continue
        for problem in compare_exports(
            barrel_exports(barrel.read_text(encoding="utf-8")),
            declared_exports(declarations.read_text(encoding="utf-8")),
        ):
            problems.append(f"{declarations}: {problem}")
    return problems
