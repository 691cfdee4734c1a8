"""Output file helpers."""

from __future__ import annotations

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_text(path: Path, content: str) -> Path:
    """Write UTF-8 text, creating parent directories. I/O errors propagate."""
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    return path
