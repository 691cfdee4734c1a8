"""Build configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Inputs
    src_dir: Path = Path("src/svg")
    ontology_path: Path = Path("src/icons.json")
    demo_src_dir: Path = Path("demo/src")

    # Outputs
    dist_dir: Path = Path("dist")

    log_level: str = "info"

    # Watch mode
    watch_debounce_ms: int = 200

    # Demo page chrome
    site_title: str = "Roc"
    site_url: str = "https://haplab.com/roc/"
    repo_url: str = "https://github.com/marcus/roc"

    model_config = {"env_prefix": "ROC_", "env_file": ".env", "env_file_encoding": "utf-8"}
