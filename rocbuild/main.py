"""Command-line entry point: ``roc-build [--svg] [--react] [--svelte] [--sprite] [--demo] [--watch]``.

No stage flag runs every stage.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from rocbuild.config import Settings
from rocbuild.engine.context import BuildContext
from rocbuild.engine.pipeline import Pipeline, create_pipeline
from rocbuild.engine.registry import get_registry
from rocbuild.exceptions import RocBuildError

logger = logging.getLogger(__name__)

# CLI flag → stage id
STAGE_FLAGS = {
    "svg": "svg",
    "react": "react",
    "svelte": "svelte",
    "sprite": "sprite",
    "demo": "demo",
}

CODEGEN_DIRS = ("react", "svelte")


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("rocbuild.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"rocbuild.stages.{module_name}")
    logger.debug("Registered %d stages", get_registry().count)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roc-build",
        description="Build optimized SVGs, React/Svelte components, sprite, metadata and demo page",
    )
    parser.add_argument("--svg", action="store_true", help="Optimize SVGs only")
    parser.add_argument("--react", action="store_true", help="Generate React components")
    parser.add_argument("--svelte", action="store_true", help="Generate Svelte components")
    parser.add_argument("--sprite", action="store_true", help="Generate the SVG sprite")
    parser.add_argument("--demo", action="store_true", help="Generate the demo page")
    parser.add_argument("--watch", action="store_true", help="Rebuild on source changes")
    parser.add_argument(
        "--check-types",
        action="store_true",
        help="Verify barrels and declaration files agree after building",
    )
    return parser


def selected_stages(args: argparse.Namespace) -> set[str] | None:
    """Stage ids chosen by flags; None means every stage."""
    chosen = {stage_id for flag, stage_id in STAGE_FLAGS.items() if getattr(args, flag)}
    return chosen or None


def check_types(settings: Settings) -> list[str]:
    from rocbuild.codegen.verify import check_declarations

    problems: list[str] = []
    for name in CODEGEN_DIRS:
        framework_dir = settings.dist_dir / name
        if framework_dir.exists():
            problems.extend(check_declarations(framework_dir))
    return problems


def run_watch(settings: Settings, pipeline: Pipeline, ctx: BuildContext) -> None:
    from rocbuild.watch.observer import start_observer, watch_forever
    from rocbuild.watch.session import WatchSession

    session = WatchSession(
        make_context=lambda: BuildContext.from_settings(settings),
        pipeline=pipeline,
        delay=settings.watch_debounce_ms / 1000,
    )
    session.remember(ctx)
    observer = start_observer(session, settings.src_dir, settings.ontology_path, settings.demo_src_dir)
    watch_forever(session, observer)


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = settings or Settings()
    configure_logging(settings.log_level)

    register_stages()
    pipeline = create_pipeline()
    ctx = BuildContext.from_settings(settings)

    try:
        pipeline.run(ctx, selected_stages(args))
    except RocBuildError as e:
        logger.error("Build failed: %s", e)
        if not args.watch:
            return 1

    if args.check_types:
        problems = check_types(settings)
        for problem in problems:
            logger.error("✗ %s", problem)
        if problems:
            return 1
        logger.info("✓ declaration files match their barrels")

    if args.watch:
        run_watch(settings, pipeline, ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
