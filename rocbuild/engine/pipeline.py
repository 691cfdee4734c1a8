"""Pipeline orchestrator — runs the selected stages in dependency order."""

from __future__ import annotations

import logging
import time

from rocbuild.engine.context import BuildContext
from rocbuild.engine.registry import COMPANION, StageRegistry, StageSpec, get_registry
from rocbuild.exceptions import StageError

logger = logging.getLogger(__name__)

OPTIMIZE_STAGE = "svg"


class Pipeline:
    """Orchestrates the build stages."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def plan(self, requested: set[str] | None = None) -> list[StageSpec]:
        """Stages to run for a selection; None or empty selects everything.

        Dependencies are pulled in, and companion stages join whenever the
        optimize stage is part of the plan.
        """
        if not requested:
            return self.registry.resolve_order(None)

        ordered = self.registry.resolve_order(set(requested))
        ids = {s.id for s in ordered}
        if OPTIMIZE_STAGE in ids:
            companions = {s.id for s in self.registry.tagged(COMPANION)}
            if companions - ids:
                ordered = self.registry.resolve_order(ids | companions)
        return ordered

    def run(self, ctx: BuildContext, requested: set[str] | None = None) -> BuildContext:
        """Run the planned stages. A fatal I/O error stops the run with StageError."""
        start = time.perf_counter()
        ordered = self.plan(requested)
        logger.debug("Pipeline: %s", ", ".join(s.id for s in ordered))

        for spec in ordered:
            self._run_stage(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Build complete: %d stages in %.0fms (%d icon(s) skipped)",
            len(ordered),
            total,
            len(ctx.errors),
        )
        return ctx

    def run_stage(self, ctx: BuildContext, stage_id: str) -> BuildContext:
        """Run a single stage without its dependencies (their outputs must be on ctx)."""
        self._run_stage(ctx, self.registry.get(stage_id))
        return ctx

    def _run_stage(self, ctx: BuildContext, spec: StageSpec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except OSError as e:
            logger.error("  %s FAILED: %s", spec.id, e)
            raise StageError(spec.id, e.strerror or str(e), e.filename) from e
        ctx.completed_stages.append(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)


def create_pipeline(registry: StageRegistry | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(registry=registry)
