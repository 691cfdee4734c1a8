"""Watch session — rebuild actions and the cached manifest/ontology they share."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from rocbuild.engine.context import BuildContext
from rocbuild.engine.pipeline import Pipeline
from rocbuild.exceptions import RocBuildError
from rocbuild.models.icon import Manifest
from rocbuild.models.ontology import Ontology
from rocbuild.watch.debounce import Debouncer, TimerFactory

logger = logging.getLogger(__name__)

DEMO_STAGE = "demo"


@dataclass(frozen=True)
class WatchCache:
    """Manifest and ontology from the last full build. Replaced, never mutated."""

    manifest: Manifest | None = None
    ontology: Ontology | None = None

    def is_warm(self) -> bool:
        return self.manifest is not None and self.ontology is not None


class WatchSession:
    """Owns the two debounced rebuild paths used in watch mode."""

    def __init__(
        self,
        make_context: Callable[[], BuildContext],
        pipeline: Pipeline,
        delay: float = 0.2,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self.make_context = make_context
        self.pipeline = pipeline
        self.cache = WatchCache()
        run_lock = threading.Lock()
        self.source_debouncer = Debouncer(delay, self.full_rebuild, run_lock, timer_factory)
        self.demo_debouncer = Debouncer(delay, self.demo_rebuild, run_lock, timer_factory)

    def remember(self, ctx: BuildContext) -> None:
        """Cache a finished build's manifest and ontology for demo-only rebuilds."""
        if ctx.manifest is not None and ctx.ontology is not None:
            self.cache = WatchCache(manifest=ctx.manifest, ontology=ctx.ontology)

    def source_changed(self, path: str) -> None:
        logger.info("changed: %s", path)
        self.source_debouncer.trigger()

    def demo_changed(self, path: str) -> None:
        logger.info("changed: %s", path)
        self.demo_debouncer.trigger()

    def full_rebuild(self) -> None:
        ctx = self.make_context()
        try:
            self.pipeline.run(ctx)
        except RocBuildError as e:
            logger.error("Rebuild failed: %s", e)
            return
        self.remember(ctx)

    def demo_rebuild(self) -> None:
        cache = self.cache
        if not cache.is_warm():
            logger.info("No cached manifest, running a full rebuild")
            self.full_rebuild()
            return

        ctx = self.make_context()
        ctx.manifest = cache.manifest
        ctx.ontology = cache.ontology
        try:
            self.pipeline.run_stage(ctx, DEMO_STAGE)
        except RocBuildError as e:
            logger.error("Demo rebuild failed: %s", e)

    def stop(self) -> None:
        """Cancel pending rebuilds; a rebuild already writing output runs to completion."""
        self.source_debouncer.cancel()
        self.demo_debouncer.cancel()
