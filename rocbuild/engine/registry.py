"""Stage registry — every build stage is a standalone function registered via decorator.

Usage:
    @stage(id="sprite", order=40, dependencies=["svg"], description="SVG sprite sheet")
    def sprite(ctx: BuildContext) -> None:
        write_text(ctx.dist_dir / "sprite.svg", serialize_sprite(ctx.require_manifest()))

Adding a new stage = creating one module under rocbuild/stages with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from rocbuild.engine.context import BuildContext

logger = logging.getLogger(__name__)

# Stages tagged COMPANION run whenever the svg stage runs
COMPANION = "companion"


@dataclass
class StageSpec:
    id: str
    order: int
    fn: Callable[["BuildContext"], None]
    dependencies: list[str] = field(default_factory=list)
    tags: set[str] = field(default_factory=set)
    description: str = ""


class StageRegistry:
    """Registry of all build stages."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (order %d)", spec.id, spec.order)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.order, s.id))

    def tagged(self, tag: str) -> list[StageSpec]:
        return [s for s in self.all() if tag in s.tags]

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Topological sort respecting dependencies, ties broken by stage order.

        If requested_ids is None, run all.
        """
        pool = self._stages
        if requested_ids is not None:
            unknown = requested_ids - pool.keys()
            if unknown:
                raise ValueError(f"Unknown stage(s): {sorted(unknown)}")
            # Expand with transitive dependencies
            expanded: set[str] = set()
            stack = list(requested_ids)
            while stack:
                sid = stack.pop()
                if sid in expanded:
                    continue
                expanded.add(sid)
                spec = pool.get(sid)
                if spec:
                    stack.extend(spec.dependencies)
            pool = {k: v for k, v in pool.items() if k in expanded}

        def rank(sid: str) -> tuple[int, str]:
            return (pool[sid].order, sid)

        # Kahn's algorithm
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[sid] += 1

        queue = sorted([sid for sid, d in in_degree.items() if d == 0], key=rank)
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort(key=rank)

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    order: int,
    dependencies: list[str] | None = None,
    tags: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["BuildContext"], None]):
        spec = StageSpec(
            id=id,
            order=order,
            fn=fn,
            dependencies=dependencies or [],
            tags=tags or set(),
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
