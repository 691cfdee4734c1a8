"""roc-build stage engine."""

from rocbuild.engine.registry import stage, get_registry
from rocbuild.engine.context import BuildContext
from rocbuild.engine.pipeline import Pipeline

__all__ = [
    "stage",
    "get_registry",
    "BuildContext",
    "Pipeline",
]
