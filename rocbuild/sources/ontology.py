"""Ontology loader — icons.json with per-icon label/description/category/tags."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from rocbuild.exceptions import OntologyError
from rocbuild.models.ontology import Ontology

logger = logging.getLogger(__name__)


def load_ontology(path: Path) -> Ontology:
    """Load the ontology file; an absent file yields an empty ontology."""
    path = Path(path)
    if not path.exists():
        logger.warning("⚠ %s not found – using empty ontology", path)
        return Ontology()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        ontology = Ontology.model_validate(data)
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise OntologyError(f"cannot parse {path}: {e}") from e

    for name, category in ontology.unknown_categories():
        logger.warning('⚠ icon "%s" has unknown category "%s"', name, category)

    return ontology
