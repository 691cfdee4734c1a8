"""metadata.json document — public contract for downstream consumers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IconMetadata(BaseModel):
    name: str
    label: str
    description: str = ""
    category: str
    tags: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)


class MetadataDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    icons: list[IconMetadata] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    # Variant count, not unique-name count
    total_count: int = Field(0, alias="totalCount")
    styles: list[str] = Field(default_factory=list)
