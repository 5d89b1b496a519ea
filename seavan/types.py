"""Shared Pydantic models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from seavan.layer import WrappedLayer


class ImageRef(BaseModel):
    """Receipt for a successfully built image."""

    reference: str
    repository: str
    tag: str
    digest: str
    source: str
    filename: str
    registry: str | None = None
    engine: str
    created_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())

    @classmethod
    def for_layer(cls, layer: WrappedLayer, reference: str, engine: str) -> ImageRef:
        repository, _, tag = reference.rpartition(":")
        return cls(
            reference=reference,
            repository=repository,
            tag=tag,
            digest=layer.hash(),
            source=str(layer.path),
            filename=layer.filename_str(),
            registry=layer.registry,
            engine=engine,
        )
