"""Wrapped-layer descriptor: one wrap-and-build request.

A :class:`WrappedLayer` pins down everything needed to name the image that
carries a single file:

- ``path``: the canonical (absolute, symlink-free) path, resolved once;
- ``registry``: optional host/prefix for the repository name;
- ``tag``: a sanitized tag, ``latest`` unless overridden.

The model is frozen; ``with_tag``/``with_registry`` return new descriptors and
validate eagerly, so misconfiguration fails at the point it is introduced.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from seavan.constants import BANNED_REGISTRY_PREFIX, DEFAULT_TAG, PACKAGE_ROOT
from seavan.digest import sha256
from seavan.errors import (
    BannedRegistryPrefixError,
    NoDirectoryError,
    NoFileNameError,
    StrConversionError,
)
from seavan.logging import get_logger
from seavan.sanitize import sanitize

log = get_logger(__name__)


def _check_registry(registry: str | None) -> str | None:
    if registry is None:
        return None
    if registry.startswith(BANNED_REGISTRY_PREFIX):
        raise BannedRegistryPrefixError(registry, BANNED_REGISTRY_PREFIX)
    return registry.rstrip("/") or None


class WrappedLayer(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    registry: str | None = None
    tag: str = DEFAULT_TAG

    # BannedRegistryPrefixError is not a ValueError, so pydantic lets it through
    # unwrapped instead of folding it into a ValidationError.
    @field_validator("registry", mode="before")
    @classmethod
    def _registry_not_banned(cls, v: str | None) -> str | None:
        return _check_registry(v)

    @field_validator("tag", mode="before")
    @classmethod
    def _tag_is_safe(cls, v: str | None) -> str:
        return sanitize(DEFAULT_TAG if v is None else v)

    # --- construction -----------------------------------------------------

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        tag: str | None = None,
        registry: str | None = None,
    ) -> WrappedLayer:
        """Resolve *path* and build a descriptor for it.

        Raises ``OSError`` if the path cannot be resolved and
        :class:`NoFileNameError` if it resolves to a root.
        """
        canonical = Path(path).resolve(strict=True)
        if not canonical.name:
            raise NoFileNameError(canonical)
        log.debug("Wrapping path %s", canonical)
        return cls(path=canonical, tag=tag, registry=registry)

    def with_tag(self, tag: str) -> WrappedLayer:
        return self.model_copy(update={"tag": sanitize(tag)})

    def with_registry(self, registry: str | None) -> WrappedLayer:
        """Return a copy using *registry*; ``docker.io…`` is rejected."""
        return self.model_copy(update={"registry": _check_registry(registry)})

    # --- derived values ---------------------------------------------------

    @property
    def filename(self) -> str:
        name = self.path.name
        if not name:
            raise NoFileNameError(self.path)
        return name

    def filename_str(self) -> str:
        """Return the filename as valid UTF-8 text."""
        name = self.filename
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as exc:
            # Undecodable bytes survive in a ``str`` as lone surrogates.
            raise StrConversionError() from exc
        return name

    def working_directory(self) -> Path:
        parent = self.path.parent
        if parent == self.path:
            raise NoDirectoryError(self.path)
        return parent

    def hash(self) -> str:
        return sha256(self.path)

    def repository_name(self) -> str:
        safe_filename = sanitize(self.filename_str())
        name = f"{PACKAGE_ROOT}/{self.hash()}--{safe_filename}"
        if self.registry:
            return f"{self.registry}/{name}"
        return name

    def repository_name_and_tag(self) -> str:
        """``[<registry>/]seavanpkg/<sha256>--<filename>:<tag>``, recomputed on every call."""
        return f"{self.repository_name()}:{self.tag}"

    # --- build ------------------------------------------------------------

    def create_image(self, engine: str | None = None) -> str:
        """Build an image containing the wrapped file and return its reference.

        Raises :class:`~seavan.errors.BuildFailureError` if the engine exits
        nonzero.
        """
        from seavan.package.docker import ImageBuilder

        return ImageBuilder(engine=engine).build(self).unwrap()
