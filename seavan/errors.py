"""Error types for seavan."""

from __future__ import annotations

from pathlib import Path


class SeavanError(Exception):
    """Base class for every error raised by seavan itself."""


class NoFileNameError(SeavanError):
    """The given path has no filename. Check whether the path is correct."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{str(path)!r} has no filename")


class NoDirectoryError(SeavanError):
    """The given path has no directory. Check whether the path is correct."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{str(path)!r} has no directory")


class StrConversionError(SeavanError):
    def __init__(self) -> None:
        super().__init__("Failed string conversion")


class BannedRegistryPrefixError(SeavanError):
    """The registry points at the public Docker Hub, which is refused as blob storage."""

    def __init__(self, registry: str, prefix: str) -> None:
        self.registry = registry
        self.prefix = prefix
        super().__init__(f"Registry {registry!r} starts with banned prefix {prefix!r}")


class BuildFailureError(SeavanError):
    """The build engine ran but exited with a nonzero status."""

    def __init__(self, diagnostic: str) -> None:
        self.diagnostic = diagnostic
        super().__init__(f"Docker build failure: {diagnostic}")
