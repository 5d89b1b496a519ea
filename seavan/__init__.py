"""seavan: wrap single files in container layers for later composition."""

from __future__ import annotations

from seavan.errors import (
    BannedRegistryPrefixError,
    BuildFailureError,
    NoDirectoryError,
    NoFileNameError,
    SeavanError,
    StrConversionError,
)
from seavan.layer import WrappedLayer
from seavan.package.docker import BuildFailed, BuildSucceeded, ImageBuilder

__version__ = "0.1.0"

__all__ = [
    "BannedRegistryPrefixError",
    "BuildFailed",
    "BuildFailureError",
    "BuildSucceeded",
    "ImageBuilder",
    "NoDirectoryError",
    "NoFileNameError",
    "SeavanError",
    "StrConversionError",
    "WrappedLayer",
]
