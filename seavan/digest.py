"""Content digests for wrapped files: streaming SHA-256."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO

from seavan.constants import HASH_CHUNK_BYTES


def sha256_stream(stream: BinaryIO) -> str:
    """Return the hex SHA-256 of everything left in *stream*.

    Reads in bounded chunks; read errors propagate as ``OSError``.
    """
    h = hashlib.sha256()
    for chunk in iter(lambda: stream.read(HASH_CHUNK_BYTES), b""):
        h.update(chunk)
    return h.hexdigest()


def sha256(path: Path) -> str:
    """Return the hex SHA-256 of *path*."""
    with open(path, "rb") as f:
        return sha256_stream(f)
