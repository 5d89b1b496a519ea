"""Docker packaging: build a single-file image from a :class:`WrappedLayer`.

The build manifest is two lines (``FROM scratch`` / ``COPY <file> /``) and is
piped to the engine on stdin (``build -f -``), so nothing is written into the
directory being built from. The engine runs with its working directory set to
the file's parent, where ``COPY`` resolves the bare filename.

The engine is an opaque subprocess: exit status 0 means the image exists under
the returned reference, anything else is reported as :class:`BuildFailed`.
There is no timeout and no retry.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from seavan.constants import BUILDKIT_ENV, default_engine
from seavan.errors import BuildFailureError
from seavan.logging import get_logger

if TYPE_CHECKING:
    from seavan.layer import WrappedLayer

log = get_logger(__name__)

UNDECODABLE_STDERR = "<stderr is not valid UTF-8>"


@dataclass(frozen=True)
class BuildSucceeded:
    reference: str
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.reference


@dataclass(frozen=True)
class BuildFailed:
    reference: str
    returncode: int
    diagnostic: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> str:
        raise BuildFailureError(self.diagnostic)


BuildOutcome = BuildSucceeded | BuildFailed


def render_manifest(filename: str) -> bytes:
    """Return the build manifest copying *filename* into an empty image root."""
    return f"FROM scratch\nCOPY {filename} /\n".encode()


def _best_effort_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _diagnostic(stderr: bytes) -> str:
    try:
        return stderr.decode("utf-8")
    except UnicodeDecodeError:
        return UNDECODABLE_STDERR


class ImageBuilder:
    """Run the build engine for one :class:`WrappedLayer` at a time.

    Parameters
    ----------
    engine: str | None
        Engine executable. Defaults to ``$SEAVAN_ENGINE`` or ``docker``.
    """

    def __init__(self, engine: str | None = None) -> None:
        self.engine = engine or default_engine()

    def command(self, reference: str) -> list[str]:
        return [self.engine, "build", "-f", "-", "-t", reference, "."]

    def environment(self) -> dict[str, str]:
        env = os.environ.copy()
        env.update(BUILDKIT_ENV)
        return env

    def build(self, layer: WrappedLayer) -> BuildOutcome:
        """Build *layer* and return the outcome.

        Descriptor errors (no filename, no directory, string conversion) and
        engine spawn errors raise; a nonzero engine exit is a
        :class:`BuildFailed`, not an exception.
        """
        reference = layer.repository_name_and_tag()
        workdir = layer.working_directory()
        manifest = render_manifest(layer.filename_str())
        log.info("Created manifest for %s", layer.filename_str())

        log.info("Building image %s in %s", reference, workdir)
        proc = subprocess.run(
            self.command(reference),
            input=manifest,
            cwd=workdir,
            env=self.environment(),
            capture_output=True,
        )

        stdout = _best_effort_text(proc.stdout)
        stderr = _best_effort_text(proc.stderr)
        if stdout:
            log.debug("%s stdout: %s", self.engine, stdout)
        if stderr:
            log.debug("%s stderr: %s", self.engine, stderr)

        if proc.returncode == 0:
            log.info("Built image %s", reference)
            return BuildSucceeded(reference=reference, stdout=stdout, stderr=stderr)

        log.warning("Image build failed for %s (exit %s)", reference, proc.returncode)
        return BuildFailed(
            reference=reference,
            returncode=proc.returncode,
            diagnostic=_diagnostic(proc.stderr),
        )
