from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest

FAKE_ENGINE = """#!/bin/sh
# Records how it was invoked, then succeeds or fails on request.
log="$SEAVAN_FAKE_LOG"
cat > "$log/manifest"
printf '%s\\n' "$@" > "$log/args"
pwd -P > "$log/cwd"
printf '%s' "$DOCKER_BUILDKIT" > "$log/buildkit"
echo "Step 1/2 : FROM scratch"
if [ -n "$SEAVAN_FAKE_STDERR_BYTES" ]; then
  printf "$SEAVAN_FAKE_STDERR_BYTES" >&2
  exit 1
fi
if [ -n "$SEAVAN_FAKE_FAIL" ]; then
  printf '%s' "$SEAVAN_FAKE_FAIL" >&2
  exit 1
fi
exit 0
"""


@pytest.fixture
def engine_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory the fake engine writes its invocation details into."""
    log = tmp_path / "engine-log"
    log.mkdir()
    monkeypatch.setenv("SEAVAN_FAKE_LOG", str(log))
    monkeypatch.delenv("SEAVAN_FAKE_FAIL", raising=False)
    monkeypatch.delenv("SEAVAN_FAKE_STDERR_BYTES", raising=False)
    return log


@pytest.fixture
def fake_engine(tmp_path: Path, engine_log: Path) -> str:
    if sys.platform == "win32":
        pytest.skip("fake engine is a POSIX shell script")
    script = tmp_path / "bin" / "fake-docker"
    script.parent.mkdir()
    script.write_text(FAKE_ENGINE, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(script)


@pytest.fixture
def wrapped_file(tmp_path: Path) -> Path:
    f = tmp_path / "context" / "Cargo.toml"
    f.parent.mkdir()
    f.write_text('[package]\nname = "seavan"\n', encoding="utf-8")
    return f
