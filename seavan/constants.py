"""Process-wide constants and environment overrides."""

from __future__ import annotations

import os

# Namespacing prefix for every generated repository; keeps wrapped files out of
# unrelated top-level repository names on a shared registry.
PACKAGE_ROOT = "seavanpkg"

DEFAULT_TAG = "latest"

# Public free-tier registry that must not be used as ad-hoc blob storage.
BANNED_REGISTRY_PREFIX = "docker.io"

DEFAULT_ENGINE = "docker"
ENGINE_ENV_VAR = "SEAVAN_ENGINE"

LOG_LEVEL_ENV_VAR = "SEAVAN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Injected into the engine environment to enable BuildKit.
BUILDKIT_ENV = {"DOCKER_BUILDKIT": "1"}

HASH_CHUNK_BYTES = 1024 * 1024


def default_engine() -> str:
    """Return the build engine executable, honouring ``SEAVAN_ENGINE``."""
    return os.environ.get(ENGINE_ENV_VAR) or DEFAULT_ENGINE


def log_level() -> str:
    return (os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
