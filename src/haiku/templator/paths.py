# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Locate the entrypoint and import search paths of an environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .errors import NotFoundError

logger = logging.getLogger(__name__)

LIB_DIR = "lib"
VENDOR_DIR = "vendor"
ENVIRONMENTS_DIR = "environments"
METADATA_DIR = ".metadata"
ENTRYPOINT_CANDIDATES = ("main.libsonnet", "main.jsonnet")


@dataclass(frozen=True)
class ResolvedPaths:
    import_paths: tuple[str, ...]
    entry_file: str


def _import_paths(environment: str, cwd: Optional[str]) -> tuple[str, ...]:
    base = os.getcwd() if cwd is None else cwd
    # The metadata root sits beside environments/, not inside it. It stays
    # relative when no project root is given.
    metadata = os.path.join(environment, METADATA_DIR)
    if cwd is not None:
        metadata = os.path.join(cwd, metadata)
    return (
        os.path.join(base, LIB_DIR),
        os.path.join(base, VENDOR_DIR),
        metadata,
    )


def _exists(path: str) -> bool:
    # Only a missing file counts as absent; other stat failures surface on read.
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def resolve(environment: str, cwd: Optional[str] = None) -> ResolvedPaths:
    """
    Resolve the import search paths and entrypoint for an environment.

    Args:
        environment: Environment name, e.g. ``jaeger/ops-tools1-us-east4.jaeger``.
        cwd: Project root. Defaults to the process working directory; when given,
             the environment root and metadata directory are looked up beneath it.

    Returns:
        ResolvedPaths with the ordered import paths (lib, vendor, metadata) and
        the entrypoint, preferring ``main.libsonnet`` over ``main.jsonnet``.

    Raises:
        NotFoundError: If neither entrypoint candidate exists.
    """
    import_paths = _import_paths(environment, cwd)

    root = os.path.join(ENVIRONMENTS_DIR, environment)
    if cwd is not None:
        root = os.path.join(cwd, root)

    candidates = [os.path.join(root, name) for name in ENTRYPOINT_CANDIDATES]
    for candidate in candidates:
        if _exists(candidate):
            logger.debug("Resolved entrypoint %s with import paths %s", candidate, list(import_paths))
            return ResolvedPaths(import_paths=import_paths, entry_file=candidate)

    raise NotFoundError(environment, candidates)


def get_jpaths_and_file(environment: str, cwd: Optional[str] = None) -> tuple[list[str], str]:
    """Tuple form of :func:`resolve`: ``(import_paths, entry_file)``."""
    resolved = resolve(environment, cwd)
    return list(resolved.import_paths), resolved.entry_file
