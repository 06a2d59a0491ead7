# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Global pytest configuration and fixtures.

The ``project`` fixture lays out a throwaway project root with lib/, vendor/
and environments/ and makes it the working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest


class ProjectLayout:
    def __init__(self, root: Path):
        self.root = root

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def environment(self, name: str, content: str, entrypoint: str = "main.jsonnet") -> Path:
        return self.write(f"environments/{name}/{entrypoint}", content)


@pytest.fixture
def project(tmp_path, monkeypatch) -> ProjectLayout:
    """Empty project root used as the process working directory."""
    (tmp_path / "lib").mkdir()
    (tmp_path / "vendor").mkdir()
    (tmp_path / "environments").mkdir()
    monkeypatch.chdir(tmp_path)
    return ProjectLayout(tmp_path)


@pytest.fixture
def pod():
    def _factory(name: str = "web", **extra):
        obj = {"apiVersion": "v1", "kind": "Pod", "metadata": {"name": name}}
        obj.update(extra)
        return obj

    return _factory
