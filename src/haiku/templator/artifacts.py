# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import os
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

import yaml

from .errors import ArtifactError
from .objects import Unstructured

CLUSTER_SCOPE_DIR = "_cluster"


def _path_segment(value: object, field: str) -> str:
    segment = str(value)
    if segment in ("", ".", "..") or any(sep in segment for sep in ("/", "\\", "\0")):
        raise ArtifactError(f"Object {field} {segment!r} cannot be used as a file name")
    return segment


def dump_yaml(objects: Iterable[Unstructured]) -> str:
    """Render objects as a multi-document YAML stream."""
    return yaml.safe_dump_all(
        [obj.to_dict() for obj in objects],
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=4096,
    )


def dump_json(objects: Iterable[Unstructured], indent: int = 2) -> str:
    return json.dumps([obj.to_dict() for obj in objects], indent=indent, ensure_ascii=False) + "\n"


@dataclass
class ArtifactWriter:
    output_dir: str

    def write(self, objects: Iterable[Unstructured]) -> list[str]:
        """
        Write each object to ``<namespace>/<kind>-<name>.yaml``.

        Objects that would share a file are qualified with their apiVersion
        (``deployment.apps.v1-web.yaml``). Nothing is written if any object
        still has no file of its own or names a path outside ``output_dir``.
        """
        objects = list(objects)
        destinations = self._destinations(objects)
        os.makedirs(self.output_dir, exist_ok=True)
        for destination, obj in zip(destinations, objects):
            self._emit_file(destination, obj)
        return destinations

    def _destinations(self, objects: list[Unstructured]) -> list[str]:
        plain = [self._destination_for(obj, index) for index, obj in enumerate(objects)]
        counts = Counter(plain)
        destinations = [
            self._destination_for(obj, index, qualified=True) if counts[path] > 1 else path
            for index, (obj, path) in enumerate(zip(objects, plain))
        ]
        seen: set[str] = set()
        for destination in destinations:
            if destination in seen:
                raise ArtifactError(f"More than one object would be written to {destination}")
            seen.add(destination)
        return destinations

    def _destination_for(self, obj: Unstructured, index: int, qualified: bool = False) -> str:
        scope = _path_segment(obj.namespace or CLUSTER_SCOPE_DIR, "namespace")
        kind = obj.kind.lower()
        if qualified:
            kind = f"{kind}.{obj.api_version.replace('/', '.')}"
        filename = _path_segment(f"{kind}-{obj.name or index}.yaml", "kind or name")
        return os.path.join(self.output_dir, scope, filename)

    @staticmethod
    def _emit_file(path: str, obj: Unstructured) -> None:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(obj.to_dict(), f, sort_keys=False, default_flow_style=False, width=4096)
