# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Generic Kubernetes object records built from decoded descriptors."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .errors import StructureError


@dataclass
class Unstructured:
    object: dict[str, Any]

    @property
    def kind(self) -> str:
        return self.object["kind"]

    @property
    def api_version(self) -> str:
        return self.object["apiVersion"]

    @property
    def metadata(self) -> dict[str, Any]:
        meta = self.object.get("metadata")
        return meta if isinstance(meta, dict) else {}

    @property
    def name(self) -> Optional[str]:
        return self.metadata.get("name")

    @property
    def namespace(self) -> Optional[str]:
        return self.metadata.get("namespace")

    def to_dict(self) -> dict[str, Any]:
        """Deep copy of the object; changing it leaves the record untouched."""
        return copy.deepcopy(self.object)


@dataclass
class UnstructuredList:
    object: dict[str, Any]
    items: list[Unstructured] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return self.object["kind"]

    @property
    def api_version(self) -> str:
        return self.object["apiVersion"]


KubeObject = Union[Unstructured, UnstructuredList]


def _require_type_meta(descriptor: dict[str, Any]) -> None:
    for key in ("kind", "apiVersion"):
        value = descriptor.get(key)
        if not isinstance(value, str) or not value:
            raise StructureError(f"Object '{key}' must be a non-empty string, got {type(value).__name__}")


def to_unstructured(descriptor: dict[str, Any]) -> KubeObject:
    """
    Coerce a descriptor into an Unstructured, or an UnstructuredList when it
    carries an ``items`` field.

    List members missing both ``kind`` and ``apiVersion`` take them from the
    list: ``PodList``/``v1`` yields ``Pod``/``v1`` items.
    """
    if not isinstance(descriptor, dict):
        raise StructureError(f"Unexpected object structure: {type(descriptor).__name__}")
    _require_type_meta(descriptor)

    if "items" not in descriptor:
        return Unstructured(copy.deepcopy(descriptor))

    raw_items = descriptor["items"]
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise StructureError(f"List 'items' must be an array, got {type(raw_items).__name__}")

    header = {k: copy.deepcopy(v) for k, v in descriptor.items() if k != "items"}
    item_kind = header["kind"].removesuffix("List")
    items: list[Unstructured] = []
    for raw in raw_items:
        if not isinstance(raw, dict):
            raise StructureError(f"List item must be an object, got {type(raw).__name__}")
        item = copy.deepcopy(raw)
        if not item.get("kind") and not item.get("apiVersion"):
            item["kind"] = item_kind
            item["apiVersion"] = header["apiVersion"]
        _require_type_meta(item)
        items.append(Unstructured(item))
    return UnstructuredList(header, items)
