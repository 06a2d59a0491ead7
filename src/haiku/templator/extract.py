# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any, Iterable

from .errors import InternalConsistencyError, StructureError
from .objects import Unstructured, UnstructuredList

logger = logging.getLogger(__name__)


def is_resource(value: Any) -> bool:
    return isinstance(value, dict) and value.get("kind") is not None and value.get("apiVersion") is not None


def json_walk(value: Any) -> list[dict[str, Any]]:
    """
    Collect every Kubernetes object descriptor nested in a decoded document.

    An object with both ``kind`` and ``apiVersion`` is returned as is and its
    children are not visited. Other objects are walked value by value in key
    order, arrays element by element. Any scalar reached on the way is an error.

    Raises:
        StructureError: If a scalar or null is found where an object or array
                        was expected.
    """
    if isinstance(value, dict):
        if is_resource(value):
            return [value]
        found: list[dict[str, Any]] = []
        for child in value.values():
            found.extend(json_walk(child))
        return found
    if isinstance(value, list):
        found = []
        for child in value:
            found.extend(json_walk(child))
        return found
    raise StructureError(f"Unexpected object structure: {type(value).__name__}")


def flatten_to_v1(objects: Iterable[Any]) -> list[Unstructured]:
    """
    Expand UnstructuredList objects into their members, keeping everything in
    discovery order.

    Raises:
        InternalConsistencyError: On anything that is not an Unstructured or
                                  UnstructuredList.
    """
    objects = list(objects)
    flattened: list[Unstructured] = []
    for obj in objects:
        if isinstance(obj, UnstructuredList):
            flattened.extend(obj.items)
        elif isinstance(obj, Unstructured):
            flattened.append(obj)
        else:
            raise InternalConsistencyError(f"Unexpected unstructured object type: {type(obj).__name__}")
    logger.debug("Flattened %d object(s) into %d", len(objects), len(flattened))
    return flattened
