# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import abc
import json
import logging
from typing import Any, Optional

from .engine import evaluate
from .errors import DecodeError
from .extract import flatten_to_v1, json_walk
from .native import NATIVE_FUNCTIONS, NativeFunction
from .objects import Unstructured, to_unstructured
from .paths import resolve

logger = logging.getLogger(__name__)


class Templator(abc.ABC):
    """Produces the Kubernetes objects of one environment."""

    @abc.abstractmethod
    def template(self) -> list[Unstructured]:
        raise NotImplementedError


def json_to_objects(json_text: str) -> list[Unstructured]:
    """Decode evaluation output and return the flattened objects it contains."""
    try:
        document: Any = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Evaluation output is not valid JSON: {exc}") from exc

    descriptors = json_walk(document)
    return flatten_to_v1(to_unstructured(d) for d in descriptors)


class JsonnetTemplator(Templator):
    """
    Jsonnet backed templator.

    Paths are resolved on construction, so a missing entrypoint fails with
    NotFoundError before anything is evaluated.
    """

    def __init__(
        self,
        environment: str,
        cwd: Optional[str] = None,
        native_functions: tuple[NativeFunction, ...] = NATIVE_FUNCTIONS,
    ):
        self.environment = environment
        resolved = resolve(environment, cwd)
        self.import_paths = list(resolved.import_paths)
        self.file = resolved.entry_file
        self.native_functions = native_functions

    def template(self) -> list[Unstructured]:
        json_text = evaluate(self.file, self.import_paths, self.native_functions)
        objects = json_to_objects(json_text)
        logger.info("Environment %s produced %d object(s)", self.environment, len(objects))
        return objects


def template_environment(environment: str, cwd: Optional[str] = None) -> list[Unstructured]:
    return JsonnetTemplator(environment, cwd=cwd).template()
