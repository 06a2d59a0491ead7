# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Templator package: environments in, Kubernetes objects out.

This module exposes a single import surface so callers do not need to know
where path resolution, evaluation or extraction live internally.
"""

from .artifacts import ArtifactWriter, dump_json, dump_yaml
from .engine import evaluate
from .errors import (
    ArtifactError,
    DecodeError,
    EvaluationError,
    InternalConsistencyError,
    NativeArgumentError,
    NotFoundError,
    StructureError,
    TemplatorError,
)
from .extract import flatten_to_v1, json_walk
from .native import NATIVE_FUNCTIONS, NativeFunction
from .objects import Unstructured, UnstructuredList, to_unstructured
from .paths import ResolvedPaths, get_jpaths_and_file, resolve
from .templator import JsonnetTemplator, Templator, json_to_objects, template_environment

__all__ = [
    "ArtifactError",
    "ArtifactWriter",
    "DecodeError",
    "EvaluationError",
    "InternalConsistencyError",
    "JsonnetTemplator",
    "NATIVE_FUNCTIONS",
    "NativeArgumentError",
    "NativeFunction",
    "NotFoundError",
    "ResolvedPaths",
    "StructureError",
    "Templator",
    "TemplatorError",
    "Unstructured",
    "UnstructuredList",
    "dump_json",
    "dump_yaml",
    "evaluate",
    "flatten_to_v1",
    "get_jpaths_and_file",
    "json_to_objects",
    "json_walk",
    "resolve",
    "template_environment",
    "to_unstructured",
]
