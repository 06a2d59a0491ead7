# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Sequence

import _jsonnet

from .errors import EvaluationError
from .native import NATIVE_FUNCTIONS, NativeFunction, native_callbacks

logger = logging.getLogger(__name__)


def evaluate(
    entry_file: str,
    import_paths: Sequence[str],
    native_functions: tuple[NativeFunction, ...] = NATIVE_FUNCTIONS,
) -> str:
    """
    Evaluate a Jsonnet entrypoint into its JSON output.

    Args:
        entry_file: Path of the entrypoint; its contents are read from disk.
        import_paths: Library search directories, searched in the given order
                      after the importing file's own directory.
        native_functions: Functions made available through ``std.native``.

    Returns:
        The engine's JSON rendering of the document.

    Raises:
        OSError: If the entrypoint cannot be read.
        EvaluationError: If the engine reports a syntax, runtime or native
                         function failure.
    """
    with open(entry_file, "r", encoding="utf-8") as f:
        source = f.read()

    # The engine gives the last search path priority, so hand them over reversed.
    jpathdir = list(reversed(import_paths))

    logger.debug("Evaluating %s (%d bytes) with jpath %s", entry_file, len(source), list(import_paths))
    try:
        return _jsonnet.evaluate_snippet(
            entry_file,
            source,
            jpathdir=jpathdir,
            native_callbacks=native_callbacks(native_functions),
        )
    except RuntimeError as exc:
        raise EvaluationError(entry_file, str(exc)) from exc
