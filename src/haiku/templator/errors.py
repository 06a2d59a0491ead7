# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while turning an environment into Kubernetes objects."""


class TemplatorError(Exception):
    """Base class for failures caused by the environment being templated."""


class NotFoundError(TemplatorError, FileNotFoundError):
    """Neither entrypoint candidate exists for an environment."""

    def __init__(self, environment: str, candidates: list[str]):
        self.environment = environment
        self.candidates = list(candidates)
        super().__init__(
            f"couldn't find an entrypoint for environment '{environment}': "
            f"tried {', '.join(self.candidates)}"
        )


class EvaluationError(TemplatorError):
    """The Jsonnet engine rejected or failed to evaluate the entrypoint."""

    def __init__(self, filename: str, message: str):
        self.filename = filename
        self.message = message
        super().__init__(message)


class NativeArgumentError(TemplatorError, TypeError):
    """A native function was called with arguments of the wrong type."""


class DecodeError(TemplatorError, ValueError):
    """Evaluation output is not a valid JSON document."""


class StructureError(TemplatorError, TypeError):
    """The evaluated document holds a value that is not an object where one was expected."""


class InternalConsistencyError(AssertionError):
    """
    Raised by the flattener for anything that is neither an object nor a list.

    Signals that extraction handed over a malformed record. It is not a
    TemplatorError and is not caught alongside environment failures.
    """


class ArtifactError(TemplatorError, ValueError):
    """Objects cannot be written to distinct files inside the output directory."""
