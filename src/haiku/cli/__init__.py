# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
CLI module for haiku.

Command line usage:
    haiku show <environment> [--format yaml|json] [--output DIR]

Python API usage:
    from haiku.templator import template_environment

    objects = template_environment("jaeger/ops-tools1-us-east4.jaeger")
"""

from haiku.cli.main import cli_main, configure_parser, main

__all__ = [
    "cli_main",
    "configure_parser",
    "main",
]
