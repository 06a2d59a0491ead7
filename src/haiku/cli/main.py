# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import argparse
import logging
import sys
from typing import List, Optional

from haiku import __version__
from haiku.templator import (
    ArtifactWriter,
    JsonnetTemplator,
    TemplatorError,
    dump_json,
    dump_yaml,
)

logger = logging.getLogger(__name__)

_USAGE_EXAMPLES = """
Examples:
  # Print every object of an environment as YAML
  haiku show jaeger/ops-tools1-us-east4.jaeger

  # Print as a JSON array
  haiku show jaeger/ops-tools1-us-east4.jaeger --format json

  # Write one file per object
  haiku show jaeger/ops-tools1-us-east4.jaeger --output ./manifests
"""


def _add_show_mode_arguments(parser):
    parser.add_argument(
        "environment",
        help="Environment name; its entrypoint is environments/<environment>/main.(lib|j)sonnet.",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format when printing to stdout. Default: yaml.",
    )
    parser.add_argument("--output", type=str, default=None, help="Directory to write one YAML file per object.")
    parser.add_argument(
        "--cwd",
        type=str,
        default=None,
        help="Project root holding lib/, vendor/ and environments/. Default: current directory.",
    )


def configure_parser(parser):
    parser.add_argument("--debug", action="store_true", help="Enable debug mode.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="mode", required=True)

    show_parser = subparsers.add_parser(
        "show",
        help="Evaluate an environment and print its Kubernetes objects.",
        description="Evaluate an environment and print its Kubernetes objects.",
        epilog=_USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_show_mode_arguments(show_parser)


def _run_show_mode(args):
    try:
        objects = JsonnetTemplator(args.environment, cwd=args.cwd).template()
    except (TemplatorError, OSError) as exc:
        logger.error("Failed to template environment '%s': %s", args.environment, exc)
        raise SystemExit(1) from exc

    if args.output:
        try:
            written = ArtifactWriter(args.output).write(objects)
        except (TemplatorError, OSError) as exc:
            logger.error("Failed to write objects to %s: %s", args.output, exc)
            raise SystemExit(1) from exc
        logger.info("Wrote %d object(s) to %s", len(written), args.output)
        return

    if args.format == "json":
        sys.stdout.write(dump_json(objects))
    else:
        sys.stdout.write(dump_yaml(objects))


def main(args):
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s",
    )
    logger.debug("haiku version: %s", __version__)

    if args.mode == "show":
        _run_show_mode(args)
        return

    raise SystemExit(f"Unsupported mode: {args.mode}")


def cli_main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="haiku",
        description="Render Jsonnet environments into Kubernetes objects",
        epilog=_USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    configure_parser(parser)
    args = parser.parse_args(argv)
    main(args)


if __name__ == "__main__":
    cli_main()
