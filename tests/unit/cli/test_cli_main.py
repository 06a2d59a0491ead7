# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the haiku command line."""

import argparse
import json

import pytest
import yaml

from haiku.cli import cli_main, configure_parser

pytestmark = pytest.mark.unit

ENVIRONMENT = """
[
  { apiVersion: 'v1', kind: 'Namespace', metadata: { name: 'ops' } },
  { apiVersion: 'v1', kind: 'Service', metadata: { name: 'web', namespace: 'ops' } },
]
"""


@pytest.fixture
def cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    configure_parser(parser)
    return parser


class TestParser:
    def test_defaults(self, cli_parser):
        args = cli_parser.parse_args(["show", "prod"])

        assert args.mode == "show"
        assert args.environment == "prod"
        assert args.format == "yaml"
        assert args.output is None
        assert args.cwd is None
        assert args.debug is False

    def test_mode_required(self, cli_parser):
        with pytest.raises(SystemExit):
            cli_parser.parse_args([])


class TestShow:
    def test_prints_yaml(self, project, capsys):
        project.environment("prod", ENVIRONMENT)

        cli_main(["show", "prod"])

        docs = list(yaml.safe_load_all(capsys.readouterr().out))
        assert [doc["kind"] for doc in docs] == ["Namespace", "Service"]

    def test_prints_json(self, project, capsys):
        project.environment("prod", ENVIRONMENT)

        cli_main(["show", "prod", "--format", "json"])

        payload = json.loads(capsys.readouterr().out)
        assert [doc["metadata"]["name"] for doc in payload] == ["ops", "web"]

    def test_writes_output_dir(self, project, capsys):
        project.environment("prod", ENVIRONMENT)
        out_dir = project.root / "out"

        cli_main(["show", "prod", "--output", str(out_dir)])

        assert (out_dir / "_cluster" / "namespace-ops.yaml").exists()
        assert (out_dir / "ops" / "service-web.yaml").exists()
        assert capsys.readouterr().out == ""

    def test_explicit_cwd(self, tmp_path, capsys):
        env = tmp_path / "environments" / "prod"
        env.mkdir(parents=True)
        (env / "main.jsonnet").write_text(ENVIRONMENT)

        cli_main(["show", "prod", "--cwd", str(tmp_path), "--format", "json"])

        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_missing_environment_exits(self, project):
        with pytest.raises(SystemExit) as exc_info:
            cli_main(["show", "missing"])

        assert exc_info.value.code == 1

    def test_evaluation_error_exits(self, project):
        project.environment("prod", "error 'boom'")

        with pytest.raises(SystemExit) as exc_info:
            cli_main(["show", "prod"])

        assert exc_info.value.code == 1

    def test_unwritable_output_exits(self, project):
        project.environment("prod", ENVIRONMENT)
        blocker = project.write("out", "not a directory")

        with pytest.raises(SystemExit) as exc_info:
            cli_main(["show", "prod", "--output", str(blocker)])

        assert exc_info.value.code == 1

    def test_unsafe_object_name_exits(self, project):
        project.environment("prod", "{ apiVersion: 'v1', kind: 'Pod', metadata: { name: '../escape' } }")

        with pytest.raises(SystemExit) as exc_info:
            cli_main(["show", "prod", "--output", str(project.root / "out")])

        assert exc_info.value.code == 1
        assert not (project.root / "out").exists()
