# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Native functions exposed to Jsonnet through ``std.native``.

The engine only passes primitive values across the boundary, so functions that
work on structured data take it JSON-encoded (the ``*FromJson`` helpers).
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable

import yaml

from .errors import NativeArgumentError

NUMBER = (int, float)


@dataclass(frozen=True)
class NativeFunction:
    name: str
    params: tuple[str, ...]
    types: tuple[Any, ...]
    func: Callable[..., Any]

    def __call__(self, *args: Any) -> Any:
        if len(args) != len(self.params):
            raise NativeArgumentError(
                f"{self.name}: expected {len(self.params)} argument(s), got {len(args)}"
            )
        for param, expected, value in zip(self.params, self.types, args):
            # bool is an int subclass
            if not isinstance(value, expected) or (expected is NUMBER and isinstance(value, bool)):
                raise NativeArgumentError(
                    f"{self.name}: argument '{param}' has unexpected type {type(value).__name__}"
                )
        return self.func(*args)


def parse_json(data: str) -> Any:
    return json.loads(data)


class _JSONCompatibleLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as strings, as JSON has no date type."""


_JSONCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _json_key(key: Any) -> str:
    return key if isinstance(key, str) else json.dumps(key)


def _to_json_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {_json_key(k): _to_json_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_json_value(v) for v in value]
    return value


def parse_yaml(data: str) -> list[Any]:
    """
    Decode every document of a YAML stream; empty documents are skipped.

    Values follow JSON rules: mapping keys become strings (``1: a`` gives
    ``{"1": "a"}``) and unquoted dates stay strings.
    """
    return [_to_json_value(doc) for doc in yaml.load_all(data, Loader=_JSONCompatibleLoader) if doc is not None]


def _reindent(data: str, indent: int) -> str:
    # Rewrites whitespace only; number and string tokens are copied verbatim.
    out: list[str] = []
    depth = 0
    in_string = False
    escaped = False
    opened = False

    def newline(level: int) -> None:
        out.append("\n" + " " * (indent * level))

    for ch in data:
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch in " \t\r\n":
            continue
        if opened and ch not in "]}":
            opened = False
            depth += 1
            newline(depth)
        if ch in "{[":
            out.append(ch)
            opened = True
        elif ch in "}]":
            if opened:
                opened = False
            else:
                depth -= 1
                newline(depth)
            out.append(ch)
        elif ch == ",":
            out.append(ch)
            newline(depth)
        elif ch == ":":
            out.append(": ")
        else:
            if ch == '"':
                in_string = True
            out.append(ch)
    return "".join(out)


def manifest_json_from_json(data: str, indent: float) -> str:
    """Re-indent a JSON document, keeping its tokens and key order untouched."""
    data = data.strip()
    json.loads(data)  # rejects malformed input
    return _reindent(data, int(indent)) + "\n"


def manifest_yaml_from_json(data: str) -> str:
    decoded = json.loads(data)
    return yaml.safe_dump(decoded, default_flow_style=False, allow_unicode=True)


def escape_string_regex(value: str) -> str:
    return re.escape(value)


def regex_match(regex: str, string: str) -> bool:
    return re.search(regex, string) is not None


def regex_subst(regex: str, src: str, repl: str) -> str:
    return re.compile(regex).sub(repl, src)


NATIVE_FUNCTIONS: tuple[NativeFunction, ...] = (
    NativeFunction("parseJson", ("json",), (str,), parse_json),
    NativeFunction("parseYaml", ("yaml",), (str,), parse_yaml),
    NativeFunction("manifestJsonFromJson", ("json", "indent"), (str, NUMBER), manifest_json_from_json),
    NativeFunction("manifestYamlFromJson", ("json",), (str,), manifest_yaml_from_json),
    NativeFunction("escapeStringRegex", ("str",), (str,), escape_string_regex),
    NativeFunction("regexMatch", ("regex", "string"), (str, str), regex_match),
    NativeFunction("regexSubst", ("regex", "src", "repl"), (str, str, str), regex_subst),
)


def native_callbacks(functions: tuple[NativeFunction, ...] = NATIVE_FUNCTIONS) -> dict[str, tuple[tuple[str, ...], Callable[..., Any]]]:
    """Build the ``native_callbacks`` mapping expected by ``_jsonnet``."""
    return {fn.name: (fn.params, fn) for fn in functions}
