"""
CLI entrypoint for graph-redactor.

    graph-redactor inspect myapp.models:Account [--json]
    graph-redactor redact  myapp.models:Account --input account.json [--max-depth 2]

`inspect` prints how each field of a type is treated (kind, sensitivity).
`redact` validates a JSON document into the type, sanitizes it and prints JSON.

Output goes to stdout via oprint().
Diagnostics/trace/debug go to stderr via logging.
"""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from typing import Any, Sequence

from pydantic import TypeAdapter, ValidationError

from graph_redactor.cli.logging_setup import setup_cli_logging
from graph_redactor.config.settings import get_settings
from graph_redactor.errors import RedactionConfigError
from graph_redactor.fields import describe_fields
from graph_redactor.serialization import to_json

logger = logging.getLogger("graph_redactor.cli")

EXIT_USAGE = 2


def oprint(*args, **kwargs) -> None:
    """
    User-facing output printer (stdout).
    """
    try:
        print(*args, file=sys.stdout, flush=True, **kwargs)
    except BrokenPipeError:
        raise SystemExit(0)


def load_target(target: str) -> type:
    """
    Resolve "package.module:Qualified.Name" to a class.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Target must look like 'package.module:TypeName', got {target!r}")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import {module_name!r}: {e}") from e

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"{module_name!r} has no attribute {qualname!r}") from None

    if not isinstance(obj, type):
        raise ValueError(f"{target!r} is not a class")
    return obj


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__name__
    return repr(tp).replace("typing.", "")


def field_plan(cls: type) -> list[dict[str, Any]]:
    return [
        {
            "name": d.name,
            "type": _type_name(d.annotation),
            "kind": d.kind.value,
            "sensitive": d.sensitive,
        }
        for d in describe_fields(cls)
    ]


def _print_plan(cls: type, plan: list[dict[str, Any]]) -> None:
    oprint(f"{cls.__module__}.{cls.__qualname__}")
    if not plan:
        oprint("  (no fields)")
        return

    width = max(len(row["name"]) for row in plan)
    for row in plan:
        flag = "SENSITIVE" if row["sensitive"] else ""
        oprint(f"  {row['name']:<{width}}  {row['kind']:<9}  {row['type']}  {flag}".rstrip())


def _cmd_inspect(args: argparse.Namespace) -> int:
    cls = load_target(args.target)
    plan = field_plan(cls)

    if args.json:
        oprint(json.dumps({"type": f"{cls.__module__}.{cls.__qualname__}", "fields": plan}, indent=2))
    else:
        _print_plan(cls, plan)
    return 0


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def _cmd_redact(args: argparse.Namespace) -> int:
    cls = load_target(args.target)

    # Describe first so declaration errors surface before any parsing work.
    describe_fields(cls)

    value = TypeAdapter(cls).validate_json(_read_input(args.input))

    options = get_settings().options()
    if args.max_depth is not None:
        options = options.with_depth(args.max_depth)

    logger.debug("redacting type=%s max_depth=%d", cls.__qualname__, options.max_depth)
    oprint(to_json(value, options, indent=args.indent))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="graph-redactor",
        description="Inspect and redact sensitive fields of typed object graphs.",
    )
    p.add_argument("--trace", action="store_true", help="Enable DEBUG logs on stderr")
    p.add_argument("--quiet", action="store_true", help="Only ERROR logs on stderr")

    sub = p.add_subparsers(dest="command", required=True)

    p_inspect = sub.add_parser("inspect", help="Show how each field of a type is treated")
    p_inspect.add_argument("target", help="package.module:TypeName")
    p_inspect.add_argument("--json", action="store_true", help="Emit the field plan as JSON")
    p_inspect.set_defaults(func=_cmd_inspect)

    p_redact = sub.add_parser("redact", help="Validate JSON into a type, redact it, print JSON")
    p_redact.add_argument("target", help="package.module:TypeName")
    p_redact.add_argument("--input", "-i", default=None, help="JSON file (default: stdin)")
    p_redact.add_argument("--max-depth", type=int, default=None, help="Override the configured max depth")
    p_redact.add_argument("--indent", type=int, default=None, help="Pretty-print with this indent")
    p_redact.set_defaults(func=_cmd_redact)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_cli_logging(trace=args.trace, quiet=args.quiet)

    try:
        return args.func(args)
    except (RedactionConfigError, ValidationError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
