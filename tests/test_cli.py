"""
CLI tests for graph-redactor.

Purpose:
- `inspect` prints the field plan (kind + sensitivity) for a type.
- `redact` validates JSON into a type, sanitizes it and prints JSON.
- Configuration/usage errors exit with code 2 and a one-line message.
"""

from __future__ import annotations

import json
import logging

import pytest

from graph_redactor.cli.logging_setup import cli_log_level
from graph_redactor.cli.main import EXIT_USAGE, load_target, main
from sample_models import Account


def test_inspect_json(capsys):
    rc = main(["inspect", "sample_models:Account", "--json"])

    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["type"] == "sample_models.Account"
    fields = {f["name"]: f for f in payload["fields"]}
    assert fields["password"] == {"name": "password", "type": "str", "kind": "leaf", "sensitive": True}
    assert fields["address"]["kind"] == "composite"
    assert fields["address"]["sensitive"] is False


def test_inspect_pretty(capsys):
    rc = main(["inspect", "sample_models:Credentials"])

    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "sample_models.Credentials"
    assert any(line.strip().startswith("password") and line.endswith("SENSITIVE") for line in out)
    assert any(line.strip().startswith("user") and not line.endswith("SENSITIVE") for line in out)


def test_redact_file(tmp_path, capsys):
    src = tmp_path / "root.json"
    src.write_text(
        json.dumps({"not_sensitive": "A", "sensitive": "B", "child": {"sensitive": "C"}}),
        encoding="utf-8",
    )

    rc = main(["redact", "sample_models:Root", "--input", str(src)])

    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["not_sensitive"] == "A"
    assert out["sensitive"] == "[REDACTED]"
    assert out["child"]["sensitive"] == "[REDACTED]"


def test_redact_max_depth(tmp_path, capsys):
    src = tmp_path / "chain.json"
    src.write_text(
        json.dumps({"secret": "one", "next": {"secret": "two", "next": {"secret": "three"}}}),
        encoding="utf-8",
    )

    rc = main(["redact", "sample_models:Level1", "-i", str(src), "--max-depth", "2"])

    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["secret"] == "[REDACTED]"
    assert out["next"]["secret"] == "[REDACTED]"
    assert out["next"]["next"]["secret"] == "three"


def test_redact_invalid_json_is_usage_error(tmp_path, capsys):
    src = tmp_path / "bad.json"
    src.write_text('{"not_sensitive": "A"}', encoding="utf-8")

    rc = main(["redact", "sample_models:Root", "--input", str(src)])

    assert rc == EXIT_USAGE
    assert capsys.readouterr().err.startswith("error:")


@pytest.mark.parametrize(
    "target",
    ["sample_models", "sample_models:Missing", "sample_models:make_chain", "no_such_module_xyz:Thing"],
)
def test_bad_target_is_usage_error(target, capsys):
    rc = main(["inspect", target])

    assert rc == EXIT_USAGE
    assert "error:" in capsys.readouterr().err


def test_load_target_resolves_class():
    assert load_target("sample_models:Account") is Account


@pytest.fixture
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "trace, quiet, expected",
    [
        (False, False, logging.WARNING),
        (True, False, logging.DEBUG),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_cli_log_level(trace, quiet, expected):
    assert cli_log_level(trace=trace, quiet=quiet) == expected


@pytest.mark.usefixtures("_restore_root_logging")
def test_trace_logs_redaction_on_stderr_only(tmp_path, capsys):
    src = tmp_path / "root.json"
    src.write_text(json.dumps({"not_sensitive": "A", "sensitive": "B"}), encoding="utf-8")

    rc = main(["--trace", "redact", "sample_models:Root", "--input", str(src)])

    assert rc == 0
    captured = capsys.readouterr()
    assert "[DEBUG] graph_redactor.cli: redacting type=Root" in captured.err
    assert json.loads(captured.out)["sensitive"] == "[REDACTED]"


@pytest.mark.usefixtures("_restore_root_logging")
def test_quiet_hides_debug(tmp_path, capsys):
    src = tmp_path / "root.json"
    src.write_text(json.dumps({"not_sensitive": "A", "sensitive": "B"}), encoding="utf-8")

    rc = main(["--quiet", "redact", "sample_models:Root", "--input", str(src)])

    assert rc == 0
    assert capsys.readouterr().err == ""
    assert logging.getLogger().level == logging.ERROR
