import logging

import pytest

from conftest import FakeRunner
from lintrelay.core.errors import ParseError, SetupError
from lintrelay.core.util import SubprocessRunner
from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.linters.api_linter import APILinter

MESSAGE = "RPCs must include HTTP definitions using the `google.api.http` annotation."

PROBLEMS_SAMPLE = f"""\
- file_path: sample.proto
  problems:
  - message: {MESSAGE}
    location:
      start_position:
        line_number: 12
        column_number: 5
      end_position:
        line_number: 12
        column_number: 70
    rule_id: core::0127::http-annotation
    rule_doc_uri: https://linter.aip.dev/127/http-annotation
"""

TWO_FILES = """\
- file_path: a.proto
  problems:
  - message: first
    location:
      start_position: {line_number: 1, column_number: 1}
      end_position: {line_number: 3, column_number: 2}
  - message: second
    location:
      start_position: {line_number: 7, column_number: 1}
      end_position: {line_number: 7, column_number: 9}
- file_path: b.proto
  problems:
  - message: third
    location:
      start_position: {line_number: 2, column_number: 1}
      end_position: {line_number: 4, column_number: 1}
"""


def test_parse_sample_output(tmp_path):
    result = APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(0, PROBLEMS_SAMPLE, ""))

    assert result == LintResult(
        is_success=False,
        warning=(),
        error=(Finding(path="sample.proto", first_line=12, last_line=12, message=MESSAGE),),
    )
    assert result.to_dict() == {
        "isSuccess": False,
        "warning": [],
        "error": [{"path": "sample.proto", "firstLine": 12, "lastLine": 12, "message": MESSAGE}],
    }


def test_parse_flattens_in_file_then_problem_order(tmp_path):
    result = APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(1, TWO_FILES, ""))

    assert [(f.path, f.message, f.first_line, f.last_line) for f in result.error] == [
        ("a.proto", "first", 1, 3),
        ("a.proto", "second", 7, 7),
        ("b.proto", "third", 2, 4),
    ]
    assert result.warning == ()


def test_parse_empty_stdout_is_success(tmp_path):
    result = APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(0, "", ""))
    assert result == LintResult(is_success=True, warning=(), error=())


def test_parse_stanza_without_problems(tmp_path):
    out = RawToolResult(0, "- file_path: clean.proto\n  problems: []\n", "")
    assert APILinter(FakeRunner()).parse_output(tmp_path, out).is_success is True


def test_nonzero_exit_without_findings_is_failure(tmp_path):
    # status and findings must both signal success
    result = APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(1, "", "boom"))
    assert result.is_success is False
    assert result.error == ()


def test_zero_exit_with_findings_is_failure(tmp_path):
    result = APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(0, PROBLEMS_SAMPLE, ""))
    assert result.is_success is False
    assert len(result.error) == 1


def test_parse_is_idempotent(tmp_path):
    linter = APILinter(FakeRunner())
    out = RawToolResult(1, TWO_FILES, "")
    assert linter.parse_output(tmp_path, out) == linter.parse_output(tmp_path, out)


def test_parse_malformed_yaml_raises(tmp_path):
    with pytest.raises(ParseError):
        APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(1, "- file_path: [unclosed", ""))


def test_parse_non_list_document_raises(tmp_path):
    with pytest.raises(ParseError, match="list"):
        APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(1, "file_path: a.proto\n", ""))


def test_parse_problem_without_location_raises(tmp_path):
    out = RawToolResult(1, "- file_path: a.proto\n  problems:\n  - message: oops\n", "")
    with pytest.raises(ParseError, match="a.proto"):
        APILinter(FakeRunner()).parse_output(tmp_path, out)


def test_parse_end_before_start_raises(tmp_path):
    out = RawToolResult(
        1,
        "- file_path: a.proto\n"
        "  problems:\n"
        "  - message: m\n"
        "    location:\n"
        "      start_position: {line_number: 9, column_number: 1}\n"
        "      end_position: {line_number: 0, column_number: 1}\n",
        "",
    )
    with pytest.raises(ParseError, match="a.proto"):
        APILinter(FakeRunner()).parse_output(tmp_path, out)


def test_parse_problems_not_a_list_raises(tmp_path):
    with pytest.raises(ParseError, match="problems"):
        APILinter(FakeRunner()).parse_output(tmp_path, RawToolResult(1, "- file_path: a.proto\n  problems: 3\n", ""))


def test_lint_without_proto_files_does_not_run_tool(tmp_path, runner):
    (tmp_path / "README.md").write_text("# nothing", encoding="utf-8")

    out = APILinter(runner).lint(tmp_path, ["proto"])

    assert out == RawToolResult(status=0, stdout="", stderr="")
    assert runner.commands == []


def test_lint_passes_discovered_files_quoted(tmp_path, runner):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.proto").write_text("syntax = 'proto3';", encoding="utf-8")
    (tmp_path / "sub" / "b.proto").write_text("syntax = 'proto3';", encoding="utf-8")
    (tmp_path / "c.txt").write_text("", encoding="utf-8")
    runner.results["api-linter"] = RawToolResult(0, PROBLEMS_SAMPLE, "")

    out = APILinter(runner).lint(tmp_path, ["proto"], args="--set-exit-status", prefix="docker exec ci")

    assert runner.commands == ["docker exec ci api-linter --set-exit-status a.proto sub/b.proto"]
    assert out.stdout == PROBLEMS_SAMPLE


def test_lint_quotes_file_names_for_the_shell(tmp_path, runner):
    (tmp_path / "my api.proto").write_text("", encoding="utf-8")
    (tmp_path / "x$(touch PWNED).proto").write_text("", encoding="utf-8")

    APILinter(runner).lint(tmp_path, ["proto"])

    assert runner.commands == ["api-linter 'my api.proto' 'x$(touch PWNED).proto'"]


def test_lint_does_not_run_substitutions_in_file_names(tmp_path):
    (tmp_path / "x$(touch PWNED).proto").write_text("", encoding="utf-8")

    out = APILinter(SubprocessRunner()).lint(tmp_path, ["proto"], prefix="echo")

    assert out.stdout.strip() == "api-linter x$(touch PWNED).proto"
    assert not (tmp_path / "PWNED").exists()


def test_lint_skips_hidden_directories(tmp_path, runner):
    for sub in (".git", "node_modules/.cache", "api"):
        (tmp_path / sub).mkdir(parents=True)
        (tmp_path / sub / "a.proto").write_text("", encoding="utf-8")
    (tmp_path / ".hidden.proto").write_text("", encoding="utf-8")

    APILinter(runner).lint(tmp_path, ["proto"])

    assert runner.commands == ["api-linter api/a.proto"]


def test_lint_nonzero_exit_is_returned_not_raised(tmp_path):
    (tmp_path / "a.proto").write_text("", encoding="utf-8")
    runner = FakeRunner({"api-linter": RawToolResult(1, PROBLEMS_SAMPLE, "")})

    assert APILinter(runner).lint(tmp_path, ["proto"]).status == 1


def test_lint_fix_logs_warning(tmp_path, runner, caplog):
    caplog.set_level(logging.WARNING)
    APILinter(runner).lint(tmp_path, ["proto"], fix=True)
    assert any("does not support auto-fixing" in r.getMessage() for r in caplog.records)


def test_lint_short_circuit_is_logged(tmp_path, runner, caplog):
    caplog.set_level(logging.INFO)
    APILinter(runner).lint(tmp_path, ["proto"])
    records = [r for r in caplog.records if "No *.proto files" in r.getMessage()]
    assert records and records[0].linter == "APILinter"


def test_verify_setup_runs_version_probe(tmp_path, runner):
    APILinter(runner).verify_setup(tmp_path, prefix="")
    assert runner.commands == ["api-linter --version"]


def test_verify_setup_missing_binary(tmp_path):
    runner = FakeRunner(installed=set())
    with pytest.raises(SetupError, match="APILinter") as exc:
        APILinter(runner).verify_setup(tmp_path)
    assert exc.value.linter == "APILinter"
    assert runner.commands == []


def test_verify_setup_failing_probe(tmp_path):
    runner = FakeRunner({"--version": RawToolResult(127, "", "not found")})
    with pytest.raises(SetupError, match="APILinter is not installed"):
        APILinter(runner).verify_setup(tmp_path, prefix="docker exec ci")
    assert runner.commands == ["docker exec ci api-linter --version"]
