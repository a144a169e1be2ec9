"""Adapter for Google's API linter (https://linter.aip.dev/).

api-linter only checks the ``.proto`` files it is given, so this adapter
finds them itself. Its default output is YAML, one stanza per file::

    - file_path: some/path/to/a.proto
      problems:
      - message: Delete methods should include `(google.api.method_signature) = "name"`
        location:
          start_position:
            line_number: 184
            column_number: 3
          end_position:
            line_number: 219
            column_number: 3
        rule_id: core::0135::method-signature
        rule_doc_uri: https://linter.aip.dev/135/method-signature
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypedDict

from lintrelay.core.errors import ParseError
from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.structured import load_yaml

from .base import SelfDiscoveringLinter


class APILintCodePosition(TypedDict):
    line_number: int
    column_number: int


class APILintSourceLocation(TypedDict):
    start_position: APILintCodePosition
    end_position: APILintCodePosition


class APILintProblemSpec(TypedDict):
    message: str
    rule_id: str
    rule_doc_uri: str
    location: APILintSourceLocation


class APILintResultStanza(TypedDict):
    file_path: str
    problems: list[APILintProblemSpec]


class APILinter(SelfDiscoveringLinter):
    name = "APILinter"
    command = "api-linter"
    default_extensions = ("proto",)
    suffix = "proto"
    supports_fix = False

    def result_for_problem(self, path: str, problem: APILintProblemSpec) -> Finding:
        try:
            location = problem["location"]
            finding = Finding(
                path=path,
                first_line=int(location["start_position"]["line_number"]),
                last_line=int(location["end_position"]["line_number"]),
                message=str(problem["message"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed {self.name} problem in {path}: {problem!r}") from exc
        self.log.debug("Reporting: %s", finding.to_dict(), extra=self._extra())
        return finding

    def map_problems(self, payload: list[APILintResultStanza]) -> list[Finding]:
        findings: list[Finding] = []
        for stanza in payload:
            if not isinstance(stanza, dict) or "file_path" not in stanza:
                raise ParseError(f"Malformed {self.name} stanza: {stanza!r}")
            problems = stanza.get("problems") or []
            if not isinstance(problems, list):
                raise ParseError(f"Malformed {self.name} problems for {stanza['file_path']}: {problems!r}")
            for problem in problems:
                findings.append(self.result_for_problem(stanza["file_path"], problem))
        return findings

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        payload: Any = load_yaml(output.stdout, self.name) or []
        if not isinstance(payload, list):
            raise ParseError(f"Expected a list of {self.name} result stanzas, got {type(payload).__name__}")

        errors = self.map_problems(payload)
        return LintResult(
            is_success=output.status == 0 and len(errors) == 0,
            error=tuple(errors),
        )
