from __future__ import annotations

from pathlib import Path
from typing import Sequence

from lintrelay.core.errors import ParseError, ToolError
from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.structured import load_json
from lintrelay.parsers.util import get_rel_path

from .base import Linter, join_command


class ESLint(Linter):
    """https://eslint.org"""

    name = "ESLint"
    command = "eslint"
    default_extensions = ("js",)
    version_flag = "-v"

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        ext_arg = ",".join(f".{ext}" for ext in extensions)
        cmd = join_command(
            prefix,
            self.command,
            f"--ext {ext_arg}" if ext_arg else "",
            "--fix" if fix else "",
            "--no-color --format json",
            args,
            '"."',
        )
        return self.execute(dir, cmd)

    def result_for_message(self, path: str, msg: dict) -> Finding:
        if isinstance(msg, dict) and msg.get("fatal"):
            raise ToolError(f"{self.name} error: {msg.get('message')}")
        try:
            line = int(msg.get("line") or 1)
            return Finding(
                path=path,
                first_line=line,
                last_line=int(msg.get("endLine") or line),
                message=f"{msg.get('message')} ({msg.get('ruleId')})",
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed {self.name} message in {path}: {msg!r}") from exc

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        # [{"filePath": "/abs/a.js", "messages": [{"line": 1, "endLine": 1, "message": "...",
        #   "ruleId": "no-unused-vars", "severity": 2, "fatal": false}]}]
        payload = load_json(output.stdout, self.name) or []
        if not isinstance(payload, list):
            raise ParseError(f"Expected a list of {self.name} file results")

        warnings: list[Finding] = []
        errors: list[Finding] = []
        for file_result in payload:
            try:
                path = get_rel_path(dir, file_result.get("filePath") or "")
                messages = list(file_result.get("messages") or [])
            except (AttributeError, TypeError) as exc:
                raise ParseError(f"Malformed {self.name} file result: {file_result!r}") from exc

            for msg in messages:
                finding = self.result_for_message(path, msg)
                if msg.get("severity") == 1:
                    warnings.append(finding)
                elif msg.get("severity") == 2:
                    errors.append(finding)

        return LintResult(
            is_success=output.status == 0,
            warning=tuple(warnings),
            error=tuple(errors),
        )
