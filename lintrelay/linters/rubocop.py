from __future__ import annotations

from pathlib import Path
from typing import Sequence

from lintrelay.core.errors import ParseError
from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.structured import load_json
from lintrelay.parsers.util import get_rel_path, remove_trailing_period

from .base import Linter, join_command

SEVERITY_MAP = {
    "convention": "warning",
    "refactor": "warning",
    "warning": "warning",
    "error": "error",
    "fatal": "error",
}


class RuboCop(Linter):
    """https://rubocop.org"""

    name = "RuboCop"
    command = "rubocop"
    default_extensions = ("rb",)

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        cmd = join_command(prefix, self.command, "--format json", "--auto-correct" if fix else "", args, '"."')
        return self.execute(dir, cmd)

    def result_for_offense(self, path: str, offense: dict) -> Finding:
        location = offense.get("location") or {}
        first = int(location.get("start_line") or location.get("line") or 1)
        return Finding(
            path=path,
            first_line=first,
            last_line=int(location.get("last_line") or first),
            message=f"{remove_trailing_period(offense.get('message') or '')} ({offense.get('cop_name')})",
        )

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        payload = load_json(output.stdout, self.name) or {}
        files = payload.get("files") if isinstance(payload, dict) else None
        if files is None:
            if payload:
                raise ParseError(f"{self.name} output has no 'files' list")
            files = []

        buckets: dict[str, list[Finding]] = {"warning": [], "error": []}
        try:
            for file in files:
                path = get_rel_path(dir, file.get("path") or "")
                for offense in file.get("offenses") or []:
                    if offense.get("corrected"):
                        continue
                    buckets[SEVERITY_MAP.get(offense.get("severity"), "error")].append(self.result_for_offense(path, offense))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed {self.name} output: {exc}") from exc

        return LintResult(
            is_success=output.status == 0,
            warning=tuple(buckets["warning"]),
            error=tuple(buckets["error"]),
        )
