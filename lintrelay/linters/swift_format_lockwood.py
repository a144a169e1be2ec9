from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.util import get_rel_path

from .base import Linter, join_command

# /abs/Sources/App.swift:3:1: warning: (indent) Indent code in accordance with the scope level.
PARSE_REGEX = re.compile(r"^(?P<path>.*):(?P<line>\d+):\d+: (?P<level>warning|error): (?P<text>.*)$", re.MULTILINE)


class SwiftFormatLockwood(Linter):
    """SwiftFormat by Nick Lockwood (https://github.com/nicklockwood/SwiftFormat)."""

    name = "SwiftFormat"
    command = "swiftformat"
    kind = "formatter"
    default_extensions = ("swift",)

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        self.require_extensions(extensions)
        return self.execute(dir, join_command(prefix, self.command, "" if fix else "--lint", args, '"."'))

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        # --lint reports on stderr
        text = "\n".join(s for s in (output.stdout, output.stderr) if s)
        warnings: list[Finding] = []
        errors: list[Finding] = []
        for m in PARSE_REGEX.finditer(text):
            line = max(int(m.group("line")), 1)
            finding = Finding(get_rel_path(dir, m.group("path")), line, line, m.group("text"))
            (errors if m.group("level") == "error" else warnings).append(finding)
        return LintResult(is_success=output.status == 0, warning=tuple(warnings), error=tuple(errors))
