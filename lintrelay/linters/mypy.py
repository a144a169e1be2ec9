from __future__ import annotations

import re
import shlex
from pathlib import Path
from typing import Sequence

from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.util import get_rel_path

from .base import Linter, join_command

# pkg/mod.py:10: error: Incompatible return value type  [return-value]
# pkg/mod.py:10:5: note: Revealed type is "builtins.int"
PARSE_REGEX = re.compile(
    r"^(?P<path>[^:\n]+):(?P<line>\d+):(?:\d+:)? (?P<level>error|warning|note): (?P<text>.*)$",
    re.MULTILINE,
)


class Mypy(Linter):
    """https://mypy-lang.org"""

    name = "Mypy"
    command = "mypy"
    default_extensions = ("py",)
    supports_fix = False

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        self.warn_if_fix_unsupported(fix)
        # mypy needs a target; file or package names in args replace the default "."
        names_target = any(not token.startswith("-") for token in shlex.split(args))
        target = "" if names_target else '"."'
        return self.execute(dir, join_command(prefix, self.command, "--no-color-output", "--no-error-summary", args, target))

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        warnings: list[Finding] = []
        errors: list[Finding] = []
        for m in PARSE_REGEX.finditer(output.stdout or ""):
            line = max(int(m.group("line")), 1)
            finding = Finding(get_rel_path(dir, m.group("path")), line, line, m.group("text").strip())
            (errors if m.group("level") == "error" else warnings).append(finding)
        return LintResult(is_success=output.status == 0, warning=tuple(warnings), error=tuple(errors))
