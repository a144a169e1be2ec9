from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.util import get_rel_path

from .base import Linter, join_command

# path/to/file.py:12:5: E225 missing whitespace around operator
PARSE_REGEX = re.compile(r"^(?P<path>.*):(?P<line>\d+):\d+: (?P<rule>\w*) (?P<text>.*)$", re.MULTILINE)


class Flake8(Linter):
    """https://flake8.pycqa.org"""

    name = "Flake8"
    command = "flake8"
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
        patterns = ",".join(f'"**/*.{ext}"' for ext in extensions)
        cmd = join_command(
            prefix,
            self.command,
            "--extend-exclude node_modules",
            f"--filename {patterns}" if patterns else "",
            args,
            '"."',
        )
        return self.execute(dir, cmd)

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        errors = []
        for m in PARSE_REGEX.finditer(output.stdout or ""):
            # E902 and other file-level codes are reported on line 0
            line = max(int(m.group("line")), 1)
            errors.append(
                Finding(
                    path=get_rel_path(dir, m.group("path")),
                    first_line=line,
                    last_line=line,
                    message=f"{m.group('text')} ({m.group('rule')})",
                )
            )
        return LintResult(is_success=output.status == 0, error=tuple(errors))
