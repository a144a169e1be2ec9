from __future__ import annotations

from pathlib import Path
from typing import Sequence

from lintrelay.domain.models import LintResult, RawToolResult
from lintrelay.parsers.diff import parse_errors_from_diff

from .base import Linter, join_command


class Black(Linter):
    """https://black.readthedocs.io"""

    name = "Black"
    command = "black"
    kind = "formatter"
    default_extensions = ("py",)

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        include = f'--include "^.+\\.({"|".join(extensions)})$"' if extensions else ""
        cmd = join_command(prefix, self.command, "" if fix else "--check --diff", include, args, '"."')
        return self.execute(dir, cmd)

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        # --check exits 1 when a file would be reformatted; the diff says where
        errors = parse_errors_from_diff(output.stdout, dir)
        return LintResult(is_success=output.status == 0, error=tuple(errors))
