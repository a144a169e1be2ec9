from __future__ import annotations

from pathlib import Path
from typing import Sequence

from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.util import get_rel_path

from .base import Linter, join_command

FORMAT_MESSAGE = "There are issues with this file's formatting, please run Prettier to fix the errors"


class Prettier(Linter):
    """https://prettier.io"""

    name = "Prettier"
    command = "prettier"
    kind = "formatter"
    default_extensions = (
        "css", "html", "js", "json", "jsx", "md", "sass", "scss", "ts", "tsx", "vue", "yaml", "yml",
    )

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        exts = list(extensions) or list(self.default_extensions)
        pattern = f"**/*.{exts[0]}" if len(exts) == 1 else f"**/*.{{{','.join(exts)}}}"
        mode = "--write" if fix else "--list-different"
        return self.execute(dir, join_command(prefix, self.command, mode, "--no-color", args, f'"{pattern}"'))

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        if output.status == 0:
            return LintResult.success()

        # --list-different prints one unformatted path per line
        errors = tuple(
            Finding(get_rel_path(dir, line.strip()), 1, 1, FORMAT_MESSAGE)
            for line in (output.stdout or "").splitlines()
            if line.strip()
        )
        return LintResult(is_success=False, error=errors)
