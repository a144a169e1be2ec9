from __future__ import annotations

from pathlib import Path
from typing import Sequence

from lintrelay.core.errors import ProcessError, SetupError
from lintrelay.domain.models import LintResult, RawToolResult
from lintrelay.parsers.diff import parse_errors_from_diff

from .base import Linter, join_command


class Gofmt(Linter):
    """https://pkg.go.dev/cmd/gofmt"""

    name = "gofmt"
    command = "gofmt"
    kind = "formatter"
    default_extensions = ("go",)

    def verify_setup(self, dir: Path | str, prefix: str = "") -> None:
        # gofmt ships with the Go toolchain and has no version flag of its own
        if not self.runner.exists(self.command):
            self.log.error("%s executable %r not found", self.name, self.command, extra=self._extra())
            raise SetupError(self.name)
        try:
            self.runner.run(join_command(prefix, "go version"), cwd=dir)
        except ProcessError as exc:
            raise SetupError(self.name, "is not working: `go version` failed") from exc

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        self.require_extensions(extensions)
        mode = "-w" if fix else "-d -e"
        return self.execute(dir, join_command(prefix, self.command, "-s", mode, args, '"."'))

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        # gofmt exits 0 whether or not it prints a diff
        errors = parse_errors_from_diff(output.stdout, dir)
        return LintResult(is_success=len(errors) == 0, error=tuple(errors))
