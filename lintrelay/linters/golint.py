from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from lintrelay.core.errors import ProcessError, SetupError
from lintrelay.domain.models import Finding, LintResult, RawToolResult
from lintrelay.parsers.util import get_rel_path

from .base import Linter, join_command

# Shell statuses for a command it could not find or execute
NOT_RUNNABLE = (126, 127)

PARSE_REGEX = re.compile(r"^(?P<path>.+):(?P<line>\d+):\d+: (?P<text>.+)$", re.MULTILINE)


class Golint(Linter):
    """https://github.com/golang/lint"""

    name = "golint"
    command = "golint"
    default_extensions = ("go",)
    supports_fix = False

    def verify_setup(self, dir: Path | str, prefix: str = "") -> None:
        # golint has no version flag and `-h` exits 2, so the probe only has to start
        if not self.runner.exists(self.command):
            self.log.error("%s executable %r not found", self.name, self.command, extra=self._extra())
            raise SetupError(self.name)
        probe = join_command(prefix, self.command, "-h")
        try:
            result = self.runner.run(probe, cwd=dir, ignore_errors=True)
        except ProcessError as exc:
            raise SetupError(self.name, "could not be started") from exc
        if result.status in NOT_RUNNABLE:
            self.log.error("%s probe exited %d: %s", self.name, result.status, result.stderr.strip(), extra=self._extra())
            raise SetupError(self.name, "could not be started")

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        self.require_extensions(extensions)
        self.warn_if_fix_unsupported(fix)
        return self.execute(dir, join_command(prefix, self.command, "-set_exit_status", args, '"./..."'))

    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult:
        errors = []
        for m in PARSE_REGEX.finditer(output.stdout or ""):
            line = max(int(m.group("line")), 1)
            errors.append(Finding(get_rel_path(dir, m.group("path")), line, line, m.group("text")))
        return LintResult(is_success=output.status == 0, error=tuple(errors))
