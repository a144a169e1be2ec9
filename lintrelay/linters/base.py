"""Common contract for every tool adapter.

An adapter wraps one external linter or formatter and exposes three
steps, always called in this order by a run:

1. ``verify_setup``: the executable exists and answers a version probe
2. ``lint``: build one shell command, run it, return the raw output
3. ``parse_output``: turn the raw output into a ``LintResult``

Adapters hold no state between calls besides their injected collaborators
(process runner and logger), so one instance can serve many runs.
"""

from __future__ import annotations

import logging
import shlex
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Sequence

from lintrelay.core.errors import ProcessError, SetupError
from lintrelay.core.util import ProcessRunner, SubprocessRunner
from lintrelay.domain.models import LinterKind, LintResult, RawToolResult


def join_command(*parts: str) -> str:
    """Join command fragments, skipping empty ones."""
    return " ".join(p.strip() for p in parts if p and p.strip())


def quote_paths(paths: Sequence[str]) -> str:
    """Shell-quote each path; file names come from the linted repo."""
    return " ".join(shlex.quote(p) for p in paths)


class Linter(ABC):
    name: ClassVar[str]
    command: ClassVar[str]
    kind: ClassVar[LinterKind] = "linter"
    default_extensions: ClassVar[tuple[str, ...]] = ()
    version_flag: ClassVar[str] = "--version"
    supports_fix: ClassVar[bool] = True

    def __init__(self, runner: ProcessRunner | None = None, log: logging.Logger | None = None):
        self.runner = runner or SubprocessRunner()
        self.log = log or logging.getLogger(type(self).__module__)

    def _extra(self, **fields) -> dict:
        return {"linter": self.name, **fields}

    def verify_setup(self, dir: Path | str, prefix: str = "") -> None:
        if not self.runner.exists(self.command):
            self.log.error("%s executable %r not found", self.name, self.command, extra=self._extra())
            raise SetupError(self.name)

        try:
            self.runner.run(join_command(prefix, self.command, self.version_flag), cwd=dir)
        except ProcessError as exc:
            self.log.error("%s version probe failed: %s", self.name, exc, extra=self._extra())
            raise SetupError(self.name) from exc

    @abstractmethod
    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult: ...

    @abstractmethod
    def parse_output(self, dir: Path | str, output: RawToolResult) -> LintResult: ...

    # ── helpers for subclasses ───────────────────────────────────

    def execute(self, dir: Path | str, command: str) -> RawToolResult:
        """Run the lint command; a non-zero exit is a result, not a failure."""
        self.log.debug("Running command", extra=self._extra(command=command, cwd=str(dir)))
        result = self.runner.run(command, cwd=dir, ignore_errors=True)
        self.log.debug(
            "Command finished",
            extra=self._extra(
                command=command,
                status=result.status,
                stdout_chars=len(result.stdout),
                stderr_chars=len(result.stderr),
            ),
        )
        return result

    def warn_if_fix_unsupported(self, fix: bool) -> None:
        if fix and not self.supports_fix:
            self.log.warning("%s does not support auto-fixing", self.name, extra=self._extra())

    def require_extensions(self, extensions: Sequence[str]) -> None:
        """For tools whose file selection cannot be configured."""
        if list(extensions) != list(self.default_extensions):
            raise ValueError(f"{self.name} error: File extensions are not configurable")

    def discover_files(self, dir: Path | str, suffix: str) -> list[str]:
        """Recursively match ``**/*.<suffix>`` under ``dir``.

        Paths come back relative to ``dir`` since the tool runs there.
        Hidden files and anything under a hidden directory (``.git``,
        ``.venv``) are skipped.
        """
        root = Path(dir) if dir else Path(".")
        files = []
        for p in root.glob(f"**/*.{suffix}"):
            rel = p.relative_to(root)
            if p.is_file() and not any(part.startswith(".") for part in rel.parts):
                files.append(rel.as_posix())
        files.sort()
        self.log.debug("Matched %d *.%s files", len(files), suffix, extra=self._extra(files=files))
        return files


class SelfDiscoveringLinter(Linter):
    """Adapter for tools without recursive file discovery.

    Files ending in ``suffix`` are found under the lint root and passed
    explicitly. With no matching files the tool is not started at all.
    """

    suffix: ClassVar[str]

    def lint(
        self,
        dir: Path | str,
        extensions: Sequence[str],
        args: str = "",
        fix: bool = False,
        prefix: str = "",
    ) -> RawToolResult:
        self.warn_if_fix_unsupported(fix)

        files = self.discover_files(dir, self.suffix)
        if not files:
            self.log.info("No *.%s files found, skipping %s", self.suffix, self.name, extra=self._extra(files=[]))
            return RawToolResult.empty()

        return self.execute(dir, join_command(prefix, self.build_command(args, fix), quote_paths(files)))

    def build_command(self, args: str, fix: bool) -> str:
        return join_command(self.command, args)
