from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from lintrelay.core.errors import ProcessError
from lintrelay.domain.models import RawToolResult

logger = logging.getLogger(__name__)

# Status reported for commands that were killed or never started
NO_STATUS = -1


def command_exists(name: str) -> bool:
    return shutil.which(name) is not None


def run_cmd(
    command: str,
    cwd: Path | str | None = None,
    ignore_errors: bool = False,
    timeout_sec: int | None = None,
) -> RawToolResult:
    """Run ``command`` through the shell in ``cwd``.

    Non-zero exits raise ``ProcessError`` unless ``ignore_errors`` is set,
    in which case the status is returned for the caller to interpret. A
    command that never produced an exit status (missing ``cwd``, timeout)
    always raises ``ProcessError``.
    """
    try:
        p = subprocess.run(
            command,
            shell=True,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            timeout=timeout_sec,
        )
    except subprocess.TimeoutExpired as exc:
        logger.warning("Command timed out after %ss: %s", timeout_sec, command)
        raise ProcessError(command, NO_STATUS, f"timed out after {timeout_sec}s") from exc
    except OSError as exc:
        logger.warning("Command could not start: %s (%s)", command, exc)
        raise ProcessError(command, NO_STATUS, str(exc)) from exc

    result = RawToolResult(p.returncode, p.stdout or "", p.stderr or "")
    if result.status != 0 and not ignore_errors:
        raise ProcessError(command, result.status, result.stderr)
    return result


class ProcessRunner(Protocol):
    def run(self, command: str, cwd: Path | str | None = None, ignore_errors: bool = False) -> RawToolResult: ...

    def exists(self, name: str) -> bool: ...


class SubprocessRunner:
    """Default runner backed by ``subprocess`` and ``shutil.which``."""

    def __init__(self, timeout_sec: int | None = None):
        self.timeout_sec = timeout_sec

    def run(self, command: str, cwd: Path | str | None = None, ignore_errors: bool = False) -> RawToolResult:
        return run_cmd(command, cwd=cwd, ignore_errors=ignore_errors, timeout_sec=self.timeout_sec)

    def exists(self, name: str) -> bool:
        return command_exists(name)
