from __future__ import annotations

from lintrelay.core.config import settings
from lintrelay.core.util import SubprocessRunner
from lintrelay.linters.registry import LINTERS, LinterRegistry


def build_linter_registry() -> LinterRegistry:
    """Registry wired to the real process runner.

    To add a tool:
    1. Create an adapter in ``lintrelay/linters/`` subclassing ``Linter``
    2. Add it to ``LINTERS`` under its id (linters before formatters)
    """
    return LinterRegistry(LINTERS, runner=SubprocessRunner(timeout_sec=settings.PROCESS_TIMEOUT_SEC))
