"""Registry of tool adapters, keyed by short stable ids.

Formatters rewrite files, which moves the line numbers linter findings
point at. Whenever both kinds run together every linter has to finish
before the first formatter starts; ``LinterRegistry.order`` enforces that.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from lintrelay.core.util import ProcessRunner
from lintrelay.domain.models import LinterKind

from .api_linter import APILinter
from .base import Linter
from .black import Black
from .eslint import ESLint
from .flake8 import Flake8
from .gofmt import Gofmt
from .golint import Golint
from .mypy import Mypy
from .prettier import Prettier
from .rubocop import RuboCop
from .swift_format_lockwood import SwiftFormatLockwood

LINTERS: dict[str, type[Linter]] = {
    # Linters
    "apilinter": APILinter,
    "eslint": ESLint,
    "flake8": Flake8,
    "golint": Golint,
    "mypy": Mypy,
    "rubocop": RuboCop,
    # Formatters (run after linters)
    "black": Black,
    "gofmt": Gofmt,
    "prettier": Prettier,
    "swift_format_lockwood": SwiftFormatLockwood,
    # Alias of `swift_format_lockwood`, kept for older configs
    "swiftformat": SwiftFormatLockwood,
}


class LinterRegistry:
    def __init__(
        self,
        linters: Mapping[str, type[Linter]] = LINTERS,
        runner: ProcessRunner | None = None,
        log: logging.Logger | None = None,
    ):
        self._by_id = dict(linters)
        self.runner = runner
        self.log = log

    def list(self) -> list[str]:
        return list(self._by_id.keys())

    def get(self, linter_id: str) -> type[Linter]:
        try:
            return self._by_id[linter_id]
        except KeyError:
            available = ", ".join(self.list())
            raise KeyError(f"Unknown linter '{linter_id}'. Available: {available}") from None

    def kind(self, linter_id: str) -> LinterKind:
        return self.get(linter_id).kind

    def order(self, linter_ids: Iterable[str]) -> list[str]:
        """Stable partition: all linters first, then all formatters."""
        ids = list(linter_ids)
        return [i for i in ids if self.kind(i) == "linter"] + [i for i in ids if self.kind(i) == "formatter"]

    def create(self, linter_id: str) -> Linter:
        return self.get(linter_id)(runner=self.runner, log=self.log)
