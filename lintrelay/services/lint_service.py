from __future__ import annotations

import logging

from lintrelay.core.config import settings
from lintrelay.core.errors import LintRelayError, SetupError
from lintrelay.domain.models import LinterRun, Summary
from lintrelay.domain.schemas import LintRequest
from lintrelay.linters.registry import LinterRegistry

logger = logging.getLogger(__name__)


class LintService:
    """
    Orchestrates: order requests → verify setup → lint → parse, per linter.

    Runs are sequential. One linter failing is recorded in its ``LinterRun``
    and never stops the others. Fix-mode requests against the same directory
    must not be run through two services at once.
    """

    def __init__(self, registry: LinterRegistry):
        self.linters = registry

    def run(self, requests: list[LintRequest]) -> list[LinterRun]:
        by_id: dict[str, list[LintRequest]] = {}
        for req in requests:
            self.linters.get(req.linter)
            by_id.setdefault(req.linter, []).append(req)

        ordered = [by_id[i].pop(0) for i in self.linters.order(r.linter for r in requests)]
        return [self.run_one(req) for req in ordered]

    def run_one(self, req: LintRequest) -> LinterRun:
        linter = self.linters.create(req.linter)
        kind = self.linters.kind(req.linter)
        dir = req.dir or settings.LINT_ROOT
        prefix = req.prefix if req.prefix is not None else settings.COMMAND_PREFIX
        extensions = req.extensions if req.extensions is not None else list(linter.default_extensions)
        extra = {"linter": req.linter}

        try:
            linter.verify_setup(dir, prefix)
        except SetupError as e:
            return LinterRun(req.linter, kind, "setup_failed", error=str(e))

        logger.info("Running %s ...", linter.name, extra=extra)
        try:
            output = linter.lint(dir, extensions, req.args, req.fix, prefix)
            result = linter.parse_output(dir, output)
        except (LintRelayError, ValueError) as e:
            logger.exception("%s failed", linter.name, extra=extra)
            return LinterRun(req.linter, kind, "failed", error=str(e))

        logger.info(
            "%s finished",
            linter.name,
            extra={**extra, "errors": len(result.error), "warnings": len(result.warning)},
        )
        return LinterRun(req.linter, kind, "ok", result=result)

    @staticmethod
    def summarize(runs: list[LinterRun]) -> Summary:
        return Summary(
            total_warnings=sum(len(r.result.warning) for r in runs if r.result),
            total_errors=sum(len(r.result.error) for r in runs if r.result),
            failed_linters=[r.linter for r in runs if not r.is_success],
        )

    @staticmethod
    def is_success(runs: list[LinterRun]) -> bool:
        return all(r.is_success for r in runs)
