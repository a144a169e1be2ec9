from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from lintrelay.core.containers import build_linter_registry
from lintrelay.domain.schemas import LintRunRequest
from lintrelay.services.lint_service import LintService

router = APIRouter(prefix="/api", tags=["lint"])

# Build once at module level
_lint_service = LintService(build_linter_registry())


# ── Response schemas ──────────────────────────────────────────────
class LinterInfo(BaseModel):
    id: str
    name: str
    kind: str


class RunSummary(BaseModel):
    total_warnings: int
    total_errors: int
    failed_linters: list[str]


class LintRunResponse(BaseModel):
    """Outcome of a multi-linter run."""

    success: bool
    summary: RunSummary
    runs: list[dict[str, Any]] = Field(..., description="Per-linter status and normalized result.")


# ── Endpoints ─────────────────────────────────────────────────────
@router.get("/linters", response_model=list[LinterInfo], summary="List available linters")
def list_linters() -> list[dict[str, str]]:
    """Return every registered linter id, including aliases."""
    registry = _lint_service.linters
    return [{"id": i, "name": registry.get(i).name, "kind": registry.kind(i)} for i in registry.list()]


@router.post("/lint", response_model=LintRunResponse, summary="Run linters")
def lint(req: LintRunRequest) -> dict[str, Any]:
    """Run the requested linters and return normalized results.

    Linters always run before formatters, whatever the request order.
    A linter that is missing or crashes is reported in its own entry
    without stopping the rest.
    """
    try:
        runs = _lint_service.run(req.linters)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=e.args[0])

    return {
        "success": LintService.is_success(runs),
        "summary": asdict(LintService.summarize(runs)),
        "runs": [r.to_dict() for r in runs],
    }
