from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

LinterKind = Literal["linter", "formatter"]
RunStatus = Literal["ok", "setup_failed", "failed"]


@dataclass(frozen=True)
class RawToolResult:
    status: int
    stdout: str
    stderr: str

    @classmethod
    def empty(cls) -> RawToolResult:
        """Successful result for a run that had nothing to check."""
        return cls(status=0, stdout="", stderr="")


@dataclass(frozen=True)
class Finding:
    path: str
    first_line: int
    last_line: int
    message: str

    def __post_init__(self) -> None:
        if self.first_line < 1:
            raise ValueError(f"first_line must be >= 1, got {self.first_line}")
        if self.last_line < self.first_line:
            raise ValueError(f"last_line {self.last_line} is before first_line {self.first_line}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "firstLine": self.first_line,
            "lastLine": self.last_line,
            "message": self.message,
        }


@dataclass(frozen=True)
class LintResult:
    is_success: bool
    warning: tuple[Finding, ...] = ()
    error: tuple[Finding, ...] = ()

    @classmethod
    def success(cls) -> LintResult:
        return cls(is_success=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isSuccess": self.is_success,
            "warning": [f.to_dict() for f in self.warning],
            "error": [f.to_dict() for f in self.error],
        }


@dataclass
class LinterRun:
    linter: str
    kind: LinterKind
    status: RunStatus
    result: LintResult | None = None
    error: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status == "ok" and self.result is not None and self.result.is_success

    def to_dict(self) -> dict[str, Any]:
        return {
            "linter": self.linter,
            "kind": self.kind,
            "status": self.status,
            "result": self.result.to_dict() if self.result else None,
            "error": self.error,
        }


@dataclass
class Summary:
    total_warnings: int
    total_errors: int
    failed_linters: list[str] = field(default_factory=list)
