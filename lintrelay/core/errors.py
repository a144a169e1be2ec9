from __future__ import annotations


class LintRelayError(Exception):
    """Base class for lint adapter failures."""


class SetupError(LintRelayError):
    """Tool executable missing or not answering its version probe."""

    def __init__(self, linter: str, reason: str = "is not installed"):
        self.linter = linter
        self.reason = reason
        super().__init__(f"{linter} {reason}")


class ProcessError(LintRelayError):
    """Command exited non-zero while errors were not declared ignorable."""

    def __init__(self, command: str, status: int, stderr: str = ""):
        self.command = command
        self.status = status
        self.stderr = stderr
        super().__init__(f"Command failed with exit code {status}: {command}")


class ParseError(LintRelayError):
    """Tool output could not be read in its expected grammar."""


class ToolError(LintRelayError):
    """Tool reported a fatal error inside its own output."""
