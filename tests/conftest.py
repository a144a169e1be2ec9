import pytest
from fastapi.testclient import TestClient

from lintrelay.core.errors import ProcessError
from lintrelay.domain.models import RawToolResult


class FakeRunner:
    """Records commands instead of spawning processes.

    ``results`` maps a command substring to the output returned for the
    first command containing it; anything else gets an empty success.
    ``installed`` limits which executables exist (None means all).
    """

    def __init__(self, results=None, installed=None):
        self.results = dict(results or {})
        self.installed = installed
        self.commands = []

    def exists(self, name):
        return self.installed is None or name in self.installed

    def run(self, command, cwd=None, ignore_errors=False):
        self.commands.append(command)
        result = RawToolResult.empty()
        for needle, out in self.results.items():
            if needle in command:
                result = out
                break
        if result.status != 0 and not ignore_errors:
            raise ProcessError(command, result.status, result.stderr)
        return result


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def client(monkeypatch):
    from lintrelay.api import lint_routes
    from lintrelay.main import app

    fake = FakeRunner()
    monkeypatch.setattr(lint_routes._lint_service.linters, "runner", fake)
    c = TestClient(app)
    c.runner = fake
    return c
