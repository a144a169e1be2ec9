import os

from pydantic import BaseModel


def _optional_int(value: str | None) -> int | None:
    return int(value) if value else None


class Settings(BaseModel):
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Directory linters run in when a request does not name one
    LINT_ROOT: str = os.getenv("LINT_ROOT", ".")

    # Prepended to every tool invocation (e.g. "npx --no-install", "docker exec ci")
    COMMAND_PREFIX: str = os.getenv("COMMAND_PREFIX", "")

    # None: let tools run to completion
    PROCESS_TIMEOUT_SEC: int | None = _optional_int(os.getenv("PROCESS_TIMEOUT_SEC"))


settings = Settings()
