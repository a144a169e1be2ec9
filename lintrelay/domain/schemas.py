from pydantic import BaseModel, Field


class LintRequest(BaseModel):
    """One linter invocation inside a run."""

    linter: str = Field(..., description="Registry id of the linter (e.g. `apilinter`, `black`).")
    dir: str | None = Field(None, description="Directory to lint. Defaults to `LINT_ROOT`.")
    extensions: list[str] | None = Field(
        None,
        description="File extensions to lint, without the dot. Defaults to the linter's own list.",
        json_schema_extra={"examples": [["py"], ["js", "jsx"]]},
    )
    args: str = Field("", description="Extra command line arguments passed to the tool.")
    fix: bool = Field(False, description="Let the tool rewrite files where it supports it.")
    prefix: str | None = Field(None, description="Command prefix. Defaults to `COMMAND_PREFIX`.")


class LintRunRequest(BaseModel):
    linters: list[LintRequest]
