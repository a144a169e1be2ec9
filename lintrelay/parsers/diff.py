"""Turn unified diffs printed by formatters into findings.

Formatters in check mode (``black --diff``, ``gofmt -d``) print the change
they would make. Every hunk becomes one finding covering the original
lines it would rewrite, with the hunk itself as the message.
"""

from __future__ import annotations

import re
from pathlib import Path

from lintrelay.domain.models import Finding
from lintrelay.parsers.util import get_rel_path

_FILE_HEADER = re.compile(r"^--- (?P<path>[^\t\n]+)")
_HUNK_HEADER = re.compile(r"^@@ -(?P<start>\d+)(?:,(?P<old>\d+))? \+\d+(?:,(?P<new>\d+))? @@")


def _clean_path(raw: str) -> str:
    path = raw.strip()
    if path.startswith("a/"):
        path = path[2:]
    if path.endswith(".orig"):
        path = path[: -len(".orig")]
    return path


def _count(value: str | None) -> int:
    return int(value) if value is not None else 1


def parse_errors_from_diff(diff: str, workspace: Path | str | None = None) -> list[Finding]:
    hunks: list[tuple[str, int, int, list[str]]] = []
    path: str | None = None
    old_left = new_left = 0

    for line in (diff or "").splitlines():
        # Inside a hunk every line belongs to it until both sides are consumed
        if old_left > 0 or new_left > 0:
            tag = line[:1]
            if tag == "-":
                old_left -= 1
            elif tag == "+":
                new_left -= 1
            elif tag != "\\":
                old_left -= 1
                new_left -= 1
            hunks[-1][3].append(line)
            continue

        header = _FILE_HEADER.match(line)
        if header:
            path = _clean_path(header.group("path"))
            if workspace is not None:
                path = get_rel_path(workspace, path)
            continue

        hunk = _HUNK_HEADER.match(line)
        if hunk and path is not None:
            start = max(int(hunk.group("start")), 1)
            old_left, new_left = _count(hunk.group("old")), _count(hunk.group("new"))
            last = max(start + old_left - 1, start)
            hunks.append((path, start, last, []))

    return [Finding(p, first, last, "\n".join(body)) for p, first, last, body in hunks]
