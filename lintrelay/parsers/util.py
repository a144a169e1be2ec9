from pathlib import Path


def get_rel_path(workspace: Path | str, filename: str) -> str:
    """
    Convert a tool-reported filename to a path relative to the lint root.

    Handles three cases:
    1. Absolute path inside the lint root  → strip the root prefix
    2. Relative path with ./               → strip leading ./
    3. Fallback                            → return cleaned posix path
    """
    if not filename:
        return ""
    f = Path(filename)
    if f.is_absolute():
        try:
            return f.resolve().relative_to(Path(workspace).resolve()).as_posix()
        except ValueError:
            return f.as_posix()

    s = f.as_posix()
    while s.startswith("./"):
        s = s[2:]
    return s


def remove_trailing_period(text: str) -> str:
    return text[:-1] if text.endswith(".") else text
