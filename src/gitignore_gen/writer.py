from __future__ import annotations

import os
from pathlib import Path

GITIGNORE_NAME = ".gitignore"
GITIGNORE_MODE = 0o644


class WriteError(Exception):
    pass


def write_gitignore(content: str, directory: Path) -> Path:
    """Write ``content`` to ``directory/.gitignore``, replacing any existing file."""
    target = Path(directory) / GITIGNORE_NAME
    payload = content.encode("utf-8", errors="surrogateescape")
    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, GITIGNORE_MODE)
        with os.fdopen(fd, "wb") as fh:
            fh.write(payload)
    except OSError as exc:
        raise WriteError(f"Unable to write {target}: {exc}") from exc
    return target
