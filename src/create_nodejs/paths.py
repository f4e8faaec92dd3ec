"""Filesystem helpers used to validate user supplied paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_path(raw: str | None) -> Path | None:
    """Expand ``~`` and environment variables and return an absolute path.

    Blank input cannot be resolved and yields ``None``.
    """

    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    expanded = os.path.expandvars(os.path.expanduser(value))
    return Path(expanded).resolve()


def path_exists(path: Path | None) -> bool:
    return path is not None and path.exists()


__all__ = ["path_exists", "resolve_path"]
