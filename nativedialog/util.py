"""Path helpers shared by the dialog backends."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_tilde(path: str | os.PathLike[str]) -> Path | None:
    """Replace a leading ``~`` component with the home directory.

    Returns ``None`` when the path starts with ``~`` but the home directory
    cannot be determined. Other paths, including ``~user`` forms, are
    returned unchanged.
    """
    parts = Path(path).parts
    if not parts:
        return Path()
    if parts[0] != "~":
        return Path(*parts)
    home = os.path.expanduser("~")
    if not home or home == "~":
        return None
    return Path(home, *parts[1:])