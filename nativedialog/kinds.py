"""Value types describing the contents of dialogs."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


class MessageType(enum.Enum):
    """Kind of message shown; usually decides the icon of the dialog."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Filter:
    """A set of file extensions with a human readable description."""

    description: str
    extensions: tuple[str, ...]

    def __init__(self, description: str, extensions: Iterable[str] | str) -> None:
        if isinstance(extensions, str):
            extensions = (extensions,)
        exts = tuple(extensions)
        if not exts:
            raise ValueError("The file extensions of a filter must be specified.")
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "extensions", exts)

    def patterns(self) -> list[str]:
        """Glob patterns for the extensions, such as ``*.png``."""
        return [f"*.{ext}" for ext in self.extensions]