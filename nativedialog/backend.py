"""Selection of the external program that shows dialogs."""

from __future__ import annotations

import enum
import os
import shutil


class Backend(enum.Enum):
    """External dialog programs that can be driven."""

    KDIALOG = "kdialog"
    ZENITY = "zenity"

    def command(self) -> list[str]:
        """The command line prefix that starts this program."""
        return [self.value]


def _available(program: str) -> bool:
    return shutil.which(program) is not None


def should_use() -> Backend | None:
    """Pick the dialog program for the current session, or ``None``.

    A graphical display is required. kdialog is preferred inside a KDE
    session, zenity everywhere else, with kdialog as the fallback.
    """
    if not os.environ.get("DISPLAY"):
        return None

    kdialog_available = _available("kdialog")
    if kdialog_available and os.environ.get("XDG_CURRENT_DESKTOP") == "KDE":
        return Backend.KDIALOG

    if _available("zenity"):
        return Backend.ZENITY

    if kdialog_available:
        return Backend.KDIALOG

    return None