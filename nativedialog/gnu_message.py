"""Message boxes shown through kdialog or zenity."""

from __future__ import annotations

import re
import subprocess

from .backend import Backend, should_use
from .errors import IoFailure, NoImplementation, UnexpectedOutput
from .kinds import MessageType

_ICONS = {
    MessageType.INFO: "--icon=dialog-information",
    MessageType.WARNING: "--icon=dialog-warning",
    MessageType.ERROR: "--icon=dialog-error",
}

_ZENITY_KINDS = {
    MessageType.INFO: "--info",
    MessageType.WARNING: "--warning",
    MessageType.ERROR: "--error",
}

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def escape_pango_entities(text: str) -> str:
    """Escape the five entities that GMarkup understands."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def convert_qt_text_document(
    text: str, kdialog_version: tuple[int, int, int] | None
) -> str:
    """Prepare plain text for display in a Qt rich text label.

    Versions of kdialog up to 19 need every entity escaped; newer ones
    only need the angle brackets handled.
    """
    if kdialog_version is not None and kdialog_version[0] <= 19:
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("\n", "<br>")
            .replace(" ", "&nbsp")
            .replace("\t", "&nbsp;")
        )

    return (
        text.replace("\n", "<br>")
        .replace("\t", " ")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _parse_i32(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


def get_kdialog_version() -> tuple[int, int, int] | None:
    """The (major, minor, patch) version of the installed kdialog, if known."""
    try:
        completed = subprocess.run(
            ["kdialog", "--version"],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError:
        return None

    try:
        output = completed.stdout.decode("ascii")
    except UnicodeDecodeError:
        return None

    pieces = output.split(".")
    if len(pieces) < 3:
        return None

    major = _parse_i32(pieces[0].split(" ")[-1])
    minor = _parse_i32(pieces[1])
    patch = _parse_i32(pieces[2].replace("\n", ""))
    if major is None or minor is None or patch is None:
        return None
    return major, minor, patch


def kdialog_args(title: str, text: str, typ: MessageType, ask: bool) -> list[str]:
    """Arguments for kdialog that show the described message."""
    return [
        "--yesno" if ask else "--msgbox",
        convert_qt_text_document(text, get_kdialog_version()),
        "--title",
        title,
        _ICONS[typ],
    ]


def zenity_args(title: str, text: str, typ: MessageType, ask: bool) -> list[str]:
    """Arguments for zenity that show the described message."""
    args = ["--width=400"]
    if ask:
        args += ["--question", _ICONS[typ]]
    else:
        args.append(_ZENITY_KINDS[typ])
    args += ["--title", title, "--text", escape_pango_entities(text)]
    return args


def show_message(title: str, text: str, typ: MessageType, ask: bool) -> bool:
    """Show a message box; return whether it was accepted.

    For a plain alert the result only tells whether the program exited
    successfully.
    """
    backend = should_use()
    if backend is None:
        raise NoImplementation()

    if backend is Backend.KDIALOG:
        args = kdialog_args(title, text, typ, ask)
    else:
        args = zenity_args(title, text, typ, ask)

    try:
        completed = subprocess.run(
            backend.command() + args,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise IoFailure(str(exc)) from exc

    if completed.returncode < 0:
        raise UnexpectedOutput(backend.value)
    return completed.returncode == 0