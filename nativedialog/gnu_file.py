"""File and folder choosers shown through kdialog or zenity."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .backend import Backend, should_use
from .errors import IoFailure, NoImplementation, UnexpectedOutput
from .kinds import Filter
from .util import resolve_tilde

_WARN_TITLE = "Incorrect file extension"

PathLike = "str | os.PathLike[str]"


@dataclass(frozen=True)
class FileRequest:
    """What a file chooser should ask for."""

    title: str
    path: Path | None = None
    filters: tuple[Filter, ...] = ()
    multiple: bool = False
    directory: bool = False
    save: bool = False


def trim_newlines(data: bytes) -> bytes:
    """Remove leading and trailing line feeds."""
    return data.strip(b"\n")


def _to_path(data: bytes) -> Path:
    return Path(os.fsdecode(data))


def _extension(path: Path) -> str | None:
    name = path.name
    if name == "..":
        return None
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1 :]


def get_target_path(
    location: str | os.PathLike[str] | None, filename: str | None
) -> Path | None:
    """The path the chooser starts at, built from a folder and a file name."""
    resolved = resolve_tilde(location) if location is not None else None
    if resolved is not None:
        return resolved / (filename if filename is not None else "Untitled")
    if filename is not None:
        return Path(filename)
    return None


def allowed_extensions(filters: Iterable[Filter]) -> list[str]:
    """Every extension named by the filters, in order."""
    return [ext for flt in filters for ext in flt.extensions]


def warn_extension_message(path: Path) -> str:
    """The warning shown when a saved file name has an unknown extension."""
    ext = _extension(Path(path))
    if ext is None:
        return "You haven't specified a file extension in the filename. Please try again."
    return f'We could not recognize the file extension ".{ext}". Please try again.'


def _filter_label(flt: Filter) -> tuple[str, str]:
    patterns = " ".join(flt.patterns())
    return f"{flt.description} ({patterns})", patterns


def kdialog_file_args(request: FileRequest) -> list[str]:
    """Arguments for kdialog that show the requested chooser."""
    if request.directory and request.save:
        raise ValueError("a directory chooser cannot be a save dialog")
    if request.directory:
        mode = "--getexistingdirectory"
    elif request.save:
        mode = "--getsavefilename"
    else:
        mode = "--getopenfilename"

    args = [
        mode,
        "--title",
        request.title,
        os.fspath(request.path) if request.path is not None else "",
    ]
    if request.multiple:
        args += ["--multiple", "--separate-output"]
    if request.filters:
        args.append("\n".join(_filter_label(flt)[0] for flt in request.filters))
    return args


def zenity_file_args(request: FileRequest) -> list[str]:
    """Arguments for zenity that show the requested chooser."""
    args = ["--file-selection", "--title", request.title]
    if request.directory:
        args.append("--directory")
    if request.save:
        args += ["--save", "--confirm-overwrite"]
    if request.multiple:
        args += ["--multiple", "--separator", "\n"]
    if request.path is not None:
        args += ["--filename", os.fspath(request.path)]
    for flt in request.filters:
        label, patterns = _filter_label(flt)
        args += ["--file-filter", f"{label} | {patterns}"]
    return args


def _run(command: list[str]) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise IoFailure(str(exc)) from exc


def _backend() -> Backend:
    backend = should_use()
    if backend is None:
        raise NoImplementation()
    return backend


def run_file_dialog(request: FileRequest) -> bytes | None:
    """Show a chooser; return its raw output, or ``None`` if cancelled."""
    backend = _backend()
    if backend is Backend.KDIALOG:
        args = kdialog_file_args(request)
    else:
        args = zenity_file_args(request)

    completed = _run(backend.command() + args)
    if completed.returncode == 0:
        return completed.stdout
    if completed.returncode == 1:
        return None
    raise UnexpectedOutput(backend.value)


def _warn_extension(message: str) -> None:
    backend = _backend()
    if backend is Backend.KDIALOG:
        args = ["--msgbox", message, "--title", _WARN_TITLE, "--icon=dialog-warning"]
    else:
        args = ["--width=400", "--warning", "--title", _WARN_TITLE, "--text", message]
    _run(backend.command() + args)


def _single_path(output: bytes | None) -> Path | None:
    if output is None:
        return None
    return _to_path(trim_newlines(output))


def open_single_file(
    location: str | os.PathLike[str] | None,
    filename: str | None,
    filters: Sequence[Filter],
    title: str,
) -> Path | None:
    """Let the user pick one existing file."""
    request = FileRequest(
        title=title,
        path=get_target_path(location, filename),
        filters=tuple(filters),
    )
    return _single_path(run_file_dialog(request))


def open_multiple_files(
    location: str | os.PathLike[str] | None,
    filename: str | None,
    filters: Sequence[Filter],
    title: str,
) -> list[Path]:
    """Let the user pick any number of existing files."""
    request = FileRequest(
        title=title,
        path=get_target_path(location, filename),
        filters=tuple(filters),
        multiple=True,
    )
    output = run_file_dialog(request)
    if output is None:
        return []
    return [_to_path(line) for line in output.split(b"\n") if line]


def open_single_dir(
    location: str | os.PathLike[str] | None,
    filename: str | None,
    title: str,
) -> Path | None:
    """Let the user pick one directory."""
    request = FileRequest(
        title=title,
        path=get_target_path(location, filename),
        directory=True,
    )
    return _single_path(run_file_dialog(request))


def save_single_file(
    location: str | os.PathLike[str] | None,
    filename: str | None,
    filters: Sequence[Filter],
    title: str,
) -> Path | None:
    """Ask for a file name to save to.

    When filters are given, the dialog is shown again after a warning
    until the chosen name ends in one of their extensions.
    """
    filters = tuple(filters)
    allowed = allowed_extensions(filters)
    target = get_target_path(location, filename)

    while True:
        request = FileRequest(title=title, path=target, filters=filters, save=True)
        path = _single_path(run_file_dialog(request))
        if not allowed or path is None:
            return path
        if _extension(path) in allowed:
            return path
        _warn_extension(warn_extension_message(path))
        target = path