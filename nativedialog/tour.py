"""A short interactive tour of every kind of dialog."""

from __future__ import annotations

import argparse
import pprint
from typing import Any, Sequence

from .file import FileDialog
from .kinds import MessageType
from .message import MessageDialog


def _echo(name: str, value: Any) -> None:
    (
        MessageDialog()
        .set_title("Result")
        .set_text(f"{name}:\n{pprint.pformat(value)}")
        .show_alert()
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Walk the user through each dialog and show what it returned."""
    parser = argparse.ArgumentParser(
        prog="nativedialog-tour", description="Show each kind of dialog in turn."
    )
    parser.parse_args(argv)

    result = (
        MessageDialog()
        .set_title("Tour")
        .set_text("Do you want to begin the tour?")
        .set_type(MessageType.WARNING)
        .show_confirm()
    )
    if not result:
        return 0
    _echo("show_confirm", result)

    _echo(
        "show_open_single_file",
        FileDialog().set_location("~").show_open_single_file(),
    )

    _echo(
        "show_open_multiple_file",
        FileDialog()
        .add_filter("Rust Source", ["rs"])
        .add_filter("Image", ["png", "jpg", "gif"])
        .show_open_multiple_file(),
    )

    _echo("show_open_single_dir", FileDialog().show_open_single_dir())

    _echo("show_save_single_file", FileDialog().show_save_single_file())

    MessageDialog().set_title("End").set_text("That's the end!").show_alert()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())