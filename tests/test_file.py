import shutil
import subprocess
from pathlib import Path

import pytest

from nativedialog.errors import NoImplementation
from nativedialog.file import FileDialog
from nativedialog.kinds import Filter


class FakeRun:
    def __init__(self, responses=None, default=(0, b"")):
        self.responses = list(responses or [])
        self.default = default
        self.calls = []

    def __call__(self, args, *rest, **kwargs):
        self.calls.append(list(args))
        code, out = self.responses.pop(0) if self.responses else self.default
        return subprocess.CompletedProcess(args, code, stdout=out, stderr=b"")


@pytest.fixture
def zenity(monkeypatch):
    monkeypatch.setenv("DISPLAY", ":0")
    monkeypatch.delenv("XDG_CURRENT_DESKTOP", raising=False)
    monkeypatch.setattr(
        shutil, "which", lambda name, *a, **k: "/usr/bin/zenity" if name == "zenity" else None
    )
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def test_open_single_file_defaults(zenity):
    zenity.default = (0, b"/tmp/a.txt\n")
    assert FileDialog().show_open_single_file() == Path("/tmp/a.txt")
    assert zenity.calls == [["zenity", "--file-selection", "--title", "Open File"]]


def test_open_single_file_cancelled(zenity):
    zenity.default = (1, b"")
    assert FileDialog().show_open_single_file() is None


def test_open_multiple_files(zenity):
    zenity.default = (0, b"/a\n/b\n")
    result = FileDialog().add_filter("Image", ["png", "jpg"]).show_open_multiple_file()
    assert result == [Path("/a"), Path("/b")]
    cmd = zenity.calls[0]
    assert "--multiple" in cmd
    assert cmd[cmd.index("--file-filter") + 1] == "Image (*.png *.jpg) | *.png *.jpg"


def test_open_multiple_cancelled(zenity):
    zenity.default = (1, b"")
    assert FileDialog().show_open_multiple_file() == []


def test_open_dir_title_and_flag(zenity):
    zenity.default = (0, b"/home\n")
    assert FileDialog().add_filter("Text", ["txt"]).show_open_single_dir() == Path("/home")
    cmd = zenity.calls[0]
    assert cmd[cmd.index("--title") + 1] == "Open Folder"
    assert "--directory" in cmd
    assert "--file-filter" not in cmd


def test_custom_title_and_location(zenity, monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    zenity.default = (1, b"")
    result = (
        FileDialog()
        .set_title("Pick")
        .set_location("~")
        .set_filename("f.txt")
        .show_open_single_file()
    )
    assert result is None
    cmd = zenity.calls[0]
    assert cmd[cmd.index("--title") + 1] == "Pick"
    assert cmd[cmd.index("--filename") + 1] == str(tmp_path / "f.txt")


def test_reset_location_and_filename(zenity):
    zenity.default = (1, b"")
    result = (
        FileDialog()
        .set_location("/tmp")
        .set_filename("x")
        .reset_location()
        .reset_filename()
        .show_open_single_file()
    )
    assert result is None
    assert "--filename" not in zenity.calls[0]


def test_save_without_filters(zenity):
    zenity.default = (0, b"/tmp/out\n")
    assert FileDialog().show_save_single_file() == Path("/tmp/out")
    cmd = zenity.calls[0]
    assert cmd[cmd.index("--title") + 1] == "Save As"
    assert "--save" in cmd


def test_save_retries_until_extension_matches(zenity):
    zenity.responses = [(0, b"/tmp/doc\n"), (0, b""), (0, b"/tmp/doc.txt\n")]
    result = FileDialog().add_filter("Text", ["txt"]).show_save_single_file()
    assert result == Path("/tmp/doc.txt")
    assert len(zenity.calls) == 3
    assert "--warning" in zenity.calls[1]
    assert (
        "You haven't specified a file extension in the filename. Please try again."
        in zenity.calls[1]
    )
    retry = zenity.calls[2]
    assert retry[retry.index("--filename") + 1] == "/tmp/doc"


def test_add_filter_requires_extension():
    with pytest.raises(ValueError):
        FileDialog().add_filter("Nothing", [])


def test_filters_and_removal():
    dialog = FileDialog().add_filter("Image", ["png", "gif"])
    assert dialog.filters == [Filter("Image", ["png", "gif"])]
    assert dialog.remove_all_filters() is dialog
    assert dialog.filters == []


def test_owner_set_and_reset():
    dialog = FileDialog().set_owner("window")
    assert dialog.owner == "window"
    assert dialog.reset_owner().owner is None


def test_no_display(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(NoImplementation):
        FileDialog().show_open_single_file()