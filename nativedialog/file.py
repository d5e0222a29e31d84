"""Builder for file and folder choosers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from . import gnu_file
from .kinds import Filter


@dataclass
class FileDialog:
    """Builds and shows file dialogs.

    Every ``set_*`` method returns the dialog itself so calls can be chained.
    """

    filename: str | None = None
    location: str | os.PathLike[str] | None = None
    filters: list[Filter] = field(default_factory=list)
    owner: Any = None
    title: str | None = None

    def set_title(self, title: str) -> FileDialog:
        """Set the window title of the dialog."""
        self.title = title
        return self

    def set_filename(self, filename: str) -> FileDialog:
        """Set the default value of the file name field."""
        self.filename = filename
        return self

    def reset_filename(self) -> FileDialog:
        """Clear the default file name."""
        self.filename = None
        return self

    def set_location(self, path: str | os.PathLike[str]) -> FileDialog:
        """Set the folder the dialog shows when it opens; ``~`` is expanded."""
        self.location = path
        return self

    def reset_location(self) -> FileDialog:
        """Clear the default folder."""
        self.location = None
        return self

    def add_filter(self, description: str, extensions: Iterable[str]) -> FileDialog:
        """Add a file type filter; at least one extension is required."""
        self.filters.append(Filter(description, extensions))
        return self

    def remove_all_filters(self) -> FileDialog:
        """Remove every file type filter."""
        self.filters = []
        return self

    def set_owner(self, handle: Any) -> FileDialog:
        """Set the owner window; kdialog and zenity ignore it."""
        self.owner = handle
        return self

    def reset_owner(self) -> FileDialog:
        """Remove the owner window."""
        self.owner = None
        return self

    def _title(self, default: str) -> str:
        return self.title if self.title is not None else default

    def show_open_single_file(self) -> Path | None:
        """Let the user open one file; ``None`` if cancelled."""
        return gnu_file.open_single_file(
            self.location, self.filename, self.filters, self._title("Open File")
        )

    def show_open_multiple_file(self) -> list[Path]:
        """Let the user open several files; empty if cancelled."""
        return gnu_file.open_multiple_files(
            self.location, self.filename, self.filters, self._title("Open File")
        )

    def show_open_single_dir(self) -> Path | None:
        """Let the user open one directory; ``None`` if cancelled."""
        return gnu_file.open_single_dir(
            self.location, self.filename, self._title("Open Folder")
        )

    def show_save_single_file(self) -> Path | None:
        """Let the user choose a file to save to; ``None`` if cancelled."""
        return gnu_file.save_single_file(
            self.location, self.filename, self.filters, self._title("Save As")
        )