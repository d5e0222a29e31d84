"""Exceptions raised while showing dialogs."""

from __future__ import annotations


class DialogError(Exception):
    """Base class of every error reported by this package."""

    message = "dialog error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class IoFailure(DialogError):
    """A system call or I/O operation failed."""

    message = "system error or I/O failure"


class InvalidString(DialogError):
    """The dialog program produced text that could not be decoded."""

    message = "the implementation returns malformed strings"


class UnexpectedOutput(DialogError):
    """The dialog program exited in a way that could not be interpreted."""

    message = "failed to parse the string returned from implementation"

    def __init__(self, implementation: str) -> None:
        self.implementation = implementation
        super().__init__(self.message)


class NoImplementation(DialogError):
    """No dialog program is available on this system."""

    message = "cannot find any dialog implementation (kdialog/zenity)"


class ImplementationError(DialogError):
    """The dialog program reported an error of its own."""

    message = "the implementation reports error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.message}: {detail}")