import pytest

from nativedialog.errors import (
    DialogError,
    ImplementationError,
    InvalidString,
    IoFailure,
    NoImplementation,
    UnexpectedOutput,
)


@pytest.mark.parametrize(
    ("cls", "message"),
    [
        (IoFailure, "system error or I/O failure"),
        (InvalidString, "the implementation returns malformed strings"),
        (NoImplementation, "cannot find any dialog implementation (kdialog/zenity)"),
    ],
)
def test_simple_errors_are_dialog_errors(cls, message):
    err = cls()
    assert isinstance(err, DialogError)
    assert str(err) == message


def test_no_implementation_message():
    assert str(NoImplementation()) == "cannot find any dialog implementation (kdialog/zenity)"


def test_io_failure_message():
    assert str(IoFailure()) == "system error or I/O failure"


def test_invalid_string_message():
    assert str(InvalidString()) == "the implementation returns malformed strings"


def test_unexpected_output_keeps_implementation():
    err = UnexpectedOutput("zenity")
    assert err.implementation == "zenity"
    assert str(err) == "failed to parse the string returned from implementation"


def test_implementation_error_keeps_detail():
    err = ImplementationError("Unsupported filepath")
    assert err.detail == "Unsupported filepath"
    assert "Unsupported filepath" in str(err)
    assert str(err).startswith("the implementation reports error")


def test_io_failure_chains_cause():
    cause = FileNotFoundError("zenity")
    err = IoFailure()
    err.__cause__ = cause
    assert isinstance(err, DialogError)
    assert str(err) == "system error or I/O failure"
    assert err.__cause__ is cause


def test_custom_message_overrides_default():
    assert str(IoFailure("disk gone")) == "disk gone"