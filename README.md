# nativedialog

Show message boxes and file pickers from Python by running the dialog helper
already installed on the desktop: `kdialog` or `zenity`.

The helper is chosen on every call. A graphical session is required (the
`DISPLAY` environment variable must be set and non-empty). When
`XDG_CURRENT_DESKTOP` is `KDE` and `kdialog` is on the `PATH`, `kdialog` is
used; otherwise `zenity` is used if it is found, with `kdialog` as the
fallback.

## Installation

```
pip install nativedialog
```

No third-party libraries are needed.

## Message dialogs

```python
from nativedialog.message import MessageDialog
from nativedialog.kinds import MessageType

MessageDialog().set_title("Hello").set_text("Saved.").show_alert()

go_on = (
    MessageDialog()
    .set_title("Tour")
    .set_text("Do you want to begin?")
    .set_type(MessageType.WARNING)
    .show_confirm()
)
```

`MessageType` has `INFO` (the default), `WARNING` and `ERROR`; it picks the
icon, and for zenity alerts the kind of box. `show_confirm()` shows a Yes/No
question and returns `True` when the helper exits successfully, that is, when
the user picks "Yes". The message text is escaped for the markup each helper
understands, so characters such as `<` and `&` appear as written.

## File dialogs

```python
from nativedialog.file import FileDialog

path = FileDialog().set_location("~").show_open_single_file()

paths = (
    FileDialog()
    .add_filter("Python Source", ["py"])
    .add_filter("Image", ["png", "jpg", "gif"])
    .show_open_multiple_file()
)

folder = FileDialog().show_open_single_dir()
target = FileDialog().set_filename("notes.txt").show_save_single_file()
```

- `show_open_single_file()`, `show_open_single_dir()` and
  `show_save_single_file()` return a `pathlib.Path`, or `None` when cancelled.
- `show_open_multiple_file()` returns a list of paths, empty when cancelled.
- A leading `~` in the location is replaced by the home directory. With a
  location but no file name, the dialog starts at `Untitled` in that folder.
- Default titles are "Open File", "Open Folder" and "Save As"; `set_title()`
  overrides them.
- A filter must name at least one extension; `add_filter()` raises
  `ValueError` otherwise. Filters are ignored by the folder chooser.
- When filters are set, the save dialog warns and asks again until the chosen
  name ends in one of the allowed extensions.

Every `set_*`, `reset_*`, `add_filter` and `remove_all_filters` method returns
the dialog itself, so calls can be chained.

## Errors

Failures raise subclasses of `nativedialog.errors.DialogError`:

- `NoImplementation` when there is no display or neither helper is found;
- `IoFailure` when the helper cannot be started;
- `UnexpectedOutput` when the helper exits in a way that cannot be read
  (a file chooser exiting with a status other than 0 or 1, or a message box
  ended by a signal).

## Tour

```
nativedialog-tour
```

This walks through every kind of dialog and shows each result in a message
box.

## Limits

The package only drives `kdialog` and `zenity`; it has no dialogs of its own
and none that use the Windows or macOS system dialogs. `set_owner()` is
accepted on both builders but has no effect, since neither helper can be
attached to a parent window.