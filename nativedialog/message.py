"""Builder for message boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .gnu_message import show_message
from .kinds import MessageType


@dataclass
class MessageDialog:
    """Builds and shows message dialogs.

    Every ``set_*`` method returns the dialog itself so calls can be chained.
    """

    title: str = ""
    text: str = ""
    typ: MessageType = MessageType.INFO
    owner: Any = None

    def set_title(self, title: str) -> MessageDialog:
        """Set the title of the dialog."""
        self.title = title
        return self

    def set_text(self, text: str) -> MessageDialog:
        """Set the message text of the dialog."""
        self.text = text
        return self

    def set_type(self, typ: MessageType) -> MessageDialog:
        """Set the kind of message; this usually decides the icon shown."""
        self.typ = MessageType(typ)
        return self

    def set_owner(self, handle: Any) -> MessageDialog:
        """Set the owner window; kdialog and zenity ignore it."""
        self.owner = handle
        return self

    def reset_owner(self) -> MessageDialog:
        """Remove the owner window."""
        self.owner = None
        return self

    def show_alert(self) -> None:
        """Show a dialog that alerts the user with the message."""
        show_message(self.title, self.text, self.typ, False)

    def show_confirm(self) -> bool:
        """Show a Yes/No dialog; return ``True`` when the user chose Yes."""
        return show_message(self.title, self.text, self.typ, True)