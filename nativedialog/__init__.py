"""Message and file dialogs shown through the desktop's kdialog or zenity helpers."""

__version__ = "0.6.3"