[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nativedialog"
version = "0.6.3"
description = "Show message and file dialogs through the desktop's kdialog or zenity helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["dialog", "file-dialog", "message-box", "zenity", "kdialog", "gui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: X11 Applications",
    "Operating System :: POSIX :: Linux",
    "Operating System :: POSIX :: BSD",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nativedialog-tour = "nativedialog.tour:main"

[tool.hatch.build.targets.wheel]
packages = ["nativedialog"]

[tool.pytest.ini_options]
addopts = "-ra"
