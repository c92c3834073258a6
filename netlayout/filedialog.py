"""Choosing start locations, filters and valid names for file dialogs."""

from __future__ import annotations

import os.path
import re

from netlayout.errors import CopasiError

ANY_FILE_FILTER = "Any File (*)"

_EXTENSION = re.compile(r"\.\S{1,4}$")
_DIGIT_EXTENSION = re.compile(r"\.\d{1,4}$")


class SaveNameError(CopasiError):
    """A file name chosen for saving has an unacceptable extension."""


def start_with(start: str | None, working_directory: str) -> str:
    """The path a dialog should open at.

    No start means the working directory; a bare file name is placed in
    the working directory; anything with a directory part is used as is.
    """
    if start is None:
        return working_directory
    if os.path.dirname(start) == "":
        return working_directory + "/" + start
    return start


def extend_filter(file_filter: str) -> str:
    """Add a catch-all entry to a filter list that lacks one."""
    if "(*)" not in file_filter:
        return file_filter + ";;" + ANY_FILE_FILTER
    return file_filter


def check_save_name(filename: str, selected_filter: str) -> str:
    """Return ``filename`` if it may be saved under ``selected_filter``.

    Only the catch-all filter imposes rules: an extension, when present,
    must be one to four characters long and must not be all digits.
    Raises SaveNameError otherwise.
    """
    if "(*)" not in selected_filter:
        return filename
    base = os.path.basename(filename)
    suffix = os.path.splitext(base)[1]
    if not suffix:
        return filename
    if _EXTENSION.search(base) is None:
        raise SaveNameError(
            "Filename can have an extension 1 to 4 characters long."
        )
    digits = _DIGIT_EXTENSION.search(base)
    if digits is not None and digits.start() > 0:
        raise SaveNameError(
            "All characters in the file extension cannot be digits."
        )
    return filename