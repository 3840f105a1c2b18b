"""Finding BMP files in a directory."""

from __future__ import annotations

import os
from os import PathLike
from typing import Union


def scan_bmp_files(path: Union[str, "PathLike[str]"]) -> list[str]:
    """Return the names of entries in ``path`` ending in ``.bmp``.

    The extension is matched case-insensitively against the text from the
    last dot onwards. Names are returned sorted. Raises ``OSError`` when the
    directory cannot be opened.
    """
    names = []
    for name in os.listdir(path):
        if name in (".", ".."):
            continue
        dot = name.rfind(".")
        if dot >= 0 and name[dot:].lower() == ".bmp":
            names.append(name)
    return sorted(names)