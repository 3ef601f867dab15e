"""Recursive discovery of Markdown documents."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger("md_image_mirror")


def iter_documents(root: Union[str, Path], extension: str = ".md") -> Iterator[Path]:
    """Yield files below ``root`` whose name ends with ``extension``.

    A missing or unreadable ``root`` raises; unreadable subdirectories are
    logged and skipped so the rest of the tree is still visited. Symlinked
    files are not followed.
    """
    top = os.fspath(root)

    def _on_error(error: OSError) -> None:
        if error.filename == top:
            raise error
        logger.error("Skipping unreadable directory %s: %s", error.filename, error)

    for dirpath, dirnames, filenames in os.walk(top, onerror=_on_error):
        dirnames.sort()
        for name in sorted(filenames):
            if not name.endswith(extension):
                continue
            path = Path(dirpath) / name
            if path.is_file() and not path.is_symlink():
                yield path
