"""Pattern-based extraction of image references from document text."""

from __future__ import annotations

import re
from typing import List, Union

from .config import DEFAULT_URL_PATTERN


def extract_references(
    text: str,
    pattern: Union[str, re.Pattern] = DEFAULT_URL_PATTERN,
) -> List[str]:
    """Return the distinct matches of ``pattern`` in ``text`` in first-seen order."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    seen = {}
    for match in pattern.finditer(text):
        seen.setdefault(match.group(0), None)
    return list(seen)
