"""Result objects returned by a mirror run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MirrorStats:
    """Counters collected while processing the document tree."""

    documents_scanned: int = 0
    documents_with_images: int = 0
    references_found: int = 0
    downloaded: int = 0
    already_present: int = 0
    failed: int = 0
