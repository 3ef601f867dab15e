"""High-level orchestration for mirroring images referenced by documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import requests

from .config import MirrorConfig
from .extractor import extract_references
from .images import FetchError, build_session, destination_filename, download_image
from .models import MirrorStats
from .walker import iter_documents

logger = logging.getLogger("md_image_mirror")


def ensure_directory(path: Path) -> None:
    """Create ``path`` (and parents) if it is missing."""
    if path.is_dir():
        return
    path.mkdir(parents=True, exist_ok=True)
    logger.info("Created directory %s", path)


def mirror_reference(
    url: str,
    config: MirrorConfig,
    session: requests.Session,
    stats: MirrorStats,
) -> None:
    """Download one reference unless its destination file already exists."""
    try:
        filename = destination_filename(url)
        destination = config.image_cache_dir / filename
        if destination.exists():
            logger.info("Image already exists: %s", filename)
            stats.already_present += 1
            return
        logger.info("Downloading %s", url)
        download_image(url, destination, session, config)
    except (FetchError, OSError, ValueError) as exc:
        logger.error("Failed to mirror image %s: %s", url, exc)
        stats.failed += 1
        return
    logger.info("Downloaded %s", filename)
    stats.downloaded += 1


def process_document(
    path: Path,
    config: MirrorConfig,
    session: requests.Session,
    stats: MirrorStats,
) -> None:
    """Mirror every distinct image referenced by a single document."""
    stats.documents_scanned += 1
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read %s: %s", path, exc)
        return

    references = extract_references(content, config.url_pattern)
    if not references:
        return

    stats.documents_with_images += 1
    stats.references_found += len(references)
    logger.info("Processing %s: found %d image(s)", path, len(references))
    for url in references:
        mirror_reference(url, config, session, stats)


def run_mirror(
    config: MirrorConfig,
    session: Optional[requests.Session] = None,
) -> MirrorStats:
    """Walk the documents tree and download every missing image sequentially."""
    ensure_directory(config.image_cache_dir)

    owns_session = session is None
    if session is None:
        session = build_session()

    stats = MirrorStats()
    try:
        for path in iter_documents(config.documents_root, config.document_extension):
            process_document(path, config, session, stats)
    finally:
        if owns_session:
            session.close()

    logger.info("All images mirrored")
    return stats
