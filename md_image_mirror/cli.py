"""Command-line entry point for the image mirror."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import MirrorConfig
from .mirror import run_mirror

logger = logging.getLogger("md_image_mirror.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Download CSDN-hosted images referenced by Markdown documents into a local folder."
        ),
    )
    parser.add_argument(
        "--base-dir",
        default=Path.cwd(),
        type=Path,
        help="Site root holding the docs folder and the .vitepress assets (default: current directory)",
    )
    parser.add_argument(
        "--docs",
        type=Path,
        default=None,
        help="Directory of Markdown documents to scan (default: <base-dir>/docs)",
    )
    parser.add_argument(
        "--images",
        type=Path,
        default=None,
        help="Directory where images are saved (default: <base-dir>/.vitepress/public/images/csdn)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> MirrorConfig:
    config = MirrorConfig.for_base_dir(Path(args.base_dir).resolve(), timeout=args.timeout)
    if args.docs is not None:
        config.documents_root = Path(args.docs).resolve()
    if args.images is not None:
        config.image_cache_dir = Path(args.images).resolve()
    return config


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = build_config(args)
    overall_start = time.perf_counter()
    try:
        stats = run_mirror(config)
    except OSError as exc:
        logger.error("Mirror aborted: %s", exc)
        return 1
    total_elapsed = time.perf_counter() - overall_start

    logger.info(
        "Finished in %.2fs (%d downloaded, %d already present, %d failed)",
        total_elapsed,
        stats.downloaded,
        stats.already_present,
        stats.failed,
    )
    logger.debug(
        "Scanned %d document(s), %d with images, %d distinct reference(s)",
        stats.documents_scanned,
        stats.documents_with_images,
        stats.references_found,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
