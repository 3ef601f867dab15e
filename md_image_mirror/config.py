"""Configuration objects and constants for the image mirror."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_DOCS_DIRNAME = "docs"
DEFAULT_IMAGE_SUBDIR = Path(".vitepress") / "public" / "images" / "csdn"
DEFAULT_DOCUMENT_EXTENSION = ".md"
DEFAULT_URL_PATTERN = re.compile(r"https://img-blog\.csdnimg\.cn/[^\s\")]+")
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
# The CDN refuses hot-linked requests without a blog referer.
DEFAULT_REFERER = "https://blog.csdn.net/"


@dataclass
class MirrorConfig:
    """Settings passed into a single mirror run."""

    documents_root: Path
    image_cache_dir: Path
    url_pattern: re.Pattern = DEFAULT_URL_PATTERN
    document_extension: str = DEFAULT_DOCUMENT_EXTENSION
    user_agent: str = DEFAULT_USER_AGENT
    referer: str = DEFAULT_REFERER
    timeout: Optional[float] = None
    chunk_size: int = 8192

    @classmethod
    def for_base_dir(cls, base_dir: Path, **overrides) -> "MirrorConfig":
        """Build the default layout (``docs`` and the VitePress image folder) under ``base_dir``."""
        base_dir = Path(base_dir)
        return cls(
            documents_root=base_dir / DEFAULT_DOCS_DIRNAME,
            image_cache_dir=base_dir / DEFAULT_IMAGE_SUBDIR,
            **overrides,
        )
