"""Image downloading utilities."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Optional, Union
from urllib.parse import urlparse

import requests
from filetype import guess

from .config import MirrorConfig

logger = logging.getLogger("md_image_mirror")

SNIFF_BYTES = 262
PARTIAL_SUFFIX = ".part"


class FetchError(RuntimeError):
    """Raised when a single image could not be downloaded."""

    def __init__(
        self,
        url: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.cause = cause
        if status_code is not None:
            message = f"Request failed: {status_code}"
        else:
            message = f"Request failed: {cause}"
        super().__init__(message)


def destination_filename(url: str) -> str:
    """Return the last path segment of ``url`` with query and fragment removed."""
    name = PurePosixPath(urlparse(url).path).name
    if not name:
        raise ValueError(f"Cannot derive a filename from {url}")
    return name


def detect_image_format(path: Path) -> Optional[str]:
    """Detect image type using filetype; returns lowercase extension."""
    with path.open("rb") as handle:
        head = handle.read(SNIFF_BYTES)
    kind = guess(head)
    if kind and kind.mime.startswith("image/"):
        ext = kind.extension.lower()
        if ext == "jpeg":
            return "jpg"
        return ext
    return None


def build_session() -> requests.Session:
    """Create the shared session; headers are sent per request."""
    return requests.Session()


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove partial file %s: %s", path, exc)


def download_image(
    url: str,
    destination: Union[str, Path],
    session: requests.Session,
    config: MirrorConfig,
) -> None:
    """Stream ``url`` into ``destination``.

    Anything other than HTTP 200 (redirects included), a transport error, or
    a write error raises :class:`FetchError` and leaves no file behind. The
    body is written to a ``.part`` sibling and renamed only once complete.
    """
    destination = Path(destination)
    partial = destination.with_name(destination.name + PARTIAL_SUFFIX)
    headers = {"User-Agent": config.user_agent, "Referer": config.referer}
    try:
        with session.get(
            url,
            headers=headers,
            stream=True,
            timeout=config.timeout,
            allow_redirects=False,
        ) as resp:
            if resp.status_code != 200:
                raise FetchError(url, status_code=resp.status_code)
            with partial.open("wb") as handle:
                for chunk in resp.iter_content(chunk_size=config.chunk_size):
                    if chunk:
                        handle.write(chunk)
        os.replace(partial, destination)
    except FetchError:
        raise
    except (requests.RequestException, OSError) as exc:
        _discard(partial)
        raise FetchError(url, cause=exc) from exc
    except BaseException:
        _discard(partial)
        raise

    try:
        detected = detect_image_format(destination)
    except OSError as exc:
        logger.debug("Could not inspect %s: %s", destination, exc)
        return
    if detected:
        logger.debug("Saved %s as %s image", destination.name, detected)
    else:
        logger.warning(
            "Downloaded %s but the payload does not look like an image", url
        )
