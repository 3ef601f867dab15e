from __future__ import annotations

from typing import Dict, List, Optional, Union

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class FakeResponse:
    def __init__(self, status_code: int = 200, chunks: Optional[List[bytes]] = None, error: Optional[BaseException] = None):
        self.status_code = status_code
        self._chunks = chunks if chunks is not None else [PNG_BYTES]
        self._error = error
        self.closed = False

    def iter_content(self, chunk_size: int = 1):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True


class FakeSession:
    """Stands in for ``requests.Session``; maps URLs to canned responses."""

    def __init__(self, responses: Optional[Dict[str, Union[FakeResponse, Exception]]] = None):
        self.responses = responses or {}
        self.calls: List[dict] = []
        self.closed = False

    def get(self, url, headers=None, stream=False, timeout=None, allow_redirects=True):
        self.calls.append(
            {
                "url": url,
                "headers": headers or {},
                "stream": stream,
                "timeout": timeout,
                "allow_redirects": allow_redirects,
            }
        )
        outcome = self.responses.get(url, FakeResponse())
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True

    @property
    def urls(self) -> List[str]:
        return [call["url"] for call in self.calls]


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def site(tmp_path):
    docs = tmp_path / "docs"
    docs.mkdir()
    return tmp_path
