from pathlib import Path

from md_image_mirror.config import (
    DEFAULT_REFERER,
    DEFAULT_URL_PATTERN,
    MirrorConfig,
)


def test_for_base_dir_uses_default_layout(tmp_path):
    config = MirrorConfig.for_base_dir(tmp_path)

    assert config.documents_root == tmp_path / "docs"
    assert config.image_cache_dir == tmp_path / ".vitepress" / "public" / "images" / "csdn"
    assert config.url_pattern is DEFAULT_URL_PATTERN
    assert config.document_extension == ".md"
    assert config.timeout is None
    assert config.referer == DEFAULT_REFERER


def test_for_base_dir_accepts_overrides(tmp_path):
    config = MirrorConfig.for_base_dir(str(tmp_path), timeout=5.0, document_extension=".markdown")

    assert config.documents_root == Path(tmp_path) / "docs"
    assert config.timeout == 5.0
    assert config.document_extension == ".markdown"


def test_user_agent_looks_like_a_browser():
    config = MirrorConfig(documents_root=Path("a"), image_cache_dir=Path("b"))
    assert config.user_agent.startswith("Mozilla/5.0")
