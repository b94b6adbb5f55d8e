import pytest
from pathlib import Path
from typing import Callable

from xmlparser.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; tests may change the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_xml(tmp_path: Path) -> Callable[..., Path]:
    """Write XML content to a file in the test's temporary directory."""

    def _write(content, name: str = "input.xml") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write
