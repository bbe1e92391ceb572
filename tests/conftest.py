from pathlib import Path

import pytest


@pytest.fixture
def os_release_factory(tmp_path: Path):
    """
    Factory fixture writing an os-release file under tmp_path.
    """

    def _create(content: str, name: str = "os-release") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _create


@pytest.fixture
def missing_path(tmp_path: Path) -> Path:
    return tmp_path / "does-not-exist"
