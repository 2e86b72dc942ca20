import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from taskgraph.ids import IdAllocator  # noqa: E402
from taskgraph.parser import YamlParser  # noqa: E402


@pytest.fixture
def allocator():
    return IdAllocator()


@pytest.fixture
def parser(allocator):
    return YamlParser(allocator=allocator)


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(text: str, name: str = "config.yaml") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
