import pytest

from taskgraph.errors import FileNotFound, FileReadError, ParseError
from taskgraph.loader import load_file


def test_load_file_returns_raw_text(write_config):
    p = write_config("dagrs:\n  a: {name: A}\n")
    assert load_file(p) == "dagrs:\n  a: {name: A}\n"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFound) as exc:
        load_file(tmp_path / "nope.yaml")
    assert "nope.yaml" in str(exc.value)
    assert isinstance(exc.value, ParseError)


def test_directory_is_unreadable(tmp_path):
    with pytest.raises(FileReadError):
        load_file(tmp_path)


def test_undecodable_bytes(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(FileReadError):
        load_file(p)
