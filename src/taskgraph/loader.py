from __future__ import annotations

from pathlib import Path

from .errors import FileNotFound, FileReadError


def load_file(path: str | Path) -> str:
    """Return the text of a configuration file without interpreting it."""
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise FileNotFound(str(p)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(p), str(e)) from e
