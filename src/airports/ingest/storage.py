"""Read and write the normalized JSON artifacts."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List

from airports.errors import MissingResourceError


def write_artifact(path: Path, records: Iterable[Dict[str, Any]]) -> int:
    """Write records as an indented JSON list. Returns the number written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = list(records)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return len(payload)


def read_artifact(path: Path) -> List[Dict[str, Any]]:
    """Read a JSON list written by write_artifact."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise MissingResourceError(path, "normalized artifact not found")
    except (OSError, json.JSONDecodeError) as e:
        raise MissingResourceError(path, f"normalized artifact unreadable ({e})")
    if not isinstance(data, list):
        raise MissingResourceError(path, "normalized artifact must contain a JSON list")
    return data
