import json
from pathlib import Path

import pytest


@pytest.fixture
def write_source(tmp_path):
    """Write a source document into tmp_path and return its path."""

    def _write(data, name: str = "portals.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
