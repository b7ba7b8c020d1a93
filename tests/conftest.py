import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import countdown_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def classic_numbers():
    """Source numbers of the well-known 765 round."""
    return [1, 3, 7, 10, 25, 50]


@pytest.fixture
def batch_file(tmp_path: Path):
    """Write a small valid puzzle batch file."""
    path = tmp_path / "puzzles.json"
    path.write_text(json.dumps({
        "schema_version": 1,
        "puzzles": [
            {"id": "r1", "numbers": [2, 3], "target": 6},
            {"id": "r2", "numbers": [1, 1], "target": 100},
        ],
    }))
    return path
