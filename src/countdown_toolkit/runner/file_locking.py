"""
Module: runner.file_locking

Purpose:
    Cross-platform file locking so several batch runs can write to the
    same solutions and timing files. Uses portalocker for Mac, Windows,
    and Linux compatibility.

Key Functions:
    - locked_append_jsonl: Append to JSONL with exclusive lock
    - locked_read_modify_write_json: Read-modify-write JSON with lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - runner.controller: Solution records
    - runner.timing: Timing data merging
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

import portalocker

logger = logging.getLogger(__name__)


def locked_append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    """
    Append a record to JSONL file with exclusive lock.

    Args:
        path: Path to JSONL file.
        record: Dictionary to append as JSON line.

    Example:
        >>> locked_append_jsonl(out_path, {"id": "r1", "solution_count": 3})
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "a", encoding="utf-8") as f:
        portalocker.lock(f, portalocker.LOCK_EX)
        try:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
        finally:
            portalocker.unlock(f)

    logger.debug(f"Appended record to {path.name}")


def locked_read_modify_write_json(
    path: Path,
    modifier: Callable[[Dict[str, Any]], Dict[str, Any]],
    default: Callable[[], Dict[str, Any]] = dict,
) -> Dict[str, Any]:
    """
    Read JSON, apply modifier, write back - all with exclusive lock.

    Args:
        path: Path to JSON file.
        modifier: Function that takes existing data, returns modified data.
        default: Factory for default data if file doesn't exist or is empty.

    Returns:
        The modified data that was written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if not path.exists():
        path.write_text(json.dumps(default(), indent=2), encoding="utf-8")

    with open(path, "r+", encoding="utf-8") as f:
        portalocker.lock(f, portalocker.LOCK_EX)
        try:
            f.seek(0)
            content = f.read()
            existing = json.loads(content) if content.strip() else default()

            modified = modifier(existing)

            f.seek(0)
            f.truncate()
            json.dump(modified, f, indent=2, ensure_ascii=False)

            return modified
        finally:
            portalocker.unlock(f)
