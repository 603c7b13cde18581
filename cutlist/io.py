"""
cutlist.io - Text read/write helpers, atomic file writes.

Centralized I/O utilities for snapshots, payloads and reports.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

import yaml


def read_text(path: Path) -> str:
    """Read text file with UTF-8 encoding.

    Args:
        path: Path to text file

    Returns:
        File contents as string
    """
    with open(path, encoding="utf-8") as f:
        return f.read()


def read_structured(path: Path) -> Any:
    """Read a JSON or YAML file, choosing the parser by extension.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        Parsed data

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If a .json file contains invalid JSON
        yaml.YAMLError: If a YAML file is invalid
    """
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def write_text(path: Path, content: str) -> None:
    """Write text file atomically.

    Writes to a temp file first, then renames to prevent corruption
    on interruption.

    Args:
        path: Destination path
        content: Text content to write
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(content)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
    tmp_path.replace(path)
