"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/record_service.py
JSON record I/O for the CLI. '-' stands for stdin/stdout.
"""
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

STDIO_PATH = "-"


class RecordService:
    """Loads and writes JSON arrays of records."""

    @staticmethod
    def load_records(path: str) -> List[Any]:
        """Read a JSON array from a file or stdin."""
        if path == STDIO_PATH:
            logger.debug("Reading records from stdin")
            text = sys.stdin.read()
        else:
            file_path = Path(path).expanduser()
            if not file_path.exists():
                raise FileNotFoundError(f"File not found: {file_path}")
            if not file_path.is_file():
                raise ValueError(f"Path is not a file: {file_path}")
            logger.debug(f"Reading records from {file_path}")
            text = file_path.read_text(encoding="utf-8")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of records, got {type(data).__name__}")

        logger.debug(f"Loaded {len(data)} record(s)")
        return data

    @staticmethod
    def dump_records(records: List[Any], path: str = STDIO_PATH, indent: Optional[int] = 2) -> None:
        """Write records as a JSON array to a file or stdout."""
        text = json.dumps(records, indent=indent, ensure_ascii=False)

        if path == STDIO_PATH:
            sys.stdout.write(text + "\n")
            sys.stdout.flush()
            return

        file_path = Path(path).expanduser()
        file_path.write_text(text + "\n", encoding="utf-8")
        logger.debug(f"Wrote {len(records)} record(s) to {file_path}")
