"""
Shared fixtures for multisort tests.
Provides sample records and isolated JSON files for CLI/service tests.
"""
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Add src/ to sys.path so 'multisort' package is importable without install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture(autouse=True)
def restore_root_log_level():
    """CLI --verbose raises the root logger level; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def objects() -> List[Dict[str, Any]]:
    """
    Four records with distinct colors, duplicated weights and mixed flags:
    weights 2, 3, 1, 1; the two weight-1 records tie on weight.
    """
    return [
        {"id": 1, "color": "red", "weight": 2, "active": True, "date": date(2021, 2, 1)},
        {"id": 2, "color": "blue", "weight": 3, "active": False, "date": date(2021, 2, 2)},
        {"id": 3, "color": "green", "weight": 1, "active": False, "date": date(2021, 2, 3)},
        {"id": 4, "color": "purple", "weight": 1, "active": True, "date": date(2021, 2, 4)},
    ]


@pytest.fixture
def people() -> List[Dict[str, Any]]:
    """JSON-serializable records with nested fields and one missing age."""
    return [
        {"name": "Carol", "age": 35, "address": {"city": "Oslo"}},
        {"name": "alice", "age": 30, "address": {"city": "Bergen"}},
        {"name": "Bob", "age": 35, "address": {"city": "Bergen"}},
        {"name": "Dave", "address": {"city": "Oslo"}},
    ]


@pytest.fixture
def people_file(tmp_path, people) -> Path:
    """Writes people records to a temporary JSON file."""
    path = tmp_path / "people.json"
    path.write_text(json.dumps(people), encoding="utf-8")
    return path
