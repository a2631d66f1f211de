import json
from pathlib import Path
from typing import Any

import pytest


def query_json(with_attack: bool = True) -> dict[str, Any]:
    """A completed trace-equivalence query on two small processes."""
    channel = {"type": "Function", "symbol": 6, "args": []}
    data: dict[str, Any] = {
        "status": "completed",
        "type": "trace_equiv",
        "semantics": "private",
        "batch_file": "batch.json",
        "run_file": "run.json",
        "start_time": 1_600_000_000,
        "end_time": 1_600_000_012,
        "atomic_data": {
            "data": [
                {"type": "Symbol", "id": 0, "label": "senc", "category": {"type": "Function"}},
                {"type": "Symbol", "id": 1, "label": "tuple", "category": {"type": "Tuple"}},
                {"type": "Name", "id": 2, "label": "c"},
                {"type": "Name", "id": 3, "label": "k"},
                {"type": "Name", "id": 4, "label": "k"},
                {"type": "Variable", "id": 5, "label": "x"},
                {"type": "Symbol", "id": 6, "label": "c", "category": {"type": "Function"}},
            ]
        },
        "processes": [
            {
                "type": "New",
                "name": 3,
                "process": {
                    "type": "Output",
                    "channel": {"type": "Atomic", "id": 2},
                    "term": {
                        "type": "Function",
                        "symbol": 0,
                        "args": [{"type": "Atomic", "id": 3}, {"type": "Atomic", "id": 3}],
                    },
                },
            },
            {
                "type": "New",
                "name": 4,
                "process": {
                    "type": "Input",
                    "channel": {"type": "Atomic", "id": 2},
                    "pattern": {"type": "Atomic", "id": 5},
                    "process": {
                        "type": "Output",
                        "channel": {"type": "Atomic", "id": 2},
                        "term": {
                            "type": "Function",
                            "symbol": 1,
                            "args": [{"type": "Atomic", "id": 5}, {"type": "Atomic", "id": 4}],
                        },
                    },
                },
            },
        ],
    }
    if with_attack:
        data["attack_trace"] = {
            "id_proc": 1,
            "action_sequence": [
                {"type": "output", "channel": channel},
                {"type": "tau"},
                {
                    "type": "input",
                    "channel": channel,
                    "term": {
                        "type": "Function",
                        "symbol": 0,
                        "args": [{"type": "Axiom", "id": 1}, {"type": "Attacker", "label": "#n"}],
                    },
                },
            ],
        }
    return data


@pytest.fixture
def query_file(tmp_path: Path) -> Path:
    path = tmp_path / "query.json"
    path.write_text(json.dumps(query_json()), encoding="utf-8")
    return path


@pytest.fixture
def equivalent_query_file(tmp_path: Path) -> Path:
    path = tmp_path / "query_equiv.json"
    path.write_text(json.dumps(query_json(with_attack=False)), encoding="utf-8")
    return path
