from __future__ import annotations

from pathlib import Path

import pytest

from mapty.cli.main import build_parser, run_list, run_reset
from mapty.workout.model import new_cycling, new_running
from mapty.workout.storage import FileStorage
from mapty.workout.store import WorkoutStore


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.web_host == "127.0.0.1"
    assert args.web_port == 8080
    assert args.storage_dir is None
    assert args.location is None
    assert args.list is False


def test_list_and_reset_stored_workouts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    store = WorkoutStore(FileStorage(tmp_path))
    run = new_running((39.0, -12.0), 5.2, 24, 178)
    ride = new_cycling((39.0, -12.0), 27, 95, 523)
    store.add(run)
    store.add(ride)
    store.save()

    assert run_list(tmp_path) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith(ride.id)
    assert "17.1 km/h" in lines[0]
    assert "4.6 min/km" in lines[1]

    assert run_reset(tmp_path) == 0
    capsys.readouterr()
    assert run_list(tmp_path) == 0
    assert capsys.readouterr().out.strip() == "No workouts stored"
