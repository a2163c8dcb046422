import io
import json
import random

import pytest

from rich.console import Console

import main
from dynasty.engine.league import DynastyLeague
from dynasty.models.enums import RecruitStatus
from dynasty.models.events import GameReport, RecruitReport

EVENTS = [
    {"kind": "game", "team_a": "Akron", "score_a": 35, "team_b": "Kent State", "score_b": 38},
    {"kind": "game", "team_a": "zips", "score_a": 10, "team_b": "ohio", "score_b": 10},
    {"kind": "game", "team_a": "toledo", "score_a": 3, "team_b": "Akron", "score_b": 31},
    {
        "kind": "recruit",
        "team": "Akron",
        "prospect": "John Doe",
        "stars": 4,
        "position": "qb",
        "status": "commit",
    },
    {
        "kind": "recruit",
        "team": "Kent",
        "prospect": "john doe",
        "stars": 5,
        "position": "QB",
        "status": "interest",
    },
]


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda level=None: None)


def _console() -> Console:
    return Console(file=io.StringIO(), width=200)


def test_load_events_validates_kinds(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(EVENTS))
    events = main.load_events(path)
    assert isinstance(events[0], GameReport)
    assert isinstance(events[3], RecruitReport)
    assert events[3].status is RecruitStatus.COMMIT


def test_replay_skips_rejected_games(tmp_path, config):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(EVENTS))
    league = DynastyLeague(config)
    recaps, rejected = main.replay(league, main.load_events(path), random.Random(3))
    assert rejected == 1
    assert len(recaps) == 2
    assert recaps[0].startswith("Kent State 38, Akron 35 (Classic)")
    assert league.get_rivalry() == (0, 1)
    assert len(league.get_recruit_battles()) == 1


def test_main_renders_tables(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(EVENTS))
    console = _console()
    assert main.main([str(path), "--seed", "1"], console=console) == 0
    output = console.file.getvalue()
    assert "Dynasty Standings" in output
    assert "Kent State" in output
    assert "John Doe" in output
    assert "Akron 0 - 1 Kent State" in output


def test_main_rejects_bad_files(tmp_path):
    missing = tmp_path / "missing.json"
    assert main.main([str(missing)], console=_console()) == 1

    broken = tmp_path / "broken.json"
    broken.write_text('[{"kind": "trade"}]')
    assert main.main([str(broken)], console=_console()) == 1


def test_unknown_log_level_is_a_usage_error(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(EVENTS))
    with pytest.raises(SystemExit) as exc:
        main.main([str(path), "--log-level", "chatty"], console=_console())
    assert exc.value.code == 2


def test_log_level_is_case_insensitive(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(EVENTS))
    assert main.main([str(path), "--log-level", "debug"], console=_console()) == 0
