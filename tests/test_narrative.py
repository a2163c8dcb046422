import random

from dynasty.models.enums import BattleWinner, GameLabel, Party
from dynasty.narrative.subtitles import (
    battle_line,
    pick_recap,
    recap_candidates,
    streak_text,
)


def test_streak_text():
    assert streak_text(3) == "W3"
    assert streak_text(-2) == "L2"
    assert streak_text(0) == "-"


def test_candidates_are_deterministic(league):
    outcome = league.report_result("Ohio", 45, "Toledo", 3)
    assert outcome.label is GameLabel.BLOWOUT
    first = recap_candidates(outcome)
    assert first == recap_candidates(outcome)
    assert any("Ohio" in line for line in first)


def test_rivalry_lines_depend_on_winning_side(league):
    akron_win = league.report_result("Akron", 24, "Kent", 14)
    kent_win = league.report_result("Akron", 14, "Kent", 24)
    a_lines = recap_candidates(akron_win, Party.PRIMARY_A)
    b_lines = recap_candidates(kent_win, Party.PRIMARY_B)
    assert a_lines != b_lines
    assert all("Kent State" in line for line in a_lines)


def test_pick_recap_uses_injected_rng():
    candidates = ["one", "two", "three"]
    assert pick_recap(candidates, random.Random(7)) == pick_recap(candidates, random.Random(7))
    assert pick_recap(candidates) in candidates
    assert pick_recap([]) == ""


def test_battle_lines_name_the_winner():
    assert "Akron" in battle_line(BattleWinner.A, "Akron", "Kent State").split(" ")[0]
    assert battle_line(BattleWinner.B, "Akron", "Kent State").startswith("Kent State")
    assert "commit" in battle_line(BattleWinner.CHAOS, "Akron", "Kent State")
    assert battle_line(BattleWinner.NONE, "Akron", "Kent State").startswith("No clear winner")
