import random
from typing import List, Optional

from dynasty.engine.result_processor import BLOWOUT_MARGIN, CLASSIC_MARGIN
from dynasty.models.enums import BattleWinner, GameLabel, Party
from dynasty.models.game import GameOutcome

CONTROL_MARGIN = 10  # a SolidWin at or above this reads as wire-to-wire control


def streak_text(value: int) -> str:
    """Renders a signed streak as W3 / L2, or '-' when there is none."""
    if value > 0:
        return f"W{value}"
    if value < 0:
        return f"L{abs(value)}"
    return "-"


def _rivalry_candidates(outcome: GameOutcome, winner_party: Party) -> List[str]:
    winner, loser = outcome.winner, outcome.loser
    if outcome.margin >= BLOWOUT_MARGIN:
        return [
            f"{winner} ran {loser} off the field. That was not a rivalry game, that was a clinic.",
            f"{loser} looked like a tutorial CPU out there. The booster club wants answers.",
        ]
    if outcome.margin <= CLASSIC_MARGIN:
        return [
            f"{winner} survives a sweaty rivalry game by a field goal or less.",
            f"{loser} had this one right there and let it slip away.",
        ]
    if winner_party is Party.PRIMARY_A:
        return [
            f"{winner} keeps the trophy and shoves {loser} back into mid-table.",
            f"{loser}'s rebuild is starting to look like a demolition project.",
        ]
    return [
        f"{winner} handled business. {loser} fans are asking if the dynasty is cooked already.",
        f"Somebody on the {loser} staff is getting demoted to special teams after that.",
    ]


def recap_candidates(outcome: GameOutcome, winner_party: Party = Party.OTHER) -> List[str]:
    """Candidate recap lines for a game.

    Pure: the same outcome always yields the same list. Rivalry games get
    their own lines keyed on margin and which primary party won; everything
    else is keyed on the classification label.
    """
    if outcome.rivalry_game:
        return _rivalry_candidates(outcome, winner_party)

    winner, loser = outcome.winner, outcome.loser
    if outcome.label is GameLabel.BLOWOUT:
        return [
            f"{winner} turned {loser} into a laugh track for four straight quarters.",
            "Message boards are melting down and the AD is dodging phone calls.",
        ]
    if outcome.label is GameLabel.CLASSIC:
        return [
            "Instant classic. One side locked in, the other is staring at the ceiling.",
            "The kind of game that gets replayed at 2AM for the sickos.",
        ]
    if outcome.label is GameLabel.UPSET:
        return [
            f"{winner} just torched {loser}'s whole narrative. Whatever story that season was telling is over.",
            "That is a 'pace the room and blame the sliders' type of loss.",
        ]
    if outcome.margin >= CONTROL_MARGIN:
        return [
            f"{winner} controlled that one from whistle to whistle.",
            f"{loser} can talk about adjustments all they want, the scoreboard disagrees.",
        ]
    return [
        f"{winner} did just enough to not blow it.",
        f"{loser} will call it a coin flip while the record says otherwise.",
    ]


def pick_recap(candidates: List[str], rng: Optional[random.Random] = None) -> str:
    """Selects one recap line. Pass a seeded Random for reproducible output."""
    if not candidates:
        return ""
    return (rng or random.Random()).choice(candidates)


def battle_line(winner: BattleWinner, primary_a: str, primary_b: str) -> str:
    if winner is BattleWinner.A:
        return f"{primary_a} walked into that living room and embarrassed {primary_b}'s pitch."
    if winner is BattleWinner.B:
        return f"{primary_b} stole this recruit straight out of {primary_a}'s hands."
    if winner is BattleWinner.CHAOS:
        return "Both programs show this kid as a commit. Somebody's dynasty file is lying."
    return "No clear winner yet. This recruit is watching two programs trip over themselves."
