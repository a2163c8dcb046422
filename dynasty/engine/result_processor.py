from typing import Any, Optional

from loguru import logger

from dynasty.engine.errors import (
    InvalidScoreError,
    SameTeamError,
    ScoreValidationError,
    TiedScoreError,
)
from dynasty.models.enums import GameLabel
from dynasty.models.game import GameOutcome
from dynasty.models.team import Team, TeamRecord
from dynasty.normalization.normalizer import Normalizer
from dynasty.storage.state_store import StateStore

BLOWOUT_MARGIN = 21
CLASSIC_MARGIN = 3
UPSET_MARGIN = 7
RIVALRY_BEATDOWN_MARGIN = 17


def classify_game(
    margin: int,
    rivalry_game: bool,
    pre_winner: Optional[TeamRecord],
    pre_loser: Optional[TeamRecord],
) -> GameLabel:
    """Labels a finished game from its margin and the pre-game records.

    The checks run in a fixed order (base label, upset, rivalry) and each
    later check overwrites the earlier label, so a lopsided rivalry upset
    is a RivalryBeatdown. A winner with no prior games never gets an Upset.
    """
    if margin >= BLOWOUT_MARGIN:
        label = GameLabel.BLOWOUT
    elif margin <= CLASSIC_MARGIN:
        label = GameLabel.CLASSIC
    else:
        label = GameLabel.SOLID_WIN

    if (
        pre_winner is not None
        and pre_loser is not None
        and pre_loser.wins > pre_winner.wins
        and margin >= UPSET_MARGIN
    ):
        label = GameLabel.UPSET

    if rivalry_game and margin >= RIVALRY_BEATDOWN_MARGIN:
        label = GameLabel.RIVALRY_BEATDOWN

    return label


def next_winner_streak(previous: int) -> int:
    return previous + 1 if previous >= 0 else 1


def next_loser_streak(previous: int) -> int:
    return previous - 1 if previous <= 0 else -1


def is_rivalry_game(winner: Team, loser: Team) -> bool:
    """True only when the two different primary parties met."""
    return (
        winner.party.is_primary
        and loser.party.is_primary
        and winner.party is not loser.party
    )


def _validate_score(team: str, score: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScoreError(f"Score for {team!r} must be an integer, got {score!r}")
    if score < 0:
        raise InvalidScoreError(f"Score for {team!r} must be non-negative, got {score}")
    return score


class ResultProcessor:
    """Turns a reported final score into record, streak and rivalry updates."""

    def __init__(self, store: StateStore, normalizer: Normalizer):
        self.store = store
        self.normalizer = normalizer

    def report_result(
        self, team_a: str, score_a: int, team_b: str, score_b: int
    ) -> GameOutcome:
        """Processes one final score.

        Args:
            team_a: Raw name of the first team.
            score_a: First team's final score.
            team_b: Raw name of the second team.
            score_b: Second team's final score.

        Returns:
            The GameOutcome with post-game records and streaks.

        Raises:
            InvalidScoreError: A score is not a non-negative integer.
            TiedScoreError: Both scores are equal.
            SameTeamError: Both names resolve to the same team.
        """
        try:
            _validate_score(team_a, score_a)
            _validate_score(team_b, score_b)
            if score_a == score_b:
                raise TiedScoreError(
                    f"Tied score {score_a}-{score_b} between {team_a!r} and {team_b!r};"
                    " resolve overtime before reporting."
                )
            side_a = self.normalizer.resolve(team_a)
            side_b = self.normalizer.resolve(team_b)
            if side_a.name == side_b.name:
                raise SameTeamError(f"{side_a.name} cannot play itself.")
        except ScoreValidationError as e:
            logger.warning(f"Rejected game report: {e}")
            raise

        if score_a > score_b:
            winner, loser, w_score, l_score = side_a, side_b, score_a, score_b
        else:
            winner, loser, w_score, l_score = side_b, side_a, score_b, score_a

        # Pre-game snapshots drive upset detection
        pre_winner = self.store.get_record(winner.name)
        pre_loser = self.store.get_record(loser.name)
        rivalry_game = is_rivalry_game(winner, loser)
        label = classify_game(w_score - l_score, rivalry_game, pre_winner, pre_loser)

        winner_streak = next_winner_streak(self.store.get_streak(winner.name))
        loser_streak = next_loser_streak(self.store.get_streak(loser.name))
        self.store.apply_result(
            winner,
            loser,
            w_score,
            l_score,
            winner_streak,
            loser_streak,
            rivalry_game=rivalry_game,
        )

        outcome = GameOutcome(
            winner=winner.name,
            loser=loser.name,
            winning_score=w_score,
            losing_score=l_score,
            label=label,
            rivalry_game=rivalry_game,
            winner_record=self.store.get_record(winner.name),
            loser_record=self.store.get_record(loser.name),
            winner_streak=self.store.get_streak(winner.name),
            loser_streak=self.store.get_streak(loser.name),
        )
        logger.info(f"Final recorded: {outcome.description}")
        return outcome
