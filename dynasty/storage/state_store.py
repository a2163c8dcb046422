# dynasty/storage/state_store.py
from typing import Dict, List, Optional, Tuple

from loguru import logger

from dynasty.models.enums import Party
from dynasty.models.recruit import RecruitEntry
from dynasty.models.team import RivalryTally, Team, TeamRecord


class StateStore:
    """Owns every piece of mutable league state.

    Records, streaks, the rivalry tally and the recruiting ledger live here
    and nowhere else. Readers always get copies; mutations go through
    ``apply_result`` and ``append_recruit``.

    Streak values are signed: positive is the length of the current win run,
    negative the length of the current losing run. A team without a streak
    is simply absent.
    """

    def __init__(self) -> None:
        self._records: Dict[str, TeamRecord] = {}
        self._streaks: Dict[str, int] = {}
        self._rivalry = RivalryTally()
        self._recruits: List[RecruitEntry] = []
        logger.debug("State store created.")

    # --- Reads ---

    def get_record(self, team: str) -> Optional[TeamRecord]:
        record = self._records.get(team)
        return record.model_copy() if record is not None else None

    def records(self) -> List[Tuple[str, TeamRecord]]:
        """All team records in first-appearance order."""
        return [(name, rec.model_copy()) for name, rec in self._records.items()]

    def get_streak(self, team: str) -> int:
        return self._streaks.get(team, 0)

    def streaks(self) -> Dict[str, int]:
        return {team: value for team, value in self._streaks.items() if value != 0}

    def rivalry(self) -> RivalryTally:
        return self._rivalry.model_copy()

    def recruits(self) -> List[RecruitEntry]:
        return list(self._recruits)

    def total_games(self) -> int:
        # Every game adds one win and one loss
        return sum(rec.wins for rec in self._records.values())

    # --- Mutations ---

    def apply_result(
        self,
        winner: Team,
        loser: Team,
        winning_score: int,
        losing_score: int,
        winner_streak: int,
        loser_streak: int,
        rivalry_game: bool = False,
    ) -> None:
        """Writes one finalized game into records, streaks and the rivalry."""
        for name, scored, allowed in (
            (winner.name, winning_score, losing_score),
            (loser.name, losing_score, winning_score),
        ):
            record = self._records.setdefault(name, TeamRecord())
            record.points_for += scored
            record.points_against += allowed

        self._records[winner.name].wins += 1
        self._records[loser.name].losses += 1

        self._streaks[winner.name] = winner_streak
        self._streaks[loser.name] = loser_streak

        if rivalry_game:
            if winner.party is Party.PRIMARY_A:
                self._rivalry.primary_a_wins += 1
            else:
                self._rivalry.primary_b_wins += 1
            logger.debug(f"Rivalry tally now {self._rivalry.as_tuple()}")

        logger.debug(
            f"Applied result: {winner.name} {winning_score} - {loser.name} {losing_score}"
        )

    def append_recruit(self, entry: RecruitEntry) -> None:
        self._recruits.append(entry)
        logger.debug(
            f"Ledger size {len(self._recruits)} after logging {entry.prospect} ({entry.team})"
        )
