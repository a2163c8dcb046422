from typing import Dict, List, Optional, Tuple, Union

from loguru import logger

from dynasty.config.settings import AppSettings
from dynasty.engine.recruiting import BattleReconciler, RecruitLedger
from dynasty.engine.result_processor import ResultProcessor
from dynasty.engine.standings import StandingsRanker
from dynasty.models.enums import RecruitStatus
from dynasty.models.game import GameOutcome
from dynasty.models.recruit import BattleResult, RecruitEntry
from dynasty.models.team import RivalryTally, StandingsRow
from dynasty.normalization.normalizer import Normalizer
from dynasty.storage.state_store import StateStore


class DynastyLeague:
    """Entry point for front ends (chat bot, HTTP API, CLI).

    One instance per session. Every component shares the same StateStore,
    so a fresh DynastyLeague means a fresh league. Calls are expected from a
    single writer; a concurrent host has to serialize report_result and
    log_recruit itself.
    """

    def __init__(
        self,
        config: Optional[AppSettings] = None,
        store: Optional[StateStore] = None,
    ):
        self.normalizer = Normalizer(config)
        self.store = store or StateStore()
        self.results = ResultProcessor(self.store, self.normalizer)
        self.ranker = StandingsRanker(self.store)
        self.ledger = RecruitLedger(self.store, self.normalizer)
        self.reconciler = BattleReconciler(self.store)
        logger.info(
            f"Dynasty league ready: {self.normalizer.primary_a.name}"
            f" vs {self.normalizer.primary_b.name}"
        )

    # --- Mutations ---

    def report_result(
        self, team_a: str, score_a: int, team_b: str, score_b: int
    ) -> GameOutcome:
        return self.results.report_result(team_a, score_a, team_b, score_b)

    def log_recruit(
        self,
        team: str,
        prospect: str,
        stars: int,
        position: str,
        status: Union[RecruitStatus, str],
    ) -> RecruitEntry:
        return self.ledger.log_recruit(team, prospect, stars, position, status)

    # --- Queries ---

    def get_standings(self) -> List[StandingsRow]:
        return self.ranker.rank()

    def get_streaks(self) -> Dict[str, int]:
        return self.store.streaks()

    def get_rivalry(self) -> Tuple[int, int]:
        """(primary A wins, primary B wins) in head-to-head games."""
        return self.store.rivalry().as_tuple()

    def get_rivalry_tally(self) -> RivalryTally:
        return self.store.rivalry()

    def get_recruit_battles(self) -> List[BattleResult]:
        return self.reconciler.reconcile_battles()
