from typing import Dict, List, Optional, Union

from loguru import logger

from dynasty.models.enums import BattleWinner, Party, RecruitStatus
from dynasty.models.recruit import BattleResult, RecruitEntry
from dynasty.normalization.normalizer import Normalizer
from dynasty.storage.state_store import StateStore

# The ledger keeps every report and never marks one as "latest". When a team
# has several entries for the same prospect, the one with the strongest
# status stands for that team: a commit outranks interest, interest outranks
# lost. Equal statuses resolve to the earliest logged entry.
STATUS_PRECEDENCE: Dict[RecruitStatus, int] = {
    RecruitStatus.COMMIT: 0,
    RecruitStatus.INTEREST: 1,
    RecruitStatus.LOST: 2,
}


def pick_representative(entries: List[RecruitEntry]) -> Optional[RecruitEntry]:
    """Returns the entry that best reflects a team's standing with a prospect."""
    if not entries:
        return None
    return min(entries, key=lambda entry: STATUS_PRECEDENCE[entry.status])


def resolve_battle(a_status: RecruitStatus, b_status: RecruitStatus) -> BattleWinner:
    """Decides a recruiting battle from each primary party's status."""
    a_commit = a_status is RecruitStatus.COMMIT
    b_commit = b_status is RecruitStatus.COMMIT
    if a_commit and not b_commit:
        return BattleWinner.A
    if b_commit and not a_commit:
        return BattleWinner.B
    if a_commit and b_commit:
        # Two commits on one prospect means the reports disagree
        return BattleWinner.CHAOS
    if a_status is RecruitStatus.INTEREST and b_status is RecruitStatus.LOST:
        return BattleWinner.A
    if b_status is RecruitStatus.INTEREST and a_status is RecruitStatus.LOST:
        return BattleWinner.B
    return BattleWinner.NONE


def _coerce_status(status: Union[RecruitStatus, str]) -> RecruitStatus:
    if isinstance(status, RecruitStatus):
        return status
    # Raises ValueError for anything outside commit/interest/lost
    return RecruitStatus(status.strip().lower())


class RecruitLedger:
    """Append-only log of recruiting reports."""

    def __init__(self, store: StateStore, normalizer: Normalizer):
        self.store = store
        self.normalizer = normalizer

    def log_recruit(
        self,
        team: str,
        prospect: str,
        stars: int,
        position: str,
        status: Union[RecruitStatus, str],
    ) -> RecruitEntry:
        side = self.normalizer.resolve(team)
        entry = RecruitEntry(
            team=side.name,
            party=side.party,
            prospect=prospect,
            stars=stars,
            position=(position or "").strip().upper(),
            status=_coerce_status(status),
        )
        self.store.append_recruit(entry)
        logger.info(
            f"Recruit logged: {entry.team} {entry.status.value} {entry.prospect}"
            f" ({entry.stars}* {entry.position})"
        )
        return entry


class BattleReconciler:
    """Pairs up primary-party reports on the same prospect into battles."""

    def __init__(self, store: StateStore):
        self.store = store

    def reconcile_battles(self) -> List[BattleResult]:
        # Group by prospect, case-insensitive, in first-seen order
        by_prospect: Dict[str, Dict[Party, List[RecruitEntry]]] = {}
        for entry in self.store.recruits():
            if not entry.party.is_primary:
                continue
            sides = by_prospect.setdefault(entry.prospect_key, {})
            sides.setdefault(entry.party, []).append(entry)

        battles: List[BattleResult] = []
        for sides in by_prospect.values():
            a_entry = pick_representative(sides.get(Party.PRIMARY_A, []))
            b_entry = pick_representative(sides.get(Party.PRIMARY_B, []))
            if a_entry is None or b_entry is None:
                continue  # only one program went after this kid

            battles.append(
                BattleResult(
                    prospect=a_entry.prospect.strip() or b_entry.prospect.strip(),
                    stars=max(a_entry.stars, b_entry.stars),
                    position=a_entry.position or b_entry.position,
                    winner=resolve_battle(a_entry.status, b_entry.status),
                    primary_a_status=a_entry.status,
                    primary_b_status=b_entry.status,
                )
            )

        logger.debug(
            f"Reconciled {len(battles)} recruiting battles from {len(by_prospect)} primary-party prospects."
        )
        return battles
