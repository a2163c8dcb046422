from typing import List

from loguru import logger

from dynasty.models.team import StandingsRow
from dynasty.storage.state_store import StateStore


class StandingsRanker:
    """Builds the league table from the state store."""

    def __init__(self, store: StateStore):
        self.store = store

    def rank(self) -> List[StandingsRow]:
        """Orders teams by wins, then point differential, both descending.

        There is no third key: teams level on both keep the order in which
        they first appeared in the store (sorted() is stable).
        """
        entries = self.store.records()
        ordered = sorted(
            entries, key=lambda item: (-item[1].wins, -item[1].point_differential)
        )
        table = [
            StandingsRow(
                rank=position,
                team=name,
                record=record,
                streak=self.store.get_streak(name),
            )
            for position, (name, record) in enumerate(ordered, start=1)
        ]
        logger.debug(f"Ranked {len(table)} teams.")
        return table
