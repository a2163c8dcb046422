from typing import Dict, Optional

from loguru import logger

from dynasty.config.settings import AppSettings, settings as default_settings
from dynasty.models.enums import Party
from dynasty.models.team import Team
from dynasty.utils.misc_utils import (
    collapse_whitespace,
    generate_canonical_id,
    title_case_words,
)


class Normalizer:
    """Canonicalizes free-text team names into stable identifiers."""

    def __init__(self, config: Optional[AppSettings] = None):
        config = config or default_settings
        self.primary_a = config.primary_a
        self.primary_b = config.primary_b
        self.other_division = config.other_division

        # Key: lowercased raw name, Value: canonical team
        self.team_aliases: Dict[str, Team] = {}
        for party, profile in (
            (Party.PRIMARY_A, self.primary_a),
            (Party.PRIMARY_B, self.primary_b),
        ):
            team = Team(name=profile.name, party=party)
            # The canonical name must resolve to itself. On a shared alias the
            # first primary party keeps it.
            for alias in [profile.name, *profile.aliases]:
                self.team_aliases.setdefault(generate_canonical_id(alias), team)

        logger.debug(
            f"Normalizer initialized with {len(self.team_aliases)} team aliases."
        )

    def resolve(self, raw_name: str) -> Team:
        """Resolves a raw team name to a canonical Team. Never fails."""
        team = self.team_aliases.get(generate_canonical_id(raw_name))
        if team is not None:
            return team
        return Team(name=title_case_words(collapse_whitespace(raw_name)))

    def normalize(self, raw_name: str) -> str:
        return self.resolve(raw_name).name

    def party_of(self, name: str) -> Party:
        return self.resolve(name).party

    def division_of(self, raw_name: str) -> str:
        party = self.party_of(raw_name)
        if party is Party.PRIMARY_A:
            return self.primary_a.division
        if party is Party.PRIMARY_B:
            return self.primary_b.division
        return self.other_division
