import sys
import argparse
import random
from pathlib import Path
from typing import List, Optional, Tuple

# --- Settings/Logging ---
from dynasty.logging.setup import setup_logging
from dynasty.config.settings import LOG_LEVELS, settings

from loguru import logger
from pydantic import ValidationError

from dynasty.engine.errors import ScoreValidationError
from dynasty.engine.league import DynastyLeague
from dynasty.models.events import GameReport, LeagueEvent, event_list_adapter
from dynasty.narrative.subtitles import (
    battle_line,
    pick_recap,
    recap_candidates,
    streak_text,
)

from rich.console import Console
from rich.panel import Panel
from rich.table import Table


def load_events(path: Path) -> List[LeagueEvent]:
    """Reads and validates a JSON list of game/recruit events."""
    events = event_list_adapter.validate_json(path.read_bytes())
    logger.info(f"Loaded {len(events)} events from {path}")
    return events


def replay(
    league: DynastyLeague, events: List[LeagueEvent], rng: random.Random
) -> Tuple[List[str], int]:
    """Feeds events into the league in order.

    Returns the recap line for every accepted game and the number of
    rejected game reports.
    """
    recaps: List[str] = []
    rejected = 0
    for event in events:
        if isinstance(event, GameReport):
            try:
                outcome = league.report_result(
                    event.team_a, event.score_a, event.team_b, event.score_b
                )
            except ScoreValidationError as e:
                rejected += 1
                logger.warning(f"Skipping game event: {e}")
                continue
            candidates = recap_candidates(
                outcome, league.normalizer.party_of(outcome.winner)
            )
            recaps.append(f"{outcome.description}: {pick_recap(candidates, rng)}")
        else:
            league.log_recruit(
                event.team, event.prospect, event.stars, event.position, event.status
            )
    return recaps, rejected


def standings_table(league: DynastyLeague) -> Table:
    table = Table(title="Dynasty Standings")
    for column in ("#", "Team", "Div", "W-L", "PF", "PA", "Diff", "Streak"):
        table.add_column(column)
    for row in league.get_standings():
        rec = row.record
        table.add_row(
            str(row.rank),
            row.team,
            league.normalizer.division_of(row.team),
            f"{rec.wins}-{rec.losses}",
            str(rec.points_for),
            str(rec.points_against),
            f"{rec.point_differential:+d}",
            streak_text(row.streak),
        )
    return table


def streaks_table(league: DynastyLeague) -> Table:
    table = Table(title="Current Streaks")
    table.add_column("Team")
    table.add_column("Streak")
    for team, value in league.get_streaks().items():
        table.add_row(team, streak_text(value))
    return table


def battles_table(league: DynastyLeague) -> Table:
    a_name = league.normalizer.primary_a.name
    b_name = league.normalizer.primary_b.name
    table = Table(title=f"Recruiting War: {a_name} vs {b_name}")
    for column in ("Prospect", "Stars", "Pos", a_name, b_name, "Verdict"):
        table.add_column(column)
    for battle in league.get_recruit_battles():
        table.add_row(
            battle.prospect,
            f"{battle.stars}*",
            battle.position,
            battle.primary_a_status.value.upper(),
            battle.primary_b_status.value.upper(),
            battle_line(battle.winner, a_name, b_name),
        )
    return table


def render(league: DynastyLeague, recaps: List[str], console: Console) -> None:
    for line in recaps:
        console.print(line)
    console.print(standings_table(league))
    a_wins, b_wins = league.get_rivalry()
    console.print(
        Panel(
            f"{league.normalizer.primary_a.name} {a_wins} - {b_wins} "
            f"{league.normalizer.primary_b.name}",
            title="Rivalry",
        )
    )
    console.print(streaks_table(league))
    console.print(battles_table(league))


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Replay dynasty league events and print the resulting tables."
    )
    parser.add_argument("events", type=Path, help="JSON file with a list of events")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for recap line selection"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override DYNASTY_LOG_LEVEL",
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_level or settings.log_level)

    try:
        events = load_events(args.events)
    except OSError as e:
        logger.error(f"Could not read events file {args.events}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Events file {args.events} is invalid: {e}")
        return 1

    league = DynastyLeague(settings)
    recaps, rejected = replay(league, events, random.Random(args.seed))
    if rejected:
        logger.warning(f"{rejected} game report(s) were rejected.")
    render(league, recaps, console or Console())
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
