from datetime import datetime, time, timezone
from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger
from pydantic import ValidationError

from league_fixtures.models.fixture import PLACEHOLDER_KICKOFF, SourceFixture
from league_fixtures.registry.team_registry import TeamRegistry
from league_fixtures.season.models import RoundMatch, SeasonDefinition

# Per-team source schedules, keyed by registry team id
FixturesByTeam = Dict[str, List[SourceFixture]]


class SeasonDataError(Exception):
    """Raised when a season definition cannot be read or validated."""

    pass


def load_season_file(path: Union[str, Path]) -> SeasonDefinition:
    """Reads a JSON season definition ({"league", "season", "rounds": [...]})."""
    season_path = Path(path)
    try:
        raw = season_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeasonDataError(f"Could not read season file {season_path}: {e}") from e
    try:
        definition = SeasonDefinition.model_validate_json(raw)
    except ValidationError as e:
        raise SeasonDataError(f"Invalid season file {season_path}: {e}") from e
    logger.info(
        f"Loaded {definition.league.value} {definition.season} season from {season_path} "
        f"({len(definition.rounds)} rounds)."
    )
    return definition


def _parse_kickoff(match: RoundMatch, placeholder: time) -> time:
    if match.kickoff_local is None:
        return placeholder
    try:
        return datetime.strptime(match.kickoff_local, "%H:%M").time()
    except ValueError:
        logger.warning(
            f"Could not parse kickoff '{match.kickoff_local}' for {match.home_code} v "
            f"{match.away_code} on {match.date}; using placeholder."
        )
        return placeholder


def expand_season(
    definition: SeasonDefinition,
    registry: TeamRegistry,
    placeholder: Optional[time] = None,
) -> FixturesByTeam:
    """Turns round definitions into each participant's own fixture list.

    Every playable match is declared twice, once in the home team's list and
    once in the away team's. Byes and entries naming unknown teams are
    skipped.
    """
    if placeholder is None:
        placeholder = PLACEHOLDER_KICKOFF
    fixtures_by_team: FixturesByTeam = {}
    skipped = 0

    for season_round in definition.rounds:
        for slot, match in enumerate(season_round.matches):
            if not match.away_code:
                logger.debug(
                    f"Round {season_round.round}: {match.home_code} has a bye, skipping."
                )
                continue

            home = registry.find(match.home_code)
            away = registry.find(match.away_code)
            if not home or not away:
                logger.warning(
                    f"Round {season_round.round}: unknown team code in "
                    f"{match.home_code} v {match.away_code}, skipping."
                )
                skipped += 1
                continue

            kickoff = datetime.combine(
                match.date, _parse_kickoff(match, placeholder), tzinfo=timezone.utc
            )
            fixture = SourceFixture(
                round_number=season_round.round,
                slot=slot,
                kickoff_utc=kickoff,
                venue=match.venue,
                home_team=home.name,
                away_team=away.name,
                notes=match.notes,
            )
            fixtures_by_team.setdefault(home.id, []).append(fixture)
            fixtures_by_team.setdefault(away.id, []).append(fixture)

    logger.info(
        f"Expanded {definition.league.value} {definition.season}: "
        f"{len(fixtures_by_team)} teams, {skipped} entries skipped."
    )
    return fixtures_by_team
