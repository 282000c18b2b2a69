import sys
import argparse
from typing import List, Optional

# --- Settings/Logging ---
from league_fixtures.logging.setup import setup_logging
from league_fixtures.config.settings import settings

setup_logging()

from loguru import logger

from league_fixtures.catalog import FixtureCatalog, build_catalog
from league_fixtures.models.views import FixtureView
from league_fixtures.season.loader import SeasonDataError

from rich import print
from rich.panel import Panel
from rich.table import Table


def fixtures_table(title: str, fixtures: List[FixtureView]) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Round")
    table.add_column("Kickoff (UTC)")
    table.add_column("Home")
    table.add_column("Away")
    table.add_column("Venue")
    table.add_column("Match ID", overflow="fold")
    for fixture in fixtures:
        table.add_row(
            str(fixture.match_number),
            fixture.round or "",
            f"{fixture.date} {fixture.time[:5]}",
            fixture.home_team.name,
            fixture.away_team.name,
            fixture.venue,
            fixture.id,
        )
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reconciled rugby league fixture lists and match id lookup."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    fixtures = commands.add_parser("fixtures", help="Show a league's master fixture list.")
    fixtures.add_argument("--league", default="Super League")

    team = commands.add_parser("team", help="Show one team's fixtures.")
    team.add_argument("team", help="Team id, season code or name.")
    team.add_argument("--league", default=None, help="League hint.")

    resolve = commands.add_parser("resolve", help="Resolve a current or legacy match id.")
    resolve.add_argument("match_id")

    search = commands.add_parser("search", help="Search fixtures by team, league or venue.")
    search.add_argument("query")
    return parser


def run(catalog: FixtureCatalog, args: argparse.Namespace) -> int:
    if args.command == "fixtures":
        fixtures = catalog.get_master_fixtures(args.league)
        if not fixtures:
            logger.warning(f"No fixtures for league '{args.league}'.")
            return 1
        print(fixtures_table(f"{fixtures[0].league} {settings.current_season}", fixtures))
    elif args.command == "team":
        fixtures = catalog.get_fixtures_for_team(args.team, args.league)
        if not fixtures:
            logger.warning(f"No fixtures for team '{args.team}'.")
            return 1
        print(fixtures_table(f"Fixtures for {args.team}", fixtures))
    elif args.command == "resolve":
        fixture = catalog.find_match_by_id(args.match_id)
        if fixture is None:
            print(Panel(f"No match found for [bold]{args.match_id}[/bold]", style="red"))
            return 1
        print(
            Panel(
                fixture.model_dump_json(by_alias=True, indent=2),
                title=f"{fixture.home_team.name} v {fixture.away_team.name}",
            )
        )
    elif args.command == "search":
        fixtures = catalog.search_fixtures(args.query)
        print(fixtures_table(f"Search: {args.query} ({len(fixtures)} found)", fixtures))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    try:
        catalog = build_catalog()
    except SeasonDataError as e:
        logger.error(f"Could not load season data: {e}")
        return 2
    return run(catalog, args)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
