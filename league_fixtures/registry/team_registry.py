from typing import Dict, Iterable, List, Optional, Union

from loguru import logger

from league_fixtures.models.enums import League
from league_fixtures.models.team import TeamMeta
from league_fixtures.registry.teams import BUNDLED_TEAMS
from league_fixtures.utils.misc_utils import slugify

TeamIdentifier = Union[str, int, None]


class TeamRegistry:
    """Read-only team metadata lookup by provider id, season code or name slug."""

    def __init__(self, teams: Iterable[TeamMeta]):
        self._teams: List[TeamMeta] = []
        self._by_id: Dict[str, TeamMeta] = {}
        self._by_code: Dict[str, TeamMeta] = {}
        self._by_slug: Dict[str, TeamMeta] = {}

        for team in teams:
            if team.id in self._by_id:
                raise ValueError(f"Duplicate team id in registry: {team.id}")
            self._teams.append(team)
            self._by_id[team.id] = team
            if team.code:
                self._by_code[team.code.upper()] = team
            slug = slugify(team.name)
            if slug:
                self._by_slug[slug] = team

        logger.debug(f"Team registry built with {len(self._teams)} teams.")

    @classmethod
    def bundled(cls) -> "TeamRegistry":
        return cls(BUNDLED_TEAMS)

    @property
    def teams(self) -> List[TeamMeta]:
        return list(self._teams)

    def find(self, identifier: TeamIdentifier) -> Optional[TeamMeta]:
        """Finds a team by provider id, season code or (slugified) name."""
        if identifier is None:
            return None
        key = str(identifier).strip()
        if not key:
            return None
        team = self._by_id.get(key) or self._by_code.get(key.upper())
        if team:
            return team
        return self._by_slug.get(slugify(key))

    def find_by_code(self, code: Optional[str]) -> Optional[TeamMeta]:
        if not code:
            return None
        return self._by_code.get(code.strip().upper())

    def find_by_name(self, name: Optional[str]) -> Optional[TeamMeta]:
        if not name:
            return None
        return self._by_slug.get(slugify(name))

    def resolve_identifier(self, identifier: TeamIdentifier) -> Optional[str]:
        """Registry id for a known team, the identifier itself otherwise."""
        if identifier is None or not str(identifier).strip():
            return None
        team = self.find(identifier)
        return team.id if team else str(identifier)

    def teams_in_league(self, league: League) -> List[TeamMeta]:
        return [team for team in self._teams if team.league == league]
