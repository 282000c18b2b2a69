from typing import Dict, Iterable, List, Mapping, Optional

from loguru import logger

from league_fixtures.utils.misc_utils import normalize_key

# Short forms whose substring fallback is ambiguous or misses entirely.
# Key: normalized raw spelling, Value: canonical name
DEFAULT_TEAM_ALIASES: Dict[str, str] = {
    # Super League
    "hullkr": "Hull Kingston Rovers",
    "hkr": "Hull Kingston Rovers",
    "hullkingston": "Hull Kingston Rovers",
    "hullfc": "Hull FC",
    "sainthelens": "St Helens",
    "sthelensrfc": "St Helens",
    "catalans": "Catalans Dragons",
    "wakefield": "Wakefield Trinity",
    "toulouse": "Toulouse Olympique",
    # NRL
    "storm": "Melbourne Storm",
    "broncos": "Brisbane Broncos",
    "bulldogs": "Canterbury Bulldogs",
    "canterburybankstownbulldogs": "Canterbury Bulldogs",
    "sharks": "Cronulla Sharks",
    "cronullasutherlandsharks": "Cronulla Sharks",
    "manly": "Manly Sea Eagles",
    "manlywarringahseaeagles": "Manly Sea Eagles",
    "nzwarriors": "New Zealand Warriors",
    "cowboys": "North Queensland Cowboys",
    "rabbitohs": "South Sydney Rabbitohs",
    "souths": "South Sydney Rabbitohs",
    "stgeorge": "St George Illawarra Dragons",
    "roosters": "Sydney Roosters",
    "eastsroosters": "Sydney Roosters",
    "titans": "Gold Coast Titans",
    "raiders": "Canberra Raiders",
    "eels": "Parramatta Eels",
    "panthers": "Penrith Panthers",
}


class TeamNameCanonicalizer:
    """Maps arbitrary team-name spellings onto one canonical spelling.

    Lookup order: alias table, exact normalized name, then a substring
    fallback that must hit exactly one club. Anything else comes back
    unchanged, so canonicalize(canonicalize(x)) == canonicalize(x).
    """

    def __init__(
        self,
        canonical_names: Iterable[str],
        aliases: Optional[Mapping[str, str]] = None,
    ):
        self.canonical_names: List[str] = []
        self._by_key: Dict[str, str] = {}
        for name in canonical_names:
            key = normalize_key(name)
            if not key or key in self._by_key:
                continue
            self._by_key[key] = name
            self.canonical_names.append(name)

        self.team_aliases: Dict[str, str] = {}
        for raw, target in (aliases if aliases is not None else {}).items():
            key = normalize_key(raw)
            if target not in self.canonical_names:
                raise ValueError(
                    f"Alias '{raw}' points at '{target}', which is not a canonical team name."
                )
            if key in self._by_key and self._by_key[key] != target:
                raise ValueError(
                    f"Alias '{raw}' shadows canonical name '{self._by_key[key]}'."
                )
            self.team_aliases[key] = target

        logger.info(
            f"Canonicalizer initialized with {len(self.canonical_names)} teams "
            f"and {len(self.team_aliases)} aliases."
        )

    def canonicalize(self, name: Optional[str]) -> Optional[str]:
        key = normalize_key(name)
        if not key:
            return name

        alias = self.team_aliases.get(key)
        if alias:
            return alias

        exact = self._by_key.get(key)
        if exact:
            return exact

        candidates = [
            canonical
            for team_key, canonical in self._by_key.items()
            if key in team_key or team_key in key
        ]
        if len(candidates) == 1:
            return candidates[0]
        if candidates:
            logger.warning(
                f"Team name '{name}' is ambiguous between {candidates}; add an alias. Keeping it unchanged."
            )
        else:
            logger.debug(f"Could not canonicalize team name: {name}")
        return name

    def is_canonical(self, name: Optional[str]) -> bool:
        return name in self.canonical_names
