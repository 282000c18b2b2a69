# league_fixtures/registry/teams.py
from league_fixtures.models.enums import League
from league_fixtures.models.team import TeamMeta

# Clubs served locally, keyed by the sports data provider team id.
BUNDLED_TEAMS = (
    TeamMeta(id="135191", name="Brisbane Broncos", league=League.NRL, country="Australia", venue="Suncorp Stadium (Lang Park)"),
    TeamMeta(id="135186", name="Canberra Raiders", league=League.NRL, country="Australia", venue="GIO Stadium (Canberra Stadium)"),
    TeamMeta(id="135187", name="Canterbury Bulldogs", league=League.NRL, country="Australia", venue="Accor Stadium (Stadium Australia)"),
    TeamMeta(id="135184", name="Cronulla Sharks", league=League.NRL, country="Australia", venue="Ocean Protect Stadium (Shark Park)"),
    TeamMeta(id="140097", name="Dolphins", league=League.NRL, country="Australia", venue="Suncorp Stadium (Lang Park)"),
    TeamMeta(id="135194", name="Gold Coast Titans", league=League.NRL, country="Australia", venue="Cbus Super Stadium (Robina Stadium)"),
    TeamMeta(id="135188", name="Manly Sea Eagles", league=League.NRL, country="Australia", venue="4 Pines Park (Brookvale Oval)"),
    TeamMeta(id="135190", name="Melbourne Storm", league=League.NRL, country="Australia", venue="AAMI Park (Melbourne Rectangular Stadium)"),
    TeamMeta(id="135198", name="Newcastle Knights", league=League.NRL, country="Australia", venue="McDonald Jones Stadium (Newcastle International Sports Centre)"),
    TeamMeta(id="135193", name="New Zealand Warriors", league=League.NRL, country="New Zealand", venue="Go Media Stadium (Mount Smart Stadium)"),
    TeamMeta(id="135196", name="North Queensland Cowboys", league=League.NRL, country="Australia", venue="Queensland Country Bank Stadium (North Queensland Stadium)"),
    TeamMeta(id="135183", name="Parramatta Eels", league=League.NRL, country="Australia", venue="CommBank Stadium (Western Sydney Stadium)"),
    TeamMeta(id="135197", name="Penrith Panthers", league=League.NRL, country="Australia", venue="BlueBet Stadium (Penrith Stadium)"),
    TeamMeta(id="135185", name="South Sydney Rabbitohs", league=League.NRL, country="Australia", venue="Accor Stadium (Stadium Australia)"),
    TeamMeta(id="135195", name="St George Illawarra Dragons", league=League.NRL, country="Australia", venue="WIN Stadium (Wollongong Showground)"),
    TeamMeta(id="135192", name="Sydney Roosters", league=League.NRL, country="Australia", venue="Allianz Stadium (Sydney Football Stadium)"),
    TeamMeta(id="135189", name="Wests Tigers", league=League.NRL, country="Australia", venue="Campbelltown Sports Stadium"),
    TeamMeta(id="137398", name="Bradford Bulls", league=League.SUPER_LEAGUE, code="BRAD", country="England", venue="Bartercard Odsal Stadium"),
    TeamMeta(id="135211", name="Castleford Tigers", league=League.SUPER_LEAGUE, code="CAST", country="England", venue="OneBore Stadium"),
    TeamMeta(id="135212", name="Catalans Dragons", league=League.SUPER_LEAGUE, code="CAT", country="France", venue="Stade Gilbert Brutus"),
    TeamMeta(id="135213", name="Huddersfield Giants", league=League.SUPER_LEAGUE, code="HUDD", country="England", venue="ACCU Stadium"),
    TeamMeta(id="135214", name="Hull FC", league=League.SUPER_LEAGUE, code="HULL", country="England", venue="MKM Stadium"),
    TeamMeta(id="135215", name="Hull Kingston Rovers", league=League.SUPER_LEAGUE, code="HKR", country="England", venue="Sewell Group Craven Park"),
    TeamMeta(id="135216", name="Leeds Rhinos", league=League.SUPER_LEAGUE, code="LEEDS", country="England", venue="AMT Headingley Stadium"),
    TeamMeta(id="137396", name="Leigh Leopards", league=League.SUPER_LEAGUE, code="LEIGH", country="England", venue="Progress With Unity Stadium"),
    TeamMeta(id="135218", name="St Helens", league=League.SUPER_LEAGUE, code="STH", country="England", venue="BrewDog Stadium"),
    TeamMeta(id="137395", name="Toulouse Olympique", league=League.SUPER_LEAGUE, code="TOUL", country="France", venue="Stade Ernest-Wallon"),
    TeamMeta(id="135221", name="Wakefield Trinity", league=League.SUPER_LEAGUE, code="WAKE", country="England", venue="DIY Kitchens Stadium"),
    TeamMeta(id="135220", name="Warrington Wolves", league=League.SUPER_LEAGUE, code="WARR", country="England", venue="Halliwell Jones Stadium"),
    TeamMeta(id="135222", name="Wigan Warriors", league=League.SUPER_LEAGUE, code="WIG", country="England", venue="Brick Community Stadium"),
    TeamMeta(id="137405", name="York Knights", league=League.SUPER_LEAGUE, code="YORK", country="England", venue="LNER Community Stadium"),
)
