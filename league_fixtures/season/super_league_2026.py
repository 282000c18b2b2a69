# league_fixtures/season/super_league_2026.py
# Betfred Super League 2026 regular-season rounds as published by the league.
# Kickoff times are read as UTC; a missing kickoff means "time TBC".
from league_fixtures.models.enums import League
from league_fixtures.season.models import SeasonDefinition

RAW_ROUNDS = [
    {
        "round": 1,
        "matches": [
            {"date": "2026-02-12", "home_code": "YORK", "away_code": "HKR", "kickoff_local": "20:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-02-13", "home_code": "WARR", "away_code": "STH", "kickoff_local": "20:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-02-13", "home_code": "LEIGH", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-02-13", "home_code": "CAT", "away_code": "HUDD", "kickoff_local": "19:00", "venue": "Stade Gilbert Brutus", "notes": "7pm CET"},
            {"date": "2026-02-14", "home_code": "HULL", "away_code": "BRAD", "kickoff_local": "17:30", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-02-14", "home_code": "WAKE", "away_code": "TOUL", "kickoff_local": "20:00", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-02-15", "home_code": "CAST", "away_code": "WIG", "kickoff_local": "15:00", "venue": "OneBore Stadium", "notes": None},
        ],
    },
    {
        "round": 3,
        "matches": [
            {"date": "2026-02-26", "home_code": "WIG", "away_code": "LEIGH", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-02-27", "home_code": "CAST", "away_code": "HUDD", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-02-27", "home_code": "HULL", "away_code": "YORK", "kickoff_local": "20:00", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-02-28", "home_code": "HKR", "away_code": "LEEDS", "kickoff_local": None, "venue": "Allegiant Stadium, Las Vegas", "notes": "Time TBC (Las Vegas)"},
            {"date": "2026-02-28", "home_code": "CAT", "away_code": "STH", "kickoff_local": "18:00", "venue": "Stade Gilbert Brutus", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-02-28", "home_code": "WARR", "away_code": "WAKE", "kickoff_local": "17:30", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-03-01", "home_code": "BRAD", "away_code": "TOUL", "kickoff_local": "15:00", "venue": "Bartercard Odsal Stadium", "notes": None},
        ],
    },
    {
        "round": 5,
        "matches": [
            {"date": "2026-03-19", "home_code": "WIG", "away_code": "YORK", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-03-20", "home_code": "WAKE", "away_code": "LEIGH", "kickoff_local": "20:00", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-03-20", "home_code": "BRAD", "away_code": "HUDD", "kickoff_local": "20:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-03-20", "home_code": "TOUL", "away_code": "STH", "kickoff_local": "18:00", "venue": "Stade Ernest-Wallon", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-03-21", "home_code": "CAT", "away_code": "HKR", "kickoff_local": "17:30", "venue": "Stade Gilbert Brutus", "notes": "5:30pm UK / 6:30pm CET"},
            {"date": "2026-03-21", "home_code": "WARR", "away_code": "CAST", "kickoff_local": "15:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-03-22", "home_code": "HULL", "away_code": "LEEDS", "kickoff_local": "15:00", "venue": "MKM Stadium", "notes": None},
        ],
    },
    {
        "round": 6,
        "matches": [
            {"date": "2026-03-26", "home_code": "CAST", "away_code": "BRAD", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-03-27", "home_code": "HKR", "away_code": "STH", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-03-27", "home_code": "YORK", "away_code": "WAKE", "kickoff_local": "20:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-03-28", "home_code": "WIG", "away_code": "HUDD", "kickoff_local": "15:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-03-28", "home_code": "LEIGH", "away_code": "TOUL", "kickoff_local": "17:30", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-03-29", "home_code": "LEEDS", "away_code": "WARR", "kickoff_local": "17:30", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-03-29", "home_code": "HULL", "away_code": "CAT", "kickoff_local": "15:00", "venue": "MKM Stadium", "notes": None},
        ],
    },
    {
        "round": 7,
        "matches": [
            {"date": "2026-04-03", "home_code": "STH", "away_code": "WIG", "kickoff_local": None, "venue": "BrewDog Stadium", "notes": "Time TBC"},
            {"date": "2026-04-03", "home_code": "HKR", "away_code": "HULL", "kickoff_local": None, "venue": "Sewell Group Craven Park", "notes": "Time TBC"},
            {"date": "2026-04-03", "home_code": "BRAD", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-04-04", "home_code": "CAT", "away_code": "TOUL", "kickoff_local": "18:00", "venue": "Stade Gilbert Brutus", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-04-04", "home_code": "HUDD", "away_code": "YORK", "kickoff_local": "15:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-04-04", "home_code": "WARR", "away_code": "LEIGH", "kickoff_local": "15:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-04-05", "home_code": "CAST", "away_code": "WAKE", "kickoff_local": "15:00", "venue": "OneBore Stadium", "notes": None},
        ],
    },
    {
        "round": 8,
        "matches": [
            {"date": "2026-04-16", "home_code": "HULL", "away_code": "STH", "kickoff_local": "20:00", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-04-17", "home_code": "TOUL", "away_code": "HKR", "kickoff_local": "18:00", "venue": "Stade Ernest-Wallon", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-04-17", "home_code": "HUDD", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-04-17", "home_code": "YORK", "away_code": "LEIGH", "kickoff_local": "20:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-04-18", "home_code": "WAKE", "away_code": "BRAD", "kickoff_local": "15:00", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-04-18", "home_code": "CAT", "away_code": "WARR", "kickoff_local": "18:00", "venue": "Stade Gilbert Brutus", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-04-19", "home_code": "WIG", "away_code": "CAST", "kickoff_local": "15:00", "venue": "Brick Community Stadium", "notes": None},
        ],
    },
    {
        "round": 9,
        "matches": [
            {"date": "2026-04-23", "home_code": "YORK", "away_code": "TOUL", "kickoff_local": "20:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-04-23", "home_code": "LEIGH", "away_code": "HUDD", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-04-24", "home_code": "LEEDS", "away_code": "CAT", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-04-24", "home_code": "WARR", "away_code": "WIG", "kickoff_local": "20:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-04-24", "home_code": "CAST", "away_code": "HULL", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-04-25", "home_code": "BRAD", "away_code": "HKR", "kickoff_local": "15:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-04-25", "home_code": "STH", "away_code": "WAKE", "kickoff_local": "17:30", "venue": "BrewDog Stadium", "notes": None},
        ],
    },
    {
        "round": 10,
        "matches": [
            {"date": "2026-04-30", "home_code": "HKR", "away_code": "CAST", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-05-01", "home_code": "LEEDS", "away_code": "WAKE", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-05-01", "home_code": "STH", "away_code": "YORK", "kickoff_local": "20:00", "venue": "BrewDog Stadium", "notes": None},
            {"date": "2026-05-02", "home_code": "CAT", "away_code": "LEIGH", "kickoff_local": "18:00", "venue": "Stade Gilbert Brutus", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-05-02", "home_code": "WIG", "away_code": "BRAD", "kickoff_local": "15:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-05-02", "home_code": "HUDD", "away_code": "WARR", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-05-03", "home_code": "HULL", "away_code": "TOUL", "kickoff_local": "15:00", "venue": "MKM Stadium", "notes": None},
        ],
    },
    {
        "round": 11,
        "matches": [
            {"date": "2026-05-14", "home_code": "HUDD", "away_code": "STH", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-05-15", "home_code": "WIG", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-05-15", "home_code": "WAKE", "away_code": "CAT", "kickoff_local": "20:00", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-05-16", "home_code": "YORK", "away_code": "CAST", "kickoff_local": "15:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-05-16", "home_code": "LEIGH", "away_code": "HKR", "kickoff_local": "17:30", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-05-16", "home_code": "TOUL", "away_code": "WARR", "kickoff_local": "18:00", "venue": "Stade Ernest-Wallon", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-05-17", "home_code": "BRAD", "away_code": "HULL", "kickoff_local": "15:00", "venue": "Bartercard Odsal Stadium", "notes": None},
        ],
    },
    {
        "round": 12,
        "matches": [
            {"date": "2026-05-21", "home_code": "HKR", "away_code": "WIG", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-05-22", "home_code": "LEIGH", "away_code": "HULL", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-05-22", "home_code": "LEEDS", "away_code": "HUDD", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-05-23", "home_code": "CAST", "away_code": "STH", "kickoff_local": "15:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-05-23", "home_code": "TOUL", "away_code": "WAKE", "kickoff_local": "18:00", "venue": "Stade Ernest-Wallon", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-05-23", "home_code": "YORK", "away_code": "CAT", "kickoff_local": "20:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-05-24", "home_code": "WARR", "away_code": "BRAD", "kickoff_local": "15:00", "venue": "Halliwell Jones Stadium", "notes": None},
        ],
    },
    {
        "round": 13,
        "matches": [
            {"date": "2026-06-04", "home_code": "LEEDS", "away_code": "STH", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-06-05", "home_code": "WARR", "away_code": "HULL", "kickoff_local": "20:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-06-05", "home_code": "BRAD", "away_code": "YORK", "kickoff_local": "20:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-06-05", "home_code": "CAST", "away_code": "LEIGH", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-06-06", "home_code": "WAKE", "away_code": "HKR", "kickoff_local": "17:30", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-06-06", "home_code": "HUDD", "away_code": "TOUL", "kickoff_local": "15:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-06-06", "home_code": "CAT", "away_code": "WIG", "kickoff_local": "18:30", "venue": "Stade Jean Bouin, Paris", "notes": "7:30pm CET"},
        ],
    },
    {
        "round": 14,
        "matches": [
            {"date": "2026-06-11", "home_code": "STH", "away_code": "WARR", "kickoff_local": "20:00", "venue": "BrewDog Stadium", "notes": None},
            {"date": "2026-06-12", "home_code": "WAKE", "away_code": "WIG", "kickoff_local": "20:00", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-06-12", "home_code": "TOUL", "away_code": "LEEDS", "kickoff_local": "18:00", "venue": "Stade Ernest-Wallon", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-06-12", "home_code": "HKR", "away_code": "YORK", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-06-13", "home_code": "HULL", "away_code": "HUDD", "kickoff_local": "15:00", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-06-13", "home_code": "CAT", "away_code": "CAST", "kickoff_local": "18:00", "venue": "Stade Gilbert Brutus", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-06-14", "home_code": "BRAD", "away_code": "LEIGH", "kickoff_local": "15:00", "venue": "Bartercard Odsal Stadium", "notes": None},
        ],
    },
    {
        "round": 15,
        "matches": [
            {"date": "2026-06-18", "home_code": "WARR", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-06-19", "home_code": "HKR", "away_code": "LEIGH", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-06-19", "home_code": "HULL", "away_code": "WAKE", "kickoff_local": "20:00", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-06-20", "home_code": "YORK", "away_code": "WIG", "kickoff_local": "15:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-06-20", "home_code": "CAST", "away_code": "TOUL", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-06-20", "home_code": "CAT", "away_code": "BRAD", "kickoff_local": "18:00", "venue": "Stade Gilbert Brutus", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-06-21", "home_code": "STH", "away_code": "HUDD", "kickoff_local": "15:00", "venue": "BrewDog Stadium", "notes": None},
        ],
    },
    {
        "round": 16,
        "matches": [
            {"date": "2026-06-25", "home_code": "WARR", "away_code": "CAT", "kickoff_local": "20:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-06-26", "home_code": "LEEDS", "away_code": "HKR", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-06-26", "home_code": "CAST", "away_code": "YORK", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-06-27", "home_code": "HULL", "away_code": "WIG", "kickoff_local": "15:00", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-06-27", "home_code": "BRAD", "away_code": "STH", "kickoff_local": "20:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-06-27", "home_code": "TOUL", "away_code": "LEIGH", "kickoff_local": "18:00", "venue": "Stade Ernest-Wallon", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-06-28", "home_code": "WAKE", "away_code": "HUDD", "kickoff_local": "15:00", "venue": "DIY Kitchens Stadium", "notes": None},
        ],
    },
    {
        "round": 17,
        "matches": [
            {"date": "2026-07-04", "home_code": "CAT", "away_code": "TOUL", "kickoff_local": None, "venue": "Magic Weekend", "notes": "Time TBC"},
            {"date": "2026-07-04", "home_code": "HUDD", "away_code": "YORK", "kickoff_local": None, "venue": "Magic Weekend", "notes": "Time TBC"},
            {"date": "2026-07-04", "home_code": "HKR", "away_code": "HULL", "kickoff_local": None, "venue": "Magic Weekend", "notes": "Time TBC"},
            {"date": "2026-07-04", "home_code": "LEIGH", "away_code": "WARR", "kickoff_local": None, "venue": "Magic Weekend", "notes": "Time TBC"},
            {"date": "2026-07-05", "home_code": "WAKE", "away_code": "CAST", "kickoff_local": None, "venue": "Magic Weekend", "notes": "Time TBC"},
            {"date": "2026-07-05", "home_code": "LEEDS", "away_code": "BRAD", "kickoff_local": None, "venue": "Magic Weekend", "notes": "Time TBC"},
            {"date": "2026-07-05", "home_code": "WIG", "away_code": "STH", "kickoff_local": None, "venue": "Magic Weekend", "notes": "Time TBC"},
        ],
    },
    {
        "round": 18,
        "matches": [
            {"date": "2026-07-09", "home_code": "YORK", "away_code": "HULL", "kickoff_local": "20:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-07-10", "home_code": "WIG", "away_code": "WARR", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-07-10", "home_code": "HUDD", "away_code": "BRAD", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-07-11", "home_code": "CAT", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "Stade Gilbert Brutus", "notes": "8pm UK / 9pm CET"},
            {"date": "2026-07-11", "home_code": "HKR", "away_code": "WAKE", "kickoff_local": "17:30", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-07-11", "home_code": "LEIGH", "away_code": "CAST", "kickoff_local": "15:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-07-12", "home_code": "STH", "away_code": "TOUL", "kickoff_local": "15:00", "venue": "BrewDog Stadium", "notes": None},
        ],
    },
    {
        "round": 19,
        "matches": [
            {"date": "2026-07-16", "home_code": "BRAD", "away_code": "WAKE", "kickoff_local": "20:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-07-17", "home_code": "STH", "away_code": "CAT", "kickoff_local": "20:00", "venue": "BrewDog Stadium", "notes": None},
            {"date": "2026-07-17", "home_code": "HUDD", "away_code": "WIG", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-07-18", "home_code": "HULL", "away_code": "LEIGH", "kickoff_local": "17:30", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-07-18", "home_code": "WARR", "away_code": "HKR", "kickoff_local": "15:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-07-18", "home_code": "TOUL", "away_code": "YORK", "kickoff_local": "20:00", "venue": "Stade Ernest-Wallon", "notes": "8pm UK / 9pm CET"},
            {"date": "2026-07-19", "home_code": "CAST", "away_code": "LEEDS", "kickoff_local": "15:00", "venue": "OneBore Stadium", "notes": None},
        ],
    },
    {
        "round": 20,
        "matches": [
            {"date": "2026-07-23", "home_code": "HULL", "away_code": "HKR", "kickoff_local": "20:00", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-07-24", "home_code": "WIG", "away_code": "STH", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-07-24", "home_code": "WAKE", "away_code": "CAST", "kickoff_local": "20:00", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-07-25", "home_code": "YORK", "away_code": "HUDD", "kickoff_local": "15:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-07-25", "home_code": "LEIGH", "away_code": "WARR", "kickoff_local": "17:30", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-07-25", "home_code": "TOUL", "away_code": "CAT", "kickoff_local": "20:00", "venue": "Stade Ernest-Wallon", "notes": "8pm UK / 9pm CET"},
            {"date": "2026-07-26", "home_code": "LEEDS", "away_code": "BRAD", "kickoff_local": "15:00", "venue": "AMT Headingley Stadium", "notes": None},
        ],
    },
    {
        "round": 21,
        "matches": [
            {"date": "2026-07-30", "home_code": "HUDD", "away_code": "HULL", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-07-31", "home_code": "LEIGH", "away_code": "WIG", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-07-31", "home_code": "HKR", "away_code": "BRAD", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-07-31", "home_code": "LEEDS", "away_code": "TOUL", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-08-01", "home_code": "YORK", "away_code": "STH", "kickoff_local": "17:30", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-08-01", "home_code": "CAST", "away_code": "WARR", "kickoff_local": "15:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-08-01", "home_code": "CAT", "away_code": "WAKE", "kickoff_local": "20:00", "venue": "Stade Gilbert Brutus", "notes": "8pm UK / 9pm CET"},
        ],
    },
    {
        "round": 22,
        "matches": [
            {"date": "2026-08-07", "home_code": "WAKE", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "DIY Kitchens Stadium", "notes": None},
            {"date": "2026-08-07", "home_code": "CAST", "away_code": "HKR", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-08-07", "home_code": "LEIGH", "away_code": "YORK", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-08-08", "home_code": "STH", "away_code": "HULL", "kickoff_local": "20:00", "venue": "BrewDog Stadium", "notes": None},
            {"date": "2026-08-08", "home_code": "BRAD", "away_code": "WARR", "kickoff_local": "15:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-08-08", "home_code": "WIG", "away_code": "TOUL", "kickoff_local": "17:30", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-08-09", "home_code": "HUDD", "away_code": "CAT", "kickoff_local": "15:00", "venue": "ACCU Stadium", "notes": None},
        ],
    },
    {
        "round": 23,
        "matches": [
            {"date": "2026-08-13", "home_code": "LEEDS", "away_code": "LEIGH", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-08-14", "home_code": "HULL", "away_code": "CAST", "kickoff_local": "20:00", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-08-14", "home_code": "HKR", "away_code": "CAT", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-08-14", "home_code": "WARR", "away_code": "YORK", "kickoff_local": "20:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-08-15", "home_code": "TOUL", "away_code": "HUDD", "kickoff_local": "20:00", "venue": "Stade Ernest-Wallon", "notes": "8pm UK / 9pm CET"},
            {"date": "2026-08-15", "home_code": "BRAD", "away_code": "WIG", "kickoff_local": "15:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-08-15", "home_code": "WAKE", "away_code": "STH", "kickoff_local": "17:30", "venue": "DIY Kitchens Stadium", "notes": None},
        ],
    },
    {
        "round": 24,
        "matches": [
            {"date": "2026-08-20", "home_code": "HKR", "away_code": "TOUL", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-08-21", "home_code": "WIG", "away_code": "WAKE", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-08-21", "home_code": "LEIGH", "away_code": "BRAD", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-08-22", "home_code": "STH", "away_code": "CAST", "kickoff_local": "15:00", "venue": "BrewDog Stadium", "notes": None},
            {"date": "2026-08-22", "home_code": "CAT", "away_code": "HULL", "kickoff_local": "20:00", "venue": "Stade Gilbert Brutus", "notes": "8pm UK / 9pm CET"},
            {"date": "2026-08-23", "home_code": "WARR", "away_code": "HUDD", "kickoff_local": "15:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-08-23", "home_code": "YORK", "away_code": "LEEDS", "kickoff_local": "15:00", "venue": "LNER Community Stadium", "notes": None},
        ],
    },
    {
        "round": 25,
        "matches": [
            {"date": "2026-08-27", "home_code": "WIG", "away_code": "HKR", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
            {"date": "2026-08-28", "home_code": "CAST", "away_code": "CAT", "kickoff_local": "20:00", "venue": "OneBore Stadium", "notes": None},
            {"date": "2026-08-28", "home_code": "STH", "away_code": "LEEDS", "kickoff_local": "20:00", "venue": "BrewDog Stadium", "notes": None},
            {"date": "2026-08-28", "home_code": "HUDD", "away_code": "LEIGH", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-08-29", "home_code": "TOUL", "away_code": "BRAD", "kickoff_local": "20:00", "venue": "Stade Ernest-Wallon", "notes": "8pm UK / 9pm CET"},
            {"date": "2026-08-29", "home_code": "HULL", "away_code": "WARR", "kickoff_local": "17:30", "venue": "MKM Stadium", "notes": None},
            {"date": "2026-08-29", "home_code": "WAKE", "away_code": "YORK", "kickoff_local": "15:00", "venue": "DIY Kitchens Stadium", "notes": None},
        ],
    },
    {
        "round": 26,
        "matches": [
            {"date": "2026-09-03", "home_code": "BRAD", "away_code": "CAST", "kickoff_local": "20:00", "venue": "Bartercard Odsal Stadium", "notes": None},
            {"date": "2026-09-04", "home_code": "HKR", "away_code": "HUDD", "kickoff_local": "20:00", "venue": "Sewell Group Craven Park", "notes": None},
            {"date": "2026-09-04", "home_code": "LEIGH", "away_code": "STH", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-09-04", "home_code": "TOUL", "away_code": "HULL", "kickoff_local": "18:00", "venue": "Stade Ernest-Wallon", "notes": "6pm UK / 7pm CET"},
            {"date": "2026-09-05", "home_code": "LEEDS", "away_code": "WIG", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-09-05", "home_code": "CAT", "away_code": "YORK", "kickoff_local": "17:00", "venue": "Stade Gilbert Brutus", "notes": "5pm UK / 6pm CET"},
            {"date": "2026-09-05", "home_code": "WAKE", "away_code": "WARR", "kickoff_local": "15:00", "venue": "DIY Kitchens Stadium", "notes": None},
        ],
    },
    {
        "round": 27,
        "matches": [
            {"date": "2026-09-11", "home_code": "HUDD", "away_code": "CAST", "kickoff_local": "20:00", "venue": "ACCU Stadium", "notes": None},
            {"date": "2026-09-11", "home_code": "LEEDS", "away_code": "HULL", "kickoff_local": "20:00", "venue": "AMT Headingley Stadium", "notes": None},
            {"date": "2026-09-11", "home_code": "LEIGH", "away_code": "WAKE", "kickoff_local": "20:00", "venue": "Progress With Unity Stadium", "notes": None},
            {"date": "2026-09-11", "home_code": "WARR", "away_code": "TOUL", "kickoff_local": "20:00", "venue": "Halliwell Jones Stadium", "notes": None},
            {"date": "2026-09-11", "home_code": "YORK", "away_code": "BRAD", "kickoff_local": "20:00", "venue": "LNER Community Stadium", "notes": None},
            {"date": "2026-09-11", "home_code": "STH", "away_code": "HKR", "kickoff_local": "20:00", "venue": "BrewDog Stadium", "notes": None},
            {"date": "2026-09-11", "home_code": "WIG", "away_code": "CAT", "kickoff_local": "20:00", "venue": "Brick Community Stadium", "notes": None},
        ],
    },
]


def super_league_2026() -> SeasonDefinition:
    return SeasonDefinition.model_validate(
        {"league": League.SUPER_LEAGUE, "season": "2026", "rounds": RAW_ROUNDS}
    )
