# league_fixtures/utils/misc_utils.py
import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_key(value: Optional[str]) -> str:
    """Lowercases and strips everything outside [a-z0-9] ("Hull K.R." -> "hullkr")."""
    if not value:
        return ""
    return _NON_ALNUM.sub("", str(value).lower())


def slugify(value: Optional[object]) -> str:
    """URL-style slug: lowercase, non-alphanumeric runs become single hyphens."""
    if value is None:
        return ""
    return _NON_ALNUM.sub("-", str(value).lower()).strip("-")


def names_fuzzy_match(left: Optional[str], right: Optional[str]) -> bool:
    """Case/punctuation-insensitive equality, or containment in either direction."""
    left_key, right_key = normalize_key(left), normalize_key(right)
    if not left_key or not right_key:
        return False
    return left_key == right_key or left_key in right_key or right_key in left_key
