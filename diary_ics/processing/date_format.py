"""Strict parsing of diary file names against moment-style date patterns.

Diary naming patterns use the same tokens as the daily-notes plugin
(``YYYY-MM-DD``, ``dddd, MMMM Do YYYY``, ...). Parsing is strict: the whole
name must be consumed, numeric tokens must have the exact width their token
implies, and the resulting calendar date must exist.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache

from diary_ics.exceptions import DateFormatError

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTH_ABBRS = [name[:3] for name in MONTH_NAMES]
WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
WEEKDAY_ABBRS = [name[:3] for name in WEEKDAY_NAMES]
WEEKDAY_MINS = [name[:2] for name in WEEKDAY_NAMES]


def _alternation(names: list[str]) -> str:
    # Longest first so "June" never loses to "Jun"
    return "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))


# Token -> regex fragment. Order matters for tokenising: longer tokens first.
TOKEN_PATTERNS = {
    "YYYY": r"\d{4}",
    "YY": r"\d{2}",
    "Y": r"[+-]?\d{1,6}",
    "MMMM": _alternation(MONTH_NAMES),
    "MMM": _alternation(MONTH_ABBRS),
    "MM": r"\d{2}",
    "M": r"[1-9]\d?",
    "DDDD": r"\d{3}",
    "DDD": r"[1-9]\d{0,2}",
    "Do": r"[1-9]\d?(?:st|nd|rd|th)",
    "DD": r"\d{2}",
    "D": r"[1-9]\d?",
    "dddd": _alternation(WEEKDAY_NAMES),
    "ddd": _alternation(WEEKDAY_ABBRS),
    "dd": _alternation(WEEKDAY_MINS),
    "d": r"[0-6]",
}

TOKENIZER = re.compile(
    r"\[[^\]]*\]|" + "|".join(re.escape(token) for token in TOKEN_PATTERNS) + r"|."
)

# Moment tokens with time, week or timezone semantics that an all-day diary
# name cannot carry.
UNSUPPORTED_TOKEN_LETTERS = set("HhkmsSaAQwWgGEeXxZN")


@dataclass(frozen=True)
class CompiledFormat:
    """A diary naming pattern compiled to a regular expression."""

    pattern: str
    regex: re.Pattern
    tokens: tuple[str, ...]


@lru_cache(maxsize=32)
def compile_format(pattern: str) -> CompiledFormat:
    """Compile a moment-style pattern.

    Raises:
        DateFormatError: If the pattern is empty or uses time/week tokens
    """
    if not pattern:
        raise DateFormatError("Diary naming pattern must not be empty")

    parts = []
    tokens = []
    for piece in TOKENIZER.findall(pattern):
        if piece.startswith("[") and piece.endswith("]") and len(piece) >= 2:
            parts.append(re.escape(piece[1:-1]))
        elif piece in TOKEN_PATTERNS:
            parts.append(f"({TOKEN_PATTERNS[piece]})")
            tokens.append(piece)
        elif piece in UNSUPPORTED_TOKEN_LETTERS:
            raise DateFormatError(
                f"Unsupported token '{piece}' in diary naming pattern '{pattern}'"
            )
        else:
            parts.append(re.escape(piece))

    if not tokens:
        raise DateFormatError(f"Diary naming pattern '{pattern}' has no date tokens")

    regex = re.compile("".join(parts), re.IGNORECASE)
    return CompiledFormat(pattern=pattern, regex=regex, tokens=tuple(tokens))


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _name_index(value: str, names: list[str]) -> int:
    lowered = value.lower()
    return [name.lower() for name in names].index(lowered)


def parse_date(text: str, pattern: str) -> date | None:
    """Parse ``text`` as a date written in ``pattern``.

    Returns:
        The date, or None if the text does not match the pattern exactly or
        names a date that does not exist (e.g. ``2023-02-29``)

    Raises:
        DateFormatError: If the pattern itself is invalid
    """
    compiled = compile_format(pattern)
    match = compiled.regex.fullmatch(text)
    if match is None:
        return None

    year = date.today().year
    month = 1
    day = 1
    day_of_year = None
    weekday = None

    for token, value in zip(compiled.tokens, match.groups()):
        if token == "YYYY" or token == "Y":
            year = int(value)
        elif token == "YY":
            short = int(value)
            year = short + (1900 if short > 68 else 2000)
        elif token == "MMMM":
            month = _name_index(value, MONTH_NAMES) + 1
        elif token == "MMM":
            month = _name_index(value, MONTH_ABBRS) + 1
        elif token in ("MM", "M"):
            month = int(value)
        elif token in ("DDDD", "DDD"):
            day_of_year = int(value)
        elif token == "Do":
            number, suffix = value[:-2], value[-2:]
            day = int(number)
            if suffix.lower() != _ordinal_suffix(day):
                return None
        elif token in ("DD", "D"):
            day = int(value)
        elif token == "dddd":
            weekday = _name_index(value, WEEKDAY_NAMES)
        elif token == "ddd":
            weekday = _name_index(value, WEEKDAY_ABBRS)
        elif token == "dd":
            weekday = _name_index(value, WEEKDAY_MINS)
        elif token == "d":
            weekday = int(value)

    try:
        if day_of_year is not None:
            result = date(year, 1, 1) + timedelta(days=day_of_year - 1)
            if result.year != year:
                return None
        else:
            result = date(year, month, day)
    except (ValueError, OverflowError):
        return None

    # Sunday is 0 in moment, Monday is 0 in Python
    if weekday is not None and (result.weekday() + 1) % 7 != weekday:
        return None

    return result
