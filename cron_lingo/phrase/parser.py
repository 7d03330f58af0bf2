# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Parse a schedule phrase into a `ParsedBlock`.

The grammar, with WS a single whitespace character:

    phrase       := "at" WS timelist [WS weekdaypart] [WS weekpart]
    timelist     := "every hour" | time (sep time)*
    time         := digit [digit] [":" digit digit] WS ("AM" | "PM")
    weekdaypart  := ("on" WS | "(") weekdayentry (sep weekdayentry)* [")"]
    weekdayentry := ["the" WS] modifier WS Weekday | Weekday "s"
    weekpart     := "in even weeks" | "in odd weeks"
    sep          := "," WS | WS "and" WS
    modifier     := "1st" | "first" | "2nd" | "second" | "3rd" | "third"
                  | "4th" | "fourth" | "last"

Keywords are case-sensitive. A parenthesized weekday list must be closed. The first error
aborts the parse; there is no partial result.
"""
from datetime import time
from typing import Final, Optional

from cron_lingo.errors import (
    CronLingoError,
    EmptyExpressionError,
    TimeParseError,
    UnexpectedEndOfInputError,
)
from cron_lingo.observability.powertools_logging import powertools_logger
from cron_lingo.phrase.cursor import DIGITS, Cursor
from cron_lingo.phrase.expression import (
    ParsedBlock,
    WeekdayEntry,
    WeekdayModifier,
    WeekVariant,
    weekday_names,
)

logger: Final = powertools_logger()

EVERY_HOUR: Final = "every hour"

_modifiers: Final = {
    "1st": WeekdayModifier.FIRST,
    "first": WeekdayModifier.FIRST,
    "2nd": WeekdayModifier.SECOND,
    "second": WeekdayModifier.SECOND,
    "3rd": WeekdayModifier.THIRD,
    "third": WeekdayModifier.THIRD,
    "4th": WeekdayModifier.FOURTH,
    "fourth": WeekdayModifier.FOURTH,
    "last": WeekdayModifier.LAST,
}

_week_clauses: Final = {
    "in even weeks": WeekVariant.EVEN,
    "in odd weeks": WeekVariant.ODD,
}

_WEEK_CLAUSE_EXPECTED: Final = "'in even weeks' or 'in odd weeks'"


def parse(text: str) -> ParsedBlock:
    """
    Parse a schedule phrase
    :param text: the phrase, e.g. "at 6 AM on Mondays and Thursdays in even weeks"
    :return: the block described by the phrase
    :raises CronLingoError: on the first error found in the phrase
    """
    if len(text) == 0:
        raise EmptyExpressionError()

    try:
        block = _match_phrase(Cursor(text))
    except CronLingoError as err:
        logger.debug(f'Failed to parse phrase "{text}" ({err.error_code.value}): {err}')
        raise

    logger.debug(f'Parsed phrase "{text}" as "{block}"')
    return block


def _match_phrase(cursor: Cursor) -> ParsedBlock:
    cursor.eat_keyword("at")
    cursor.eat_whitespace()
    times = _match_times(cursor)

    days: Optional[tuple[WeekdayEntry, ...]] = None
    weeks: Optional[WeekVariant] = None

    if not cursor.at_end():
        cursor.eat_whitespace()
        intro = cursor.eat_one_of(
            ("(", "on", *_week_clauses),
            expected=f"'on', '(', {_WEEK_CLAUSE_EXPECTED}",
        )
        if intro in _week_clauses:
            weeks = _week_clauses[intro]
        else:
            if intro == "on":
                cursor.eat_whitespace()
            days = _match_weekdays(cursor, parenthesized=intro == "(")
            if not cursor.at_end():
                cursor.eat_whitespace()
                weeks = _match_week(cursor)

    if not cursor.at_end():
        raise cursor.syntax_error("end of input")

    return ParsedBlock(times=times, days=days, weeks=weeks)


def _eat_separator(cursor: Cursor) -> bool:
    """consume a list separator if one follows, either ", " or " and " """
    if cursor.peek() == ",":
        cursor.eat_char(",")
        cursor.eat_whitespace()
        return True
    if cursor.expect_sequence(" and"):
        cursor.eat_whitespace()
        cursor.eat_keyword("and")
        cursor.eat_whitespace()
        return True
    return False


def _match_times(cursor: Cursor) -> tuple[time, ...]:
    if cursor.at_end():
        raise UnexpectedEndOfInputError()
    if not _is_digit(cursor.peek()):
        cursor.eat_one_of((EVERY_HOUR,), expected=f"a time or '{EVERY_HOUR}'")
        return tuple(time(hour) for hour in range(24))

    times = [_match_time(cursor)]
    while _eat_separator(cursor):
        times.append(_match_time(cursor))
    return tuple(times)


def _match_time(cursor: Cursor) -> time:
    start = cursor.position

    hour_str = cursor.eat_digit()
    if _is_digit(cursor.peek()):
        hour_str += cursor.eat_digit()

    minute_str = "00"
    if cursor.peek() == ":":
        cursor.eat_char(":")
        minute_str = cursor.eat_digit() + cursor.eat_digit()

    cursor.eat_whitespace()
    period = cursor.eat_one_of(("AM", "PM"), expected="'AM' or 'PM'")

    return _to_24_hour_time(
        cursor.text_since(start), int(hour_str), int(minute_str), period
    )


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and char in DIGITS


def _to_24_hour_time(literal: str, hour: int, minute: int, period: str) -> time:
    # 12 AM is midnight, 12 PM is noon
    if not 1 <= hour <= 12:
        raise TimeParseError(literal, "hour must be between 1 and 12")
    if not 0 <= minute <= 59:
        raise TimeParseError(literal, "minute must be between 00 and 59")

    hour = hour % 12
    if period == "PM":
        hour += 12
    return time(hour, minute)


def _match_weekdays(cursor: Cursor, parenthesized: bool) -> tuple[WeekdayEntry, ...]:
    entries = [_match_weekday(cursor)]
    while _eat_separator(cursor):
        entries.append(_match_weekday(cursor))

    if parenthesized:
        cursor.eat_char(")", expected="',', ' and' or ')'")

    return tuple(entries)


def _match_weekday(cursor: Cursor) -> WeekdayEntry:
    char = cursor.peek()
    if char is None:
        raise UnexpectedEndOfInputError()

    if char.isupper():
        weekday = _match_weekday_name(cursor)
        # every occurrence, plural form required
        cursor.eat_char("s", expected=f"'{weekday_names[weekday]}s'")
        return WeekdayEntry(weekday=weekday)

    if cursor.expect_sequence("the"):
        cursor.eat_keyword("the")
        cursor.eat_whitespace()

    modifier = _modifiers[
        cursor.eat_one_of(
            _modifiers,
            expected="a weekday or one of " + ", ".join(f"'{m}'" for m in _modifiers),
        )
    ]
    cursor.eat_whitespace()
    weekday = _match_weekday_name(cursor)
    # a single occurrence, singular form required
    if cursor.peek() == "s":
        raise cursor.syntax_error(
            f"'{weekday_names[weekday]}' after '{modifier.value}'"
        )
    return WeekdayEntry(weekday=weekday, modifier=modifier)


def _match_weekday_name(cursor: Cursor) -> int:
    name = cursor.eat_one_of(weekday_names, expected="a weekday name such as 'Monday'")
    return weekday_names.index(name)


def _match_week(cursor: Cursor) -> WeekVariant:
    week = cursor.eat_one_of(_week_clauses, expected=_WEEK_CLAUSE_EXPECTED)
    return _week_clauses[week]
