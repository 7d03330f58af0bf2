# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Expand a `ParsedBlock` into the candidate instants that may come next"""
from datetime import date, datetime, timedelta
from typing import Final, Optional

from cron_lingo.phrase.expression import ParsedBlock, WeekdayModifier, WeekVariant
from cron_lingo.util.time import is_aware

ONE_WEEK: Final = timedelta(weeks=1)

# first and last day of month allowed for each numbered occurrence of a weekday
_occurrence_bounds: Final = {
    WeekdayModifier.FIRST: (1, 7),
    WeekdayModifier.SECOND: (8, 14),
    WeekdayModifier.THIRD: (15, 21),
    WeekdayModifier.FOURTH: (22, 28),
}


def compute_dates(cursor: datetime, block: ParsedBlock) -> list[datetime]:
    """
    Build the candidate instants for `block` that follow `cursor`.

    Every time of day is combined with each of the seven days starting at the cursor's
    date; a candidate that is not strictly after the cursor moves one week ahead. When the
    block names weekdays, candidates on other weekdays are dropped and each remaining
    candidate moves ahead week by week until it satisfies the weekday modifier and week
    parity.

    The result is ordered by time of day, then by day offset, then by weekday entry. The
    earliest candidate is the next occurrence; on an exact tie the earlier candidate in
    this order is picked by the iterators. That tie-break follows from the construction
    order and is not a guarantee.

    :param cursor: timezone-aware instant, candidates are expressed in its offset
    :param block: the parsed phrase
    :return: candidates strictly after the cursor, not sorted
    """
    if not is_aware(cursor):
        raise ValueError(
            f"Expected a timezone-aware cursor, received {cursor.isoformat()}"
        )

    today: Final = cursor.date()
    candidates: list[datetime] = []

    for time_of_day in block.times:
        for day_offset in range(7):
            candidate = datetime.combine(
                today + timedelta(days=day_offset), time_of_day, tzinfo=cursor.tzinfo
            )
            if candidate <= cursor:
                candidate += ONE_WEEK
            candidates.append(candidate)

    if block.days is None:
        return candidates

    filtered: list[datetime] = []
    for candidate in candidates:
        for entry in block.days:
            if entry.weekday != candidate.weekday():
                continue
            while not check_date_validity(candidate, entry.modifier, block.weeks):
                candidate += ONE_WEEK
            filtered.append(candidate)
    return filtered


def check_date_validity(
    value: date,
    weekday_modifier: Optional[WeekdayModifier],
    week_variant: Optional[WeekVariant],
) -> bool:
    """
    Does `value` satisfy both the weekday modifier and the week parity, a missing
    condition is always satisfied
    """
    return _matches_modifier(value, weekday_modifier) and _matches_variant(
        value, week_variant
    )


def _matches_modifier(value: date, modifier: Optional[WeekdayModifier]) -> bool:
    match modifier:
        case None:
            return True
        case WeekdayModifier.LAST:
            # no further occurrence of this weekday in the month
            return (value + ONE_WEEK).month != value.month
        case _:
            first_day, last_day = _occurrence_bounds[modifier]
            return first_day <= value.day <= last_day


def _matches_variant(value: date, variant: Optional[WeekVariant]) -> bool:
    match variant:
        case None:
            return True
        case WeekVariant.EVEN:
            return value.isocalendar().week % 2 == 0
        case WeekVariant.ODD:
            return value.isocalendar().week % 2 == 1
