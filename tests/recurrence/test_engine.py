# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from datetime import date, datetime, time, timedelta, timezone
from typing import Final, Optional

import pytest
from pytest import raises

from cron_lingo.phrase.expression import (
    ParsedBlock,
    WeekdayEntry,
    WeekdayModifier,
    WeekVariant,
)
from cron_lingo.recurrence.engine import check_date_validity, compute_dates

MONDAY: Final = 0
THURSDAY: Final = 3
FRIDAY: Final = 4

UTC: Final = timezone.utc


def utc(year: int, month: int, day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=UTC)


def test_every_day_candidates_in_time_then_day_order() -> None:
    block = ParsedBlock(times=(time(12), time(18)))
    assert compute_dates(utc(2021, 6, 4, 13, 38), block) == [
        # 12:00 on the cursor's own day has passed, it moves one week ahead
        utc(2021, 6, 11, 12),
        utc(2021, 6, 5, 12),
        utc(2021, 6, 6, 12),
        utc(2021, 6, 7, 12),
        utc(2021, 6, 8, 12),
        utc(2021, 6, 9, 12),
        utc(2021, 6, 10, 12),
        utc(2021, 6, 4, 18),
        utc(2021, 6, 5, 18),
        utc(2021, 6, 6, 18),
        utc(2021, 6, 7, 18),
        utc(2021, 6, 8, 18),
        utc(2021, 6, 9, 18),
        utc(2021, 6, 10, 18),
    ]


def test_candidates_filtered_by_weekday() -> None:
    block = ParsedBlock(
        times=(time(18),), days=(WeekdayEntry(MONDAY), WeekdayEntry(THURSDAY))
    )
    assert compute_dates(utc(2021, 6, 4, 13, 38), block) == [
        utc(2021, 6, 7, 18),
        utc(2021, 6, 10, 18),
    ]


def test_modified_weekday_moves_to_matching_week() -> None:
    block = ParsedBlock(
        times=(time(18),),
        days=(WeekdayEntry(MONDAY, WeekdayModifier.SECOND), WeekdayEntry(THURSDAY)),
    )
    assert compute_dates(utc(2021, 6, 4, 13, 38), block) == [
        utc(2021, 6, 14, 18),
        utc(2021, 6, 10, 18),
    ]


def test_modified_weekday_moves_into_next_month() -> None:
    block = ParsedBlock(
        times=(time(12), time(18)),
        days=(WeekdayEntry(FRIDAY, WeekdayModifier.FIRST), WeekdayEntry(THURSDAY)),
    )
    assert compute_dates(utc(2021, 6, 4, 13, 38), block) == [
        utc(2021, 7, 2, 12),
        utc(2021, 6, 10, 12),
        utc(2021, 6, 4, 18),
        utc(2021, 6, 10, 18),
    ]


def test_several_modified_weekdays() -> None:
    block = ParsedBlock(
        times=(time(6), time(12), time(18)),
        days=(
            WeekdayEntry(FRIDAY, WeekdayModifier.FIRST),
            WeekdayEntry(THURSDAY),
            WeekdayEntry(MONDAY, WeekdayModifier.THIRD),
        ),
    )
    assert compute_dates(utc(2021, 6, 12, 13, 38), block) == [
        utc(2021, 6, 21, 6),
        utc(2021, 6, 17, 6),
        utc(2021, 7, 2, 6),
        utc(2021, 6, 21, 12),
        utc(2021, 6, 17, 12),
        utc(2021, 7, 2, 12),
        utc(2021, 6, 21, 18),
        utc(2021, 6, 17, 18),
        utc(2021, 7, 2, 18),
    ]


def test_same_weekday_with_different_modifiers_yields_both() -> None:
    block = ParsedBlock(
        times=(time(18),),
        days=(
            WeekdayEntry(MONDAY, WeekdayModifier.FIRST),
            WeekdayEntry(MONDAY, WeekdayModifier.LAST),
        ),
    )
    assert compute_dates(utc(2021, 6, 4, 13, 38), block) == [
        utc(2021, 6, 7, 18),
        utc(2021, 6, 28, 18),
    ]


def test_week_variant_moves_to_matching_week() -> None:
    # 2021-06-07 is in ISO week 23
    block = ParsedBlock(
        times=(time(6),), days=(WeekdayEntry(MONDAY),), weeks=WeekVariant.EVEN
    )
    assert compute_dates(utc(2021, 6, 4, 13, 38), block) == [utc(2021, 6, 14, 6)]


def test_candidate_equal_to_cursor_is_excluded() -> None:
    block = ParsedBlock(times=(time(13),), days=(WeekdayEntry(FRIDAY),))
    assert compute_dates(utc(2021, 6, 4, 13), block) == [utc(2021, 6, 11, 13)]


def test_candidates_keep_cursor_offset() -> None:
    plus_three = timezone(timedelta(hours=3))
    cursor = datetime(2021, 6, 9, 16, tzinfo=plus_three)
    candidates = compute_dates(cursor, ParsedBlock(times=(time(6),)))

    assert len(candidates) == 7
    assert all(candidate.utcoffset() == timedelta(hours=3) for candidate in candidates)
    assert min(candidates) == datetime(2021, 6, 10, 6, tzinfo=plus_three)


def test_all_candidates_follow_cursor() -> None:
    cursor = utc(2021, 12, 30, 23, 59)
    block = ParsedBlock(
        times=tuple(time(hour) for hour in range(24)),
        days=(WeekdayEntry(THURSDAY, WeekdayModifier.LAST),),
        weeks=WeekVariant.ODD,
    )
    assert all(candidate > cursor for candidate in compute_dates(cursor, block))


def test_naive_cursor_is_rejected() -> None:
    with raises(ValueError):
        compute_dates(datetime(2021, 6, 4, 13, 38), ParsedBlock(times=(time(6),)))


@pytest.mark.parametrize(
    "value,modifier,expected",
    [
        (date(2021, 6, 7), WeekdayModifier.FIRST, True),
        (date(2021, 6, 8), WeekdayModifier.FIRST, False),
        (date(2021, 6, 8), WeekdayModifier.SECOND, True),
        (date(2021, 6, 14), WeekdayModifier.SECOND, True),
        (date(2021, 6, 15), WeekdayModifier.SECOND, False),
        (date(2021, 6, 15), WeekdayModifier.THIRD, True),
        (date(2021, 6, 21), WeekdayModifier.THIRD, True),
        (date(2021, 6, 22), WeekdayModifier.FOURTH, True),
        (date(2021, 6, 28), WeekdayModifier.FOURTH, True),
        (date(2021, 6, 29), WeekdayModifier.FOURTH, False),
        (date(2021, 6, 28), WeekdayModifier.LAST, True),
        (date(2021, 6, 21), WeekdayModifier.LAST, False),
        (date(2021, 2, 22), WeekdayModifier.LAST, True),
        (date(2021, 2, 22), WeekdayModifier.FOURTH, True),
        (date(2021, 6, 1), None, True),
    ],
)
def test_check_date_validity_modifiers(
    value: date, modifier: Optional[WeekdayModifier], expected: bool
) -> None:
    assert check_date_validity(value, modifier, None) is expected


@pytest.mark.parametrize(
    "value,variant,expected",
    [
        (date(2021, 6, 7), WeekVariant.ODD, True),
        (date(2021, 6, 7), WeekVariant.EVEN, False),
        (date(2021, 6, 14), WeekVariant.EVEN, True),
        (date(2021, 6, 14), None, True),
        # ISO week 53 of 2020
        (date(2021, 1, 1), WeekVariant.ODD, True),
        (date(2020, 12, 28), WeekVariant.ODD, True),
        # ISO week 1 of 2021 directly follows week 53, both odd
        (date(2021, 1, 4), WeekVariant.ODD, True),
        # ISO week 1 of 2025 starts in December 2024
        (date(2024, 12, 30), WeekVariant.ODD, True),
        (date(2024, 12, 23), WeekVariant.EVEN, True),
    ],
)
def test_check_date_validity_week_variants(
    value: date, variant: Optional[WeekVariant], expected: bool
) -> None:
    assert check_date_validity(value, None, variant) is expected


def test_check_date_validity_requires_both_conditions() -> None:
    # the last Monday of June 2021, ISO week 26
    assert check_date_validity(
        date(2021, 6, 28), WeekdayModifier.LAST, WeekVariant.EVEN
    )
    assert not check_date_validity(
        date(2021, 6, 28), WeekdayModifier.LAST, WeekVariant.ODD
    )
    assert not check_date_validity(
        date(2021, 6, 21), WeekdayModifier.LAST, WeekVariant.ODD
    )
