# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Parse near-English schedule phrases such as "at 6 AM on Mondays in even weeks" and
iterate over the instants they denote.

    schedule = Schedule.from_phrase("at 6 AM, 6 PM (Mondays) in odd weeks")
    first_occurrence = next(iter(schedule))
"""
import tomllib
from pathlib import Path

from cron_lingo.errors import (
    CronLingoError,
    EmptyExpressionError,
    ExpressionSyntaxError,
    IndeterminateOffsetError,
    TimeParseError,
    UnexpectedEndOfInputError,
)
from cron_lingo.model.schedule import MultiSchedule, Schedule
from cron_lingo.phrase.expression import (
    ParsedBlock,
    WeekdayEntry,
    WeekdayModifier,
    WeekVariant,
)
from cron_lingo.phrase.parser import parse
from cron_lingo.recurrence.engine import check_date_validity, compute_dates
from cron_lingo.recurrence.iterators import MultiScheduleIter, ScheduleIter
from cron_lingo.util.clock import Clock, SystemClock

__version__ = "unknown"

pyproject_toml_file_path = Path(__file__, "../../pyproject.toml").resolve()
if pyproject_toml_file_path.exists() and pyproject_toml_file_path.is_file():
    with open(pyproject_toml_file_path, "rb") as file:
        __version__ = tomllib.load(file)["tool"]["poetry"]["version"]

__all__ = [
    "Clock",
    "CronLingoError",
    "EmptyExpressionError",
    "ExpressionSyntaxError",
    "IndeterminateOffsetError",
    "MultiSchedule",
    "MultiScheduleIter",
    "ParsedBlock",
    "Schedule",
    "ScheduleIter",
    "SystemClock",
    "TimeParseError",
    "UnexpectedEndOfInputError",
    "WeekVariant",
    "WeekdayEntry",
    "WeekdayModifier",
    "check_date_validity",
    "compute_dates",
    "parse",
]
