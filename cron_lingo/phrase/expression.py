# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
The classes defined in this module are the structured representation of a schedule
phrase. A schedule phrase is a near-English sentence that describes when something
should happen, for example:

    at 6 AM, 6 PM on Mondays and the last Friday in even weeks

A phrase is parsed into exactly one `ParsedBlock`, which has three parts:

- times: the times of day, in the order they were written. Times are written on a
  12-hour clock in the phrase and stored on a 24-hour clock (12 AM is midnight, 12 PM is
  noon).
- days: optionally, the weekdays on which the times apply. A weekday written in plural
  form ("Mondays") means every occurrence of that weekday. A weekday written in singular
  form with a modifier ("the first Monday") means only that occurrence within each month.
- weeks: optionally, whether only even or only odd ISO-8601 weeks are included.

A block is built once by the parser and never changes afterwards. Blocks carry no
knowledge of the instant they were parsed at; that anchor belongs to the schedule that
owns the block.

Weekdays are integers with zero meaning Monday, which corresponds to the values returned
by `datetime.weekday()` and used by the Python `calendar` package.
"""
from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import Final, Optional

weekday_names: Final = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class WeekdayModifier(Enum):
    """Narrows a weekday down to one specific occurrence within a calendar month"""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    LAST = "last"

    @property
    def ordinal(self) -> Optional[int]:
        """1-4 for the numbered occurrences, None for the last occurrence"""
        return _modifier_ordinals.get(self)


_modifier_ordinals: Final = {
    WeekdayModifier.FIRST: 1,
    WeekdayModifier.SECOND: 2,
    WeekdayModifier.THIRD: 3,
    WeekdayModifier.FOURTH: 4,
}


class WeekVariant(Enum):
    """Classifies a date by the parity of its ISO-8601 week number"""

    EVEN = "even"
    ODD = "odd"


@dataclass(frozen=True)
class WeekdayEntry:
    """A weekday, optionally restricted to one occurrence per month"""

    weekday: int
    modifier: Optional[WeekdayModifier] = None

    def __post_init__(self) -> None:
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"weekday must be between 0 and 6: {self.weekday}")

    def __str__(self) -> str:
        name = weekday_names[self.weekday]
        if self.modifier is None:
            return f"{name}s"
        return f"the {self.modifier.value} {name}"


@dataclass(frozen=True)
class ParsedBlock:
    """One self-contained time/weekday/week description parsed from a single phrase"""

    times: tuple[time, ...]
    days: Optional[tuple[WeekdayEntry, ...]] = None
    weeks: Optional[WeekVariant] = None

    def __post_init__(self) -> None:
        if len(self.times) == 0:
            raise ValueError("a block must contain at least one time of day")
        if self.days is not None and len(self.days) == 0:
            raise ValueError("weekdays must not be empty when present")

    def __str__(self) -> str:
        parts = ["at " + ", ".join(_time_str(t) for t in self.times)]
        if self.days is not None:
            parts.append("on " + ", ".join(str(entry) for entry in self.days))
        if self.weeks is not None:
            parts.append(f"in {self.weeks.value} weeks")
        return " ".join(parts)


def _time_str(value: time) -> str:
    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    if value.minute == 0:
        return f"{hour} {period}"
    return f"{hour}:{value.minute:02d} {period}"
