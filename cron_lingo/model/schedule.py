# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from cron_lingo.phrase.expression import ParsedBlock
from cron_lingo.phrase.parser import parse
from cron_lingo.recurrence.iterators import MultiScheduleIter, ScheduleIter
from cron_lingo.util.clock import Clock, SystemClock


@dataclass(frozen=True)
class Schedule:
    """
    A parsed phrase together with the instant it was parsed at. Iteration starts from
    that anchor instant.
    """

    base: datetime
    spec: ParsedBlock

    @classmethod
    def from_phrase(cls, text: str, clock: Optional[Clock] = None) -> "Schedule":
        """
        Parse `text` and anchor the result at the current local instant
        :param text: the phrase, e.g. "at 6 AM on Mondays and Thursdays in even weeks"
        :param clock: source of the current instant, the system clock by default
        :raises CronLingoError: if the phrase is invalid or the local offset is unknown
        """
        spec = parse(text)
        return cls(base=(clock or SystemClock()).now_local(), spec=spec)

    def iter(self, clock: Optional[Clock] = None) -> ScheduleIter:
        return ScheduleIter(self.spec, self.base, clock=clock)

    def __iter__(self) -> ScheduleIter:
        return self.iter()

    def __add__(self, other: "Schedule | MultiSchedule") -> "MultiSchedule":
        match other:
            case Schedule():
                return MultiSchedule(base=self.base, specs=[self.spec, other.spec])
            case MultiSchedule():
                return MultiSchedule(base=self.base, specs=[self.spec, *other.specs])
        return NotImplemented


@dataclass
class MultiSchedule:
    """
    The union of several parsed phrases, iterated as one merged stream of occurrences.
    Combining schedules keeps the anchor instant of the left operand.
    """

    base: datetime
    specs: list[ParsedBlock]

    def __post_init__(self) -> None:
        if len(self.specs) == 0:
            raise ValueError("a multi-schedule must contain at least one block")
        # owned copy, combining never aliases the operand's list
        self.specs = list(self.specs)

    def iter(self, clock: Optional[Clock] = None) -> MultiScheduleIter:
        return MultiScheduleIter(self.specs, self.base, clock=clock)

    def __iter__(self) -> MultiScheduleIter:
        return self.iter()

    def __add__(self, other: "Schedule | MultiSchedule") -> "MultiSchedule":
        match other:
            case Schedule():
                return MultiSchedule(base=self.base, specs=[*self.specs, other.spec])
            case MultiSchedule():
                return MultiSchedule(base=self.base, specs=[*self.specs, *other.specs])
        return NotImplemented

    def __iadd__(self, other: "Schedule | MultiSchedule") -> "MultiSchedule":
        match other:
            case Schedule():
                self.specs.append(other.spec)
            case MultiSchedule():
                self.specs.extend(other.specs)
            case _:
                return NotImplemented
        return self
