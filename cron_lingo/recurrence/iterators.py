# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Iterators over the occurrences of one or several parsed blocks.

Iterators are infinite and only move forward. Each call to `next()` optionally
fast-forwards the cursor to the current instant, computes the candidates for every block
against the cursor and yields the nearest one. When the current instant cannot be
established the call raises `IndeterminateOffsetError` and leaves the cursor where it
was, so calling `next()` again retries.

Configuration methods return a reconfigured copy and leave the original iterator as is.
"""
import copy
from abc import abstractmethod
from collections.abc import Iterator, Sequence
from datetime import datetime, timezone
from typing import Final, Optional, Self

from cron_lingo.observability.powertools_logging import (
    powertools_logger,
    should_log_events,
)
from cron_lingo.phrase.expression import ParsedBlock
from cron_lingo.recurrence.engine import compute_dates
from cron_lingo.util.clock import Clock, SystemClock
from cron_lingo.util.time import is_aware

logger: Final = powertools_logger()


class _OccurrenceIterator(Iterator[datetime]):
    def __init__(
        self,
        current: datetime,
        *,
        skip_outdated: bool = True,
        offset: Optional[timezone] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if not is_aware(current):
            raise ValueError(
                "Expected a timezone-aware start instant, "
                f"received {current.isoformat()}"
            )
        self._current = current
        self._skip_outdated = skip_outdated
        self._offset = offset
        self._clock = clock or SystemClock()

    @property
    def current(self) -> datetime:
        """the cursor, the last yielded occurrence or the start instant"""
        return self._current

    @abstractmethod
    def _compute_candidates(self, cursor: datetime) -> list[datetime]:
        pass

    def skip_outdated(self, skip: bool) -> Self:
        """
        By default `next` never returns an occurrence in the past but fast-forwards to the
        current instant first. Pass False to continue from the cursor regardless.
        """
        reconfigured = copy.copy(self)
        reconfigured._skip_outdated = skip
        return reconfigured

    def assume_offset(self, offset: timezone) -> Self:
        """compute occurrences in the fixed `offset` instead of the local offset"""
        reconfigured = copy.copy(self)
        reconfigured._offset = offset
        return reconfigured

    def use_local_offset(self) -> Self:
        """revert `assume_offset`, occurrences follow the local offset again"""
        reconfigured = copy.copy(self)
        reconfigured._offset = None
        return reconfigured

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> datetime:
        cursor = self._current
        if self._offset is not None:
            cursor = cursor.astimezone(self._offset)

        if self._skip_outdated:
            # may raise IndeterminateOffsetError, the cursor is not advanced in that case
            now = (
                self._clock.now(self._offset)
                if self._offset is not None
                else self._clock.now_local()
            )
            if now > cursor:
                logger.debug(
                    f"Fast-forwarding from {cursor.isoformat()} to {now.isoformat()}"
                )
                cursor = now

        candidates = self._compute_candidates(cursor)
        # min keeps the first of several equally near candidates
        next_date = min(candidates, key=lambda candidate: candidate - cursor)

        if should_log_events(logger):
            logger.debug(
                f"Selected {next_date.isoformat()} out of {len(candidates)} candidates"
            )

        self._current = next_date
        return next_date

    def take(self, count: int) -> list[datetime]:
        """the next `count` occurrences"""
        return [next(self) for _ in range(count)]


class ScheduleIter(_OccurrenceIterator):
    """Iterates the occurrences of a single block"""

    def __init__(
        self,
        block: ParsedBlock,
        current: datetime,
        *,
        skip_outdated: bool = True,
        offset: Optional[timezone] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__(
            current, skip_outdated=skip_outdated, offset=offset, clock=clock
        )
        self._block: Final = block

    @property
    def block(self) -> ParsedBlock:
        return self._block

    def _compute_candidates(self, cursor: datetime) -> list[datetime]:
        return compute_dates(cursor, self._block)


class MultiScheduleIter(_OccurrenceIterator):
    """Iterates the merged occurrences of several blocks"""

    def __init__(
        self,
        blocks: Sequence[ParsedBlock],
        current: datetime,
        *,
        skip_outdated: bool = True,
        offset: Optional[timezone] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if len(blocks) == 0:
            raise ValueError("at least one block is required")
        super().__init__(
            current, skip_outdated=skip_outdated, offset=offset, clock=clock
        )
        self._blocks: Final = tuple(blocks)

    @property
    def blocks(self) -> tuple[ParsedBlock, ...]:
        return self._blocks

    def _compute_candidates(self, cursor: datetime) -> list[datetime]:
        candidates: list[datetime] = []
        for block in self._blocks:
            candidates.extend(compute_dates(cursor, block))
        return candidates
