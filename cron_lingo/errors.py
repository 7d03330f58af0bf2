# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Errors raised while parsing a schedule phrase or computing occurrences from it.

Every error is a `CronLingoError` and carries an `ErrorCode` naming its kind. Errors are
values: two errors of the same type with the same fields compare equal, which keeps
assertions on parse failures simple.
"""
from typing import Any, ClassVar

from cron_lingo.observability.error_codes import ErrorCode


class CronLingoError(Exception):
    error_code: ClassVar[ErrorCode]

    def _fields(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self) or not isinstance(other, CronLingoError):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class EmptyExpressionError(CronLingoError):
    """The expression string must not be empty"""

    error_code = ErrorCode.EMPTY_EXPRESSION

    def __init__(self) -> None:
        super().__init__("the expression string must not be empty")


class ExpressionSyntaxError(CronLingoError):
    """
    Generic syntax error. Gives the exact position of the erroneous character in a phrase
    and describes the input that would have been accepted there.

    :param position: index into the phrase's characters (not bytes)
    :param expected: human-readable description of the acceptable continuations
    :param continues: a short snippet of the remaining unparsed input
    """

    error_code = ErrorCode.SYNTAX

    def __init__(self, position: int, expected: str, continues: str) -> None:
        self.position = position
        self.expected = expected
        self.continues = continues
        super().__init__(
            f"unexpected sequence of characters starting at position '{position}', expected {expected}"
        )

    def _fields(self) -> tuple[Any, ...]:
        return self.position, self.expected, self.continues

    def __repr__(self) -> str:
        return (
            f"ExpressionSyntaxError(position={self.position!r}, "
            f"expected={self.expected!r}, continues={self.continues!r})"
        )


class UnexpectedEndOfInputError(CronLingoError):
    """The parser expected more input but reached the end of the phrase"""

    error_code = ErrorCode.UNEXPECTED_END_OF_INPUT

    def __init__(self) -> None:
        super().__init__(
            "the parser reached the end of the input expression while expecting more characters"
        )


class TimeParseError(CronLingoError):
    """A time literal had the right shape but does not describe a valid time of day"""

    error_code = ErrorCode.TIME_PARSE

    def __init__(self, literal: str, reason: str) -> None:
        self.literal = literal
        self.reason = reason
        super().__init__(f'invalid time "{literal}": {reason}')

    def _fields(self) -> tuple[Any, ...]:
        return self.literal, self.reason


class IndeterminateOffsetError(CronLingoError):
    """The local UTC offset of the host could not be established"""

    error_code = ErrorCode.INDETERMINATE_OFFSET

    def __init__(
        self, reason: str = "the local offset could not be determined"
    ) -> None:
        self.reason = reason
        super().__init__(reason)

    def _fields(self) -> tuple[Any, ...]:
        return (self.reason,)
