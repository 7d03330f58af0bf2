# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
A position in the characters of a schedule phrase, with the primitive look-ahead and
consume operations the grammar is built from.

The phrase is decoded into characters once and addressed by index, so positions reported
in errors count characters, not bytes.

Matching keywords never moves the cursor on failure. The grammar relies on this to try
alternative keywords at the same position one after another (`eat_one_of`) without
saving and restoring positions.
"""
from collections.abc import Iterable
from typing import Final, Optional

from cron_lingo.errors import ExpressionSyntaxError, UnexpectedEndOfInputError

SNIPPET_LENGTH: Final = 10
DIGITS: Final = "0123456789"


class Cursor:
    def __init__(self, text: str) -> None:
        self._chars: Final = tuple(text)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def at_end(self) -> bool:
        return self._position >= len(self._chars)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self._chars[self._position]

    def remaining(self) -> str:
        return "".join(self._chars[self._position :])

    def text_since(self, start: int) -> str:
        return "".join(self._chars[start : self._position])

    def expect_sequence(self, sequence: str) -> bool:
        """non-consuming test whether the input continues with `sequence`"""
        end = self._position + len(sequence)
        if end > len(self._chars):
            return False
        return "".join(self._chars[self._position : end]) == sequence

    def eat_keyword(self, keyword: str) -> None:
        """
        consume `keyword` (case-sensitive) or raise without moving the cursor
        :param keyword: the exact characters that must follow
        """
        self.eat_one_of((keyword,), expected=f"'{keyword}'")

    def eat_one_of(self, keywords: Iterable[str], expected: str) -> str:
        """
        consume the first of `keywords` the input continues with
        :param keywords: alternatives, tried in order
        :param expected: description of the alternatives used in a syntax error
        :return: the keyword that was consumed
        """
        candidates = tuple(keywords)
        for keyword in candidates:
            if self.expect_sequence(keyword):
                self._position += len(keyword)
                return keyword
        raise self.unexpected(expected, candidates)

    def eat_char(self, char: str, expected: Optional[str] = None) -> None:
        if self.peek() != char:
            raise self.unexpected(expected or f"'{char}'")
        self._position += 1

    def eat_whitespace(self) -> None:
        """consume exactly one whitespace character"""
        char = self.peek()
        if char is None:
            raise UnexpectedEndOfInputError()
        if not char.isspace():
            raise self.syntax_error("whitespace")
        self._position += 1

    def eat_digit(self) -> str:
        char = self.peek()
        if char is None:
            raise UnexpectedEndOfInputError()
        if char not in DIGITS:
            raise self.syntax_error("a digit")
        self._position += 1
        return char

    def syntax_error(self, expected: str) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(
            position=self._position,
            expected=expected,
            continues=self.remaining()[:SNIPPET_LENGTH],
        )

    def unexpected(
        self, expected: str, keywords: Iterable[str] = ()
    ) -> ExpressionSyntaxError | UnexpectedEndOfInputError:
        """
        the error for a failed match at the current position: end of input if the phrase
        stops short while still agreeing with one of `keywords` (or nothing is left at
        all), a syntax error otherwise
        """
        rest = self.remaining()
        if not rest or any(
            len(rest) < len(keyword) and keyword.startswith(rest)
            for keyword in keywords
        ):
            return UnexpectedEndOfInputError()
        return self.syntax_error(expected)
