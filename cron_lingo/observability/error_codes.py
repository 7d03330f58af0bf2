# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum


class ErrorCode(str, Enum):
    EMPTY_EXPRESSION = "EmptyExpression"
    SYNTAX = "Syntax"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    TIME_PARSE = "TimeParse"
    INDETERMINATE_OFFSET = "IndeterminateOffset"
