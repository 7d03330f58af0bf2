# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Schedules anchor parsed blocks at the instant they were created.

`Schedule` holds a single block and `MultiSchedule` the union of several. Adding
schedules with `+` or `+=` builds a `MultiSchedule` that keeps the anchor of the left
operand.
"""
