# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Schedule phrases and their structured representation.

Expression
    `ParsedBlock` and its parts, see `cron_lingo.phrase.expression`.

Parser
    `parse` turns a phrase into a `ParsedBlock` or raises the first `CronLingoError`
    found. It is built from the primitives of `Cursor`.
"""
