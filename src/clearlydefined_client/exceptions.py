# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Errors raised while decoding coordinates and service payloads."""


class ParseError(ValueError):
    """A coordinate string could not be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid coordinates '{value}': {reason}")
        self.value = value
        self.reason = reason


class SchemaError(ValueError):
    """A service payload does not match the documented schema."""

    def __init__(self, record: str, field: str, reason: str = "missing") -> None:
        location = f"{record}.{field}" if field else record
        super().__init__(f"{location} is {reason}")
        self.record = record
        self.field = field
        self.reason = reason
