# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

import pytest

from clearlydefined_client.utils.logging import parse_log_level, setup_logging


@pytest.mark.parametrize(
    "name, level",
    [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("Warning", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("CRITICAL", logging.CRITICAL),
    ],
)
def test_parse_log_level(name: str, level: int) -> None:
    assert parse_log_level(name) == level


def test_parse_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Invalid log level: VERBOSE"):
        parse_log_level("VERBOSE")


def test_setup_logging_does_not_stack_handlers() -> None:
    root_logger = logging.getLogger()
    before = len(root_logger.handlers)

    setup_logging(logging.DEBUG)
    setup_logging(logging.WARNING)

    added = [
        handler
        for handler in root_logger.handlers
        if getattr(handler, "_clearlydefined", False)
    ]
    assert len(added) == 1
    assert len(root_logger.handlers) <= before + 1
    assert root_logger.level == logging.WARNING
    root_logger.removeHandler(added[0])
