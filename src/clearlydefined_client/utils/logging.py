# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.
import logging
import sys

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_log_level(name: str) -> int:
    if name.upper() not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {name}. Valid levels: {', '.join(LOG_LEVELS)}"
        )
    return int(getattr(logging, name.upper()))


def setup_logging(level: int) -> None:
    class ColoredFormatter(logging.Formatter):

        grey = "\x1b[38;20m"
        yellow = "\x1b[33;20m"
        red = "\x1b[31;20m"
        bold_red = "\x1b[31;1m"
        reset = "\x1b[0m"
        log_format = (
            "%(asctime)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
        )

        FORMATS = {
            logging.DEBUG: grey + log_format + reset,
            logging.INFO: grey + log_format + reset,
            logging.WARNING: yellow + log_format + reset,
            logging.ERROR: red + log_format + reset,
            logging.CRITICAL: bold_red + log_format + reset,
        }

        def format(self, record: logging.LogRecord) -> str:
            log_fmt = self.FORMATS.get(record.levelno)
            formatter = logging.Formatter(log_fmt)
            return formatter.format(record)

    root_logger = logging.getLogger()
    # repeated CLI invocations in one process must not stack handlers
    for handler in list(root_logger.handlers):
        if getattr(handler, "_clearlydefined", False):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter())
    setattr(console_handler, "_clearlydefined", True)

    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # Prevent propagation to avoid duplicate logs
    root_logger.propagate = False
