# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

from typing import Iterable


def open_file(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            return file.read()
    except UnicodeDecodeError:
        with open(file_path, "r", encoding="utf-16") as file:
            return file.read()


def write_chunks(file_path: str, chunks: Iterable[bytes]) -> int:
    written = 0
    with open(file_path, "wb") as file:
        for chunk in chunks:
            written += file.write(chunk)
    return written
