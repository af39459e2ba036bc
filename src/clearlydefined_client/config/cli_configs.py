# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass

from clearlydefined_client.service.clearly_defined_service import Server


@dataclass
class Config:
    default_server: Server
    request_timeout: float  # seconds
    user_agent: str
    stream_chunk_size: int  # bytes read at a time from streamed harvest data
    known_servers: dict[str, Server]


default_config = Config(
    default_server=Server.PRODUCTION,
    request_timeout=60.0,
    user_agent="clearlydefined-client/0.1.0",
    stream_chunk_size=8192,
    known_servers={
        "production": Server.PRODUCTION,
        "development": Server.DEVELOPMENT,
        "localhost": Server.LOCALHOST,
    },
)
