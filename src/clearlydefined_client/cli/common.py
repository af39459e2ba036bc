# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Helpers shared by the CLI commands

import json
from typing import Any, NoReturn

import requests
import typer

from clearlydefined_client.config import default_config
from clearlydefined_client.exceptions import ParseError, SchemaError
from clearlydefined_client.model.coordinates import Coordinates, parse_coordinates
from clearlydefined_client.service.clearly_defined_service import (
    ClearlyDefinedService,
    Server,
)

# errors the commands turn into an "Error: ..." line and exit code 1
HANDLED_ERRORS = (
    ParseError,
    SchemaError,
    ValueError,
    FileNotFoundError,
    requests.RequestException,
)


def create_service(server: Server | str) -> ClearlyDefinedService:
    session = requests.Session()
    session.headers["User-Agent"] = default_config.user_agent
    return ClearlyDefinedService(
        server, session=session, timeout=default_config.request_timeout
    )


def get_service(ctx: typer.Context) -> ClearlyDefinedService:
    service = ctx.obj
    if not isinstance(service, ClearlyDefinedService):
        raise RuntimeError("The ClearlyDefined service was not initialized.")
    return service


def parse_coordinates_argument(values: list[str]) -> list[Coordinates]:
    return [parse_coordinates(value) for value in values]


def echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


def fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)
