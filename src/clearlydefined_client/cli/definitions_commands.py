# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Commands reading definitions from the service

from typing import Annotated

import typer

from clearlydefined_client.cli.common import (
    HANDLED_ERRORS,
    echo_json,
    fail,
    get_service,
    parse_coordinates_argument,
)


def get_definitions(
    ctx: typer.Context,
    coordinates: Annotated[
        list[str],
        typer.Argument(
            help="Coordinates of the components, e.g. npm/npmjs/-/left-pad/1.3.0."
        ),
    ],
) -> None:
    """
    Print the definitions of the given components as JSON.
    """
    service = get_service(ctx)
    try:
        definitions = service.get_definitions(parse_coordinates_argument(coordinates))
    except HANDLED_ERRORS as e:
        fail(e)
    echo_json({key: definition.to_json() for key, definition in definitions.items()})


def search_definitions(
    ctx: typer.Context,
    pattern: Annotated[
        str,
        typer.Argument(help="Parts of the coordinates to look for, e.g. lodash."),
    ],
) -> None:
    """
    Print the coordinates of all definitions matching the pattern.
    """
    service = get_service(ctx)
    try:
        matches = service.search_definitions(pattern)
    except HANDLED_ERRORS as e:
        fail(e)
    for match in matches:
        typer.echo(match)


def harvest_status(
    ctx: typer.Context,
    coordinates: Annotated[
        list[str],
        typer.Argument(help="Coordinates of the components to check."),
    ],
) -> None:
    """
    Print whether each component was harvested, partially harvested or not
    harvested at all.
    """
    service = get_service(ctx)
    try:
        definitions = service.get_definitions(parse_coordinates_argument(coordinates))
    except HANDLED_ERRORS as e:
        fail(e)
    for key, definition in definitions.items():
        typer.echo(f"{key}: {definition.harvest_status.value}")
