# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Commands requesting and inspecting harvests

from typing import Annotated, Optional

import typer

from clearlydefined_client.adaptors.os import write_chunks
from clearlydefined_client.cli.common import (
    HANDLED_ERRORS,
    echo_json,
    fail,
    get_service,
    parse_coordinates_argument,
)
from clearlydefined_client.config import default_config
from clearlydefined_client.model.coordinates import parse_coordinates
from clearlydefined_client.model.curations import HARVEST_CREATED, HarvestRequest


def harvest(
    ctx: typer.Context,
    coordinates: Annotated[
        list[str],
        typer.Argument(help="Coordinates of the components to harvest."),
    ],
    tool: Annotated[
        Optional[str],
        typer.Option("--tool", help="Only run this tool, e.g. scancode."),
    ] = None,
    policy: Annotated[
        Optional[str],
        typer.Option("--policy", help="Harvest policy, e.g. always."),
    ] = None,
) -> None:
    """
    Queue the given components for harvesting.
    """
    service = get_service(ctx)
    try:
        harvest_requests = [
            HarvestRequest(coordinates=parsed, tool=tool, policy=policy)
            for parsed in parse_coordinates_argument(coordinates)
        ]
        result = service.harvest(harvest_requests)
    except HANDLED_ERRORS as e:
        fail(e)
    if result != HARVEST_CREATED:
        typer.echo(f"Unexpected reply from the harvest queue: {result}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Queued {len(harvest_requests)} harvest request(s).")


def harvest_tools(
    ctx: typer.Context,
    coordinates: Annotated[
        str,
        typer.Argument(help="Coordinates of the component, including a revision."),
    ],
) -> None:
    """
    Print the tools that already produced data for a component.
    """
    service = get_service(ctx)
    try:
        tools = service.harvest_tools(parse_coordinates(coordinates))
    except HANDLED_ERRORS as e:
        fail(e)
    echo_json(tools)


def harvest_tool_data(
    ctx: typer.Context,
    coordinates: Annotated[
        str,
        typer.Argument(help="Coordinates of the component, including a revision."),
    ],
    tool: Annotated[str, typer.Argument(help="Tool name, e.g. scancode.")],
    tool_version: Annotated[str, typer.Argument(help="Tool version, e.g. 3.2.2.")],
    output_file: Annotated[
        Optional[str],
        typer.Option(
            "--output",
            "-o",
            help="File to write the data to. Default is the standard output.",
        ),
    ] = None,
) -> None:
    """
    Download the raw data one tool version harvested for a component.
    """
    service = get_service(ctx)
    try:
        chunks = service.harvest_tool_data(
            parse_coordinates(coordinates),
            tool,
            tool_version,
            chunk_size=default_config.stream_chunk_size,
        )
        if output_file is not None:
            written = write_chunks(output_file, chunks)
            typer.echo(f"Wrote {written} bytes to {output_file}", err=True)
        else:
            stdout = typer.get_binary_stream("stdout")
            for chunk in chunks:
                stdout.write(chunk)
            stdout.flush()
    except HANDLED_ERRORS as e:
        fail(e)
