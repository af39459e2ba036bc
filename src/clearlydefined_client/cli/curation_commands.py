# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Commands reading and contributing curations

import json
from typing import Annotated

import typer

from clearlydefined_client.cli.common import HANDLED_ERRORS, echo_json, fail, get_service
from clearlydefined_client.config import JsonConfigParser
from clearlydefined_client.model.coordinates import parse_coordinates


def get_curation(
    ctx: typer.Context,
    coordinates: Annotated[
        str,
        typer.Argument(help="Coordinates of the component, including a revision."),
    ],
) -> None:
    """
    Print the curation of a component revision as JSON.
    """
    service = get_service(ctx)
    try:
        curation = service.get_curation(parse_coordinates(coordinates))
    except HANDLED_ERRORS as e:
        fail(e)
    echo_json(curation.to_json())


def submit_curation(
    ctx: typer.Context,
    patch_file: Annotated[
        str,
        typer.Argument(
            help=(
                "Path to a JSON file with the contributionInfo and patches to "
                "send to PATCH /curations."
            )
        ),
    ],
) -> None:
    """
    Contribute a curation. The service opens a pull request against the curated
    data repository and this command prints its number and URL.
    """
    service = get_service(ctx)
    try:
        patch = JsonConfigParser.load_contribution_patch(patch_file)
        summary = service.put_curation(patch)
    except json.JSONDecodeError:
        typer.echo(f"Error: Invalid JSON in contribution file: {patch_file}", err=True)
        raise typer.Exit(code=1)
    except HANDLED_ERRORS as e:
        fail(e)
    typer.echo(f"Opened pull request #{summary.pr_number}: {summary.url}")
