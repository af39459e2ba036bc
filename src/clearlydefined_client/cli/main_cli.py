# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Main entry point for the clearlydefined CLI tool

from typing import Annotated, Optional

import typer

from clearlydefined_client.cli.common import create_service
from clearlydefined_client.cli.curation_commands import get_curation, submit_curation
from clearlydefined_client.cli.definitions_commands import (
    get_definitions,
    harvest_status,
    search_definitions,
)
from clearlydefined_client.cli.harvest_commands import (
    harvest,
    harvest_tool_data,
    harvest_tools,
)
from clearlydefined_client.config import default_config
from clearlydefined_client.utils.logging import parse_log_level, setup_logging

app = typer.Typer(add_completion=False)
app.command()(get_definitions)
app.command()(search_definitions)
app.command()(harvest_status)
app.command()(get_curation)
app.command()(submit_curation)
app.command()(harvest)
app.command()(harvest_tools)
app.command()(harvest_tool_data)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    server: Annotated[
        str,
        typer.Option(
            "--server",
            help=(
                "ClearlyDefined deployment to talk to: "
                + ", ".join(default_config.known_servers)
                + "."
            ),
        ),
    ] = "production",
    url: Annotated[
        Optional[str],
        typer.Option("--url", help="Base URL of any other deployment. Overrides --server."),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL."),
    ] = "INFO",
) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        ctx.exit(2)

    try:
        setup_logging(parse_log_level(log_level))
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if url is None and server not in default_config.known_servers:
        raise typer.BadParameter(
            f"Unknown server '{server}'. Use one of "
            + ", ".join(default_config.known_servers)
            + " or pass --url.",
            param_hint="--server",
        )
    ctx.obj = create_service(
        url if url is not None else default_config.known_servers[server]
    )


if __name__ == "__main__":
    app()
