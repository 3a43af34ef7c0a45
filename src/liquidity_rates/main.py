"""CLI entrypoint for the liquidity rates service."""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Annotated

import typer
import uvicorn
from pydantic import ValidationError

from .logger import get_logger, setup_logging
from .settings import LiquidityRatesSettings
from .state import AppState, build_state

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    help="Aggregate Aave V3 deposits of one wallet across EVM networks.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to a TOML config file (can include [liquidity_rates] table).",
    ),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option(
        "--log-level",
        help="Override logging verbosity (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    ),
]


def _load_state(
    config_path: Path | None, **overrides: str | int | None
) -> AppState:
    """Build settings (CLI > ENV > FILE), configure logging and create state."""
    if config_path:
        os.environ["LIQUIDITY_RATES_CONFIG"] = str(config_path)

    init_kwargs = {key: value for key, value in overrides.items() if value is not None}
    try:
        settings = LiquidityRatesSettings(**init_kwargs)
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    setup_logging(settings.log_level)
    return build_state(settings, get_logger("liquidity_rates"))


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Run `serve` when no command is given."""
    if ctx.invoked_subcommand is None:
        serve()


@app.command()
def serve(
    config_path: ConfigOption = None,
    host: Annotated[
        str | None, typer.Option("--host", help="Interface to bind.")
    ] = None,
    port: Annotated[
        int | None, typer.Option("--port", "-p", help="TCP port to listen on.")
    ] = None,
    log_level: LogLevelOption = None,
    show_config: Annotated[
        bool,
        typer.Option(
            "--show-config",
            help="Print effective config and exit.",
        ),
    ] = False,
):
    """Serve GET /api/liquidity-rates over HTTP."""
    state = _load_state(config_path, host=host, port=port, log_level=log_level)
    settings = state.settings

    if show_config:
        typer.echo(json.dumps(settings.as_safe_dict(), indent=2))
        raise typer.Exit(code=0)

    from .api import create_app

    state.logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(state),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


@app.command()
def report(
    config_path: ConfigOption = None,
    log_level: LogLevelOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the raw JSON array instead of tables."),
    ] = False,
):
    """Run one aggregation pass and print the result."""
    state = _load_state(config_path, log_level=log_level)

    from .pipeline import collect_liquidity_rates

    results = asyncio.run(collect_liquidity_rates(state))

    if as_json:
        typer.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    from .report import format_report_table

    format_report_table(results)


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
