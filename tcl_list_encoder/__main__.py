"""CLI entry point for the Tcl list encoder."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click

from tcl_list_encoder.domain.exceptions import EncoderException

logger = logging.getLogger(__name__)


@click.command()
@click.argument("values", nargs=-1)
@click.option(
    "--config", "-c",
    default=None,
    help="Path to YAML config file",
)
@click.option(
    "--json", "-j", "json_mode",
    is_flag=True,
    default=False,
    help="Read a JSON array from --input (or stdin) and encode it",
)
@click.option(
    "--input", "-i", "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="JSON input file for --json (default: stdin)",
)
@click.option(
    "--quote", "-q",
    is_flag=True,
    default=False,
    help="Quote a single VALUE as one list element",
)
@click.option(
    "--self-test",
    is_flag=True,
    default=False,
    help="Run the reference table of encoding cases and exit",
)
@click.option(
    "--max-depth",
    type=int,
    default=None,
    help="Maximum list nesting depth (overrides config/env)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=None,
    help="Enable debug logging (overrides config/env)",
)
def cli(
    values: tuple[str, ...],
    config: str | None,
    json_mode: bool,
    input_file: Any,
    quote: bool,
    self_test: bool,
    max_depth: int | None,
    verbose: bool | None,
) -> None:
    """Encode VALUES as a Tcl list and print it.

    Each VALUE becomes one element. With --json the elements come from a
    JSON array instead, and nested arrays become nested lists.

    Configuration priority: YAML config < env vars (TCL_LIST_*) < CLI arguments.
    """
    from tcl_list_encoder.config import load_config

    cli_overrides = {
        "encoder.max_depth": max_depth,
        "logging.verbose": verbose,
    }
    app_config = load_config(config_path=config, cli_overrides=cli_overrides)

    log_level = logging.DEBUG if app_config.logging.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from tcl_list_encoder.domain.encoder import ListEncoder
    from tcl_list_encoder.domain.quoting import quote_element

    try:
        encoder = ListEncoder(app_config.encoder.max_depth)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if self_test:
        from tcl_list_encoder.selftest import run_self_test

        report = run_self_test(encoder=encoder)
        click.echo(report.summary())
        sys.exit(0 if report.ok else 1)

    if quote:
        if json_mode or len(values) != 1:
            click.echo("Error: --quote takes exactly one VALUE and no --json input.", err=True)
            sys.exit(1)
        click.echo(quote_element(values[0]))
        return

    try:
        if json_mode:
            if values:
                click.echo("Error: positional VALUES cannot be combined with --json.", err=True)
                sys.exit(1)
            try:
                data = json.load(input_file)
            except json.JSONDecodeError as e:
                click.echo(f"Error: invalid JSON input: {e}", err=True)
                sys.exit(1)
            except RecursionError:
                click.echo(
                    f"Error: JSON input nests deeper than the maximum depth of "
                    f"{encoder.max_depth}",
                    err=True,
                )
                sys.exit(1)
            if not isinstance(data, list):
                click.echo("Error: JSON input must be an array.", err=True)
                sys.exit(1)
            result = encoder.encode(data)
        else:
            result = encoder.encode(values)
    except EncoderException as e:
        logger.debug("Encoding failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(result)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
