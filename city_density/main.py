from __future__ import annotations

import sys

import typer

from city_density.config import get_settings
from city_density.dataset import CITY_DATA
from city_density.pipeline import run_pipeline
from city_density.reporter import print_table, render_table
from city_density.utils.logging import configure_logging, get_logger

ERROR_PREFIX = "Error processing city data"

log = get_logger(__name__)

app = typer.Typer(help="Rank the built-in cities by relative population density.")


@app.command()
def report() -> None:
    """
    Print the city table sorted by relative density, densest first.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        ranked = run_pipeline(CITY_DATA)
        lines = render_table(ranked)
    except Exception as exc:  # noqa: BLE001
        log.debug("Pipeline failed", exc_info=True)
        typer.echo(f"{ERROR_PREFIX}: {exc}", err=True)
        raise typer.Exit(code=1)

    print_table(lines)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
