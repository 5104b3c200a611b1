# Command-line interface to zipweather
#
#   zipweather --zip N7L --country CA --units metric
#
# The API key is read from OPENWEATHERMAP_API_KEY (environment or .env).

import asyncio
from typing import Optional
from typing_extensions import Annotated

import logging
_logger = logging.getLogger(__name__)

import typer

from config.settings import AppSetting
from zipweather.app import create_pipeline
from zipweather.display import format_location, format_weather
from zipweather.errors import ZipWeatherError
from zipweather.redact import redact

OPENWEATHERMAP_API_KEY = "OPENWEATHERMAP_API_KEY"

app = typer.Typer(help="Get weather information by ZIP code.")


@app.command()
def main(zip: Annotated[str, typer.Option("--zip", "-z",
                    help="ZIP or postal code (e.g., N7L)")],
         country: Annotated[str, typer.Option("--country", "-c",
                    help="Two-letter country code (e.g., CA, US)")] = "CA",
         units: Annotated[str, typer.Option("--units", "-u",
                    help="Units of measurement: standard, metric or imperial")] = "standard",
         print_debug: Annotated[bool, typer.Option("--print-debug", "-p",
                    help="Show endpoint and location debug details")] = False,
         no_display: Annotated[bool, typer.Option("--no-display", "-n",
                    help="Fetch without printing the result")] = False,
         transport: Annotated[Optional[str], typer.Option(
                    help="Transport to use: httpx or pyodide")] = None,
        ) -> None:
    """ Resolve a ZIP code and print the current weather there.
    """
    settings = AppSetting()
    if not settings.api_key:
        typer.echo(f"{OPENWEATHERMAP_API_KEY} is not set", err=True)
        raise typer.Exit(code=2)

    overrides = {"debug": settings.debug or print_debug}
    if transport is not None:
        overrides["transport"] = transport
    settings = settings.model_copy(update=overrides)

    try:
        pipeline = create_pipeline(settings)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    try:
        report = asyncio.run(
            pipeline.run(zip, country, units, settings.api_key)
        )
    except ZipWeatherError as exc:
        _logger.debug("pipeline failed with %s", type(exc).__name__)
        typer.echo(f"Error: {redact(str(exc), settings.api_key)}", err=True)
        raise typer.Exit(code=1)

    if not no_display:
        typer.echo(format_location(report.location))
        typer.echo(format_weather(report.observation, units))


if __name__ == "__main__":
    app()
