"""JSON-in, JSON-out entry point for hosts that embed the pipeline.

Intended for the Pyodide build: a page passes the request as a JSON string
and always gets a JSON string back, with failures reported in ``error``
rather than raised.
"""

from __future__ import annotations

import logging

from zipweather.app import PipelineBuilder
from zipweather.contracts import WeatherRequest, WeatherResponse
from zipweather.decoder import decode
from zipweather.errors import ZipWeatherError
from zipweather.redact import redact
from zipweather.transport import PyodideTransport, Transport


logger = logging.getLogger(__name__)


async def get_weather_data(
    request_json: str, transport: Transport | None = None
) -> str:
    # a malformed request is the caller's bug and surfaces as DecodeError
    request = decode(WeatherRequest, request_json)
    logger.debug(
        'Weather request for %s,%s in %s', request.zip, request.country,
        request.units,
    )

    pipeline = (
        PipelineBuilder()
        .set_transport(transport or PyodideTransport())
        .build()
    )
    try:
        report = await pipeline.run(
            request.zip, request.country, request.units, request.api_key
        )
    except ZipWeatherError as exc:
        message = str(exc)
        if exc.stage:
            message = f'{exc.stage} error: {message}'
        message = redact(message, request.api_key)
        logger.warning('Weather fetch error: %s', message)
        return WeatherResponse(error=message).model_dump_json()

    return WeatherResponse(
        location=report.location,
        weather=report.observation.model_dump_json(by_alias=True),
    ).model_dump_json()
