from __future__ import annotations

import logging

from zipweather.api.geocode import GeocodeClient
from zipweather.api.weather import WeatherClient
from zipweather.contracts import WeatherReport
from zipweather.errors import ZipWeatherError


logger = logging.getLogger(__name__)

LOCATION_STAGE = 'Location'
WEATHER_STAGE = 'Weather'


class WeatherPipeline:
    def __init__(
        self, geocode_client: GeocodeClient, weather_client: WeatherClient
    ) -> None:
        self.geocode_client = geocode_client
        self.weather_client = weather_client

    async def run(
        self, postal_code: str, country_code: str, units: str, api_key: str
    ) -> WeatherReport:
        # weather needs the resolved coordinates, so the calls are sequential
        try:
            location = await self.geocode_client.resolve(
                postal_code, country_code, api_key
            )
        except ZipWeatherError as exc:
            exc.stage = LOCATION_STAGE
            raise
        logger.debug(
            'Resolved %s,%s to (%s, %s)',
            postal_code, country_code, location.lat, location.lon,
        )
        try:
            observation = await self.weather_client.fetch(
                location, units, api_key
            )
        except ZipWeatherError as exc:
            exc.stage = WEATHER_STAGE
            raise
        return WeatherReport(
            location=location, observation=observation, units=units
        )
