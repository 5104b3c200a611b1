from __future__ import annotations

import logging

from zipweather.contracts import Location, WeatherObservation
from zipweather.decoder import decode_weather
from zipweather.errors import RequestFailed
from zipweather.redact import build_url, redact
from zipweather.transport import HttpxTransport, Transport


logger = logging.getLogger(__name__)

# https://api.openweathermap.org/data/2.5/weather?lat=42.44&lon=-82.19&appid={api_key}
WEATHER_API_BASE_URL = 'https://api.openweathermap.org/data/2.5/weather'

STANDARD_UNITS = 'standard'
METRIC_UNITS = 'metric'
IMPERIAL_UNITS = 'imperial'
KNOWN_UNITS = (STANDARD_UNITS, METRIC_UNITS, IMPERIAL_UNITS)


class WeatherClient:
    """Fetches current conditions for a resolved ``Location``.

    ``units`` is forwarded to the provider untouched, even when it is not
    one of ``KNOWN_UNITS``; the provider decides what it accepts.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        base_url: str = WEATHER_API_BASE_URL,
        debug: bool = False,
    ) -> None:
        self._transport = transport or HttpxTransport()
        self.base_url = base_url
        self.debug = debug

    @staticmethod
    def build_params(location: Location, units: str, api_key: str) -> dict[str, str]:
        return {
            'lat': str(location.lat),
            'lon': str(location.lon),
            'units': units,
            'appid': api_key,
        }

    async def fetch(
        self, location: Location, units: str, api_key: str
    ) -> WeatherObservation:
        params = self.build_params(location, units, api_key)
        response = await self._transport.get(self.base_url, params)
        safe_url = redact(build_url(self.base_url, params), api_key)

        if response.status != 200:
            raise RequestFailed(response.status, url=safe_url)

        observation = decode_weather(response.body)

        if self.debug:
            logger.info('OpenWeatherMap Endpoint: %s', safe_url)
        return observation
