from __future__ import annotations

import logging

from zipweather.contracts import Location
from zipweather.decoder import decode_location
from zipweather.errors import RequestFailed
from zipweather.redact import build_url, redact
from zipweather.transport import HttpxTransport, Transport


logger = logging.getLogger(__name__)

# https://api.openweathermap.org/geo/1.0/zip?zip=N7L,CA&appid={api_key}
GEOCODING_API_BASE_URL = 'https://api.openweathermap.org/geo/1.0/zip'


class GeocodeClient:
    """Resolves a postal code and country code to a ``Location``."""

    def __init__(
        self,
        transport: Transport | None = None,
        base_url: str = GEOCODING_API_BASE_URL,
        debug: bool = False,
    ) -> None:
        self._transport = transport or HttpxTransport()
        self.base_url = base_url
        self.debug = debug

    async def resolve(
        self, postal_code: str, country_code: str, api_key: str
    ) -> Location:
        params = {'zip': f'{postal_code},{country_code}', 'appid': api_key}
        response = await self._transport.get(self.base_url, params)
        safe_url = redact(build_url(self.base_url, params), api_key)

        if response.status != 200:
            raise RequestFailed(response.status, url=safe_url)

        location = decode_location(response.body)

        if self.debug:
            logger.info('Location Endpoint: %s', safe_url)
            for key, value in location.model_dump().items():
                logger.info('%s: %s', key, value)
        return location
