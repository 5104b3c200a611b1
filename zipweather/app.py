from __future__ import annotations

import copy
import logging.config

from config.settings import AppSetting, app_settings
from zipweather.api.geocode import GEOCODING_API_BASE_URL, GeocodeClient
from zipweather.api.weather import WEATHER_API_BASE_URL, WeatherClient
from zipweather.pipeline import WeatherPipeline
from zipweather.transport import HttpxTransport, PyodideTransport, Transport

logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(message)s"},
        "detailed": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": app_settings.log_level,
            "formatter": "plain",
        },
    },
    "loggers": {
        # both log the full request URL, credential included
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
    },
    "root": {
        "handlers": ["console"],
        "level": app_settings.log_level,
    },
}

TRANSPORTS = {
    'httpx': HttpxTransport,
    'pyodide': PyodideTransport,
}


class PipelineBuilder:
    def __init__(self):
        self._transport: Transport | None = None
        self._geocoding_url = GEOCODING_API_BASE_URL
        self._weather_url = WEATHER_API_BASE_URL
        self._debug = False
        self._log_to_file = False
        self._log_file_path = None
        self._file_log_level = None

    def set_transport(self, transport: Transport) -> PipelineBuilder:
        self._transport = transport
        return self

    def set_endpoints(
        self, geocoding_url: str, weather_url: str
    ) -> PipelineBuilder:
        self._geocoding_url = geocoding_url
        self._weather_url = weather_url
        return self

    def enable_debug(self, debug: bool = True) -> PipelineBuilder:
        self._debug = debug
        return self

    def enable_file_logging(
        self, filename: str, log_level: str
    ) -> PipelineBuilder:
        self._log_to_file = True
        self._log_file_path = filename
        self._file_log_level = log_level
        return self

    def _configure_logging(self):
        config = copy.deepcopy(logging_config)
        if self._log_to_file:
            config['handlers']['file'] = {
                "class": "logging.FileHandler",
                "level": self._file_log_level,
                "filename": self._log_file_path,
                "formatter": "detailed",
            }
            config['root']['handlers'].append('file')
        if self._debug:
            # debug echo is shown even when the root level is above INFO
            config['handlers']['debug'] = {
                "class": "logging.StreamHandler",
                "level": "INFO",
                "formatter": "plain",
            }
            handlers = ['debug'] + (['file'] if self._log_to_file else [])
            config['loggers']['zipweather.api'] = {
                "level": "INFO",
                "handlers": handlers,
                "propagate": False,
            }
        logging.config.dictConfig(config)

    def build(self) -> WeatherPipeline:
        if self._log_to_file or self._debug:
            self._configure_logging()
        # one transport per pipeline, shared by both stages
        transport = self._transport or HttpxTransport()
        return WeatherPipeline(
            GeocodeClient(transport, self._geocoding_url, debug=self._debug),
            WeatherClient(transport, self._weather_url, debug=self._debug),
        )


def create_pipeline(
    settings: AppSetting = app_settings, transport: Transport | None = None
) -> WeatherPipeline:
    logging.config.dictConfig(logging_config)
    if transport is None:
        try:
            transport = TRANSPORTS[settings.transport]()
        except KeyError:
            raise ValueError(
                f'Unknown transport {settings.transport!r}, '
                f'expected one of {sorted(TRANSPORTS)}'
            ) from None
    builder = (
        PipelineBuilder()
        .set_transport(transport)
        .set_endpoints(settings.geocoding_url, settings.weather_url)
        .enable_debug(settings.debug)
    )
    if settings.enable_file_logging:
        builder.enable_file_logging(
            filename=settings.log_file_path,
            log_level=settings.log_level,
        )
    return builder.build()
