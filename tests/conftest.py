import copy
import json
import logging

import pytest

from zipweather.api.geocode import GEOCODING_API_BASE_URL
from zipweather.api.weather import WEATHER_API_BASE_URL
from zipweather.transport import InMemoryTransport


API_KEY = 's3cr3t-k3y'

GEOCODE_PAYLOAD = {
    'zip': 'N7L',
    'name': 'Lakeshore',
    'lat': 42.14,
    'lon': -82.65,
    'country': 'CA',
}

WEATHER_PAYLOAD = {
    'coord': {'lon': -82.65, 'lat': 42.14},
    'weather': [
        {
            'id': 800,
            'main': 'Clear',
            'description': 'clear sky',
            'icon': '01d',
        }
    ],
    'base': 'stations',
    'main': {
        'temp': 21.5,
        'feels_like': 21.2,
        'temp_min': 20.1,
        'temp_max': 22.8,
        'pressure': 1016,
        'humidity': 58,
        'sea_level': 1016,
        'grnd_level': 990,
    },
    'visibility': 10000,
    'wind': {'speed': 4.12, 'deg': 240, 'gust': 7.6},
    'clouds': {'all': 0},
    'dt': 1726329600,
    'sys': {
        'type': 2,
        'id': 2007345,
        'country': 'CA',
        'sunrise': 1726311600,
        'sunset': 1726356720,
    },
    'timezone': -14400,
    'id': 6049430,
    'name': 'Lakeshore',
    'cod': 200,
}


@pytest.fixture
def geocode_payload():
    return copy.deepcopy(GEOCODE_PAYLOAD)


@pytest.fixture
def weather_payload():
    return copy.deepcopy(WEATHER_PAYLOAD)


@pytest.fixture
def transport(geocode_payload, weather_payload):
    return (
        InMemoryTransport()
        .add(GEOCODING_API_BASE_URL, 200, json.dumps(geocode_payload))
        .add(WEATHER_API_BASE_URL, 200, json.dumps(weather_payload))
    )


@pytest.fixture
def restore_logging():
    """Undo whatever dictConfig does to the root and quieted loggers."""
    names = ['httpx', 'httpcore', 'zipweather.api']
    root = logging.getLogger()
    saved_root = (root.level, list(root.handlers))
    saved = {
        name: (
            logging.getLogger(name).level,
            list(logging.getLogger(name).handlers),
            logging.getLogger(name).propagate,
        )
        for name in names
    }
    yield
    for logger in [root] + [logging.getLogger(name) for name in names]:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            if handler not in saved_root[1]:
                handler.close()
    root.setLevel(saved_root[0])
    for handler in saved_root[1]:
        root.addHandler(handler)
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = propagate
        for handler in handlers:
            logger.addHandler(handler)
