import json

import pytest
from pydantic import ValidationError

from zipweather.contracts import Location, WeatherObservation
from zipweather.decoder import decode_location, decode_weather
from zipweather.errors import DecodeError


def test_decode_location(geocode_payload):
    location = decode_location(json.dumps(geocode_payload))

    assert location == Location(
        zip='N7L', name='Lakeshore', lat=42.14, lon=-82.65, country='CA'
    )


def test_decode_location_accepts_integer_coordinates(geocode_payload):
    geocode_payload['lat'] = 42
    location = decode_location(json.dumps(geocode_payload))
    assert location.lat == 42.0


@pytest.mark.parametrize('field', ['zip', 'name', 'lat', 'lon', 'country'])
def test_decode_location_missing_field(geocode_payload, field):
    del geocode_payload[field]
    with pytest.raises(DecodeError) as exc_info:
        decode_location(json.dumps(geocode_payload))
    assert exc_info.value.model == 'Location'
    assert field in exc_info.value.detail


@pytest.mark.parametrize(
    'field, value',
    [
        ('lat', 'forty-two'),
        ('lat', '42.14'),
        ('lon', None),
        ('name', 12),
        ('lat', 90.5),
        ('lon', -180.01),
    ],
)
def test_decode_location_rejects_bad_values(geocode_payload, field, value):
    geocode_payload[field] = value
    with pytest.raises(DecodeError):
        decode_location(json.dumps(geocode_payload))


@pytest.mark.parametrize('body', ['', 'not json', '[]', '{"zip": "N7L"'])
def test_decode_location_rejects_malformed_body(body):
    with pytest.raises(DecodeError):
        decode_location(body)


def test_location_is_immutable(geocode_payload):
    location = decode_location(json.dumps(geocode_payload))
    with pytest.raises(ValidationError):
        location.lat = 0.0


def test_decode_weather(weather_payload):
    observation = decode_weather(json.dumps(weather_payload))

    assert isinstance(observation, WeatherObservation)
    assert observation.main.temp == 21.5
    assert observation.main.sea_level == 1016
    assert observation.wind.gust == 7.6
    assert observation.sys.sunrise == 1726311600
    assert observation.timezone == -14400
    assert observation.main_condition() == 'Clear'
    assert observation.description() == 'clear sky'


def test_decode_weather_without_optional_fields(weather_payload):
    del weather_payload['main']['sea_level']
    del weather_payload['main']['grnd_level']
    del weather_payload['wind']['gust']
    del weather_payload['sys']['type']
    del weather_payload['sys']['id']
    del weather_payload['name']

    observation = decode_weather(json.dumps(weather_payload))

    assert observation.main.sea_level is None
    assert observation.main.grnd_level is None
    assert observation.wind.gust is None
    assert observation.sys.type is None
    assert observation.name is None


def test_decode_weather_zero_is_not_absent(weather_payload):
    weather_payload['wind']['gust'] = 0

    observation = decode_weather(json.dumps(weather_payload))

    assert observation.wind.gust == 0.0
    assert observation.wind.gust is not None


def test_decode_weather_missing_temperature(weather_payload):
    del weather_payload['main']['temp']

    with pytest.raises(DecodeError) as exc_info:
        decode_weather(json.dumps(weather_payload))
    assert exc_info.value.model == 'WeatherObservation'
    assert 'main.temp' in exc_info.value.detail


def test_decode_weather_empty_conditions(weather_payload):
    weather_payload['weather'] = []

    observation = decode_weather(json.dumps(weather_payload))

    assert observation.weather == []
    assert observation.main_condition() is None
    assert observation.description() is None


def test_decode_weather_precipitation(weather_payload):
    weather_payload['rain'] = {'1h': 0.42}

    observation = decode_weather(json.dumps(weather_payload))

    assert observation.rain.one_hour == 0.42
    assert observation.rain.three_hours is None
    assert observation.snow is None


@pytest.mark.parametrize(
    'section, key, loc',
    [
        (None, 'visibility', 'visibility'),
        ('sys', 'country', 'sys.country'),
    ],
)
def test_decode_weather_missing_required_field(weather_payload, section, key, loc):
    target = weather_payload[section] if section else weather_payload
    del target[key]

    with pytest.raises(DecodeError) as exc_info:
        decode_weather(json.dumps(weather_payload))
    assert loc in exc_info.value.detail
