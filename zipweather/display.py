from __future__ import annotations

from zipweather.api.weather import IMPERIAL_UNITS, METRIC_UNITS
from zipweather.contracts import Location, WeatherObservation


def temperature_display(temp: float, units: str) -> str:
    if units == METRIC_UNITS:
        return f'{temp:.1f}°C'
    if units == IMPERIAL_UNITS:
        return f'{temp:.1f}°F'
    return f'{temp:.1f}°K'


def speed_display(speed: float, units: str) -> str:
    if units == IMPERIAL_UNITS:
        return f'{speed:.1f} mph'
    return f'{speed:.1f} m/s'


def format_location(location: Location) -> str:
    return location.detailed_display()


def format_weather(observation: WeatherObservation, units: str) -> str:
    """Render an observation the way the CLI prints it, one fact per line."""
    lines = [
        f'🌤️ Weather in {observation.name or "unknown location"}',
        f'📍 Coordinates: ({observation.coord.lat}, {observation.coord.lon})',
        f'🌡️ Temperature: {temperature_display(observation.main.temp, units)}'
        f' (feels like {temperature_display(observation.main.feels_like, units)})',
        f'💧 Humidity: {observation.main.humidity}%',
    ]
    wind = f'💨 Wind: {speed_display(observation.wind.speed, units)} at {observation.wind.deg}°'
    if observation.wind.gust is not None:
        wind += f', gusting {speed_display(observation.wind.gust, units)}'
    lines.append(wind)
    lines.append(f'☁️ Clouds: {observation.clouds.all}%')
    if observation.weather:
        condition = observation.weather[0]
        lines.append(
            f'🌈 Conditions: {condition.main} ({condition.description})'
        )
    return '\n'.join(lines)
