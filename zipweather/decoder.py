from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from zipweather.contracts import Location, WeatherObservation
from zipweather.errors import DecodeError


ModelT = TypeVar('ModelT', bound=BaseModel)


def decode(model: type[ModelT], body: str | bytes) -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        first = exc.errors()[0]
        where = '.'.join(str(part) for part in first['loc']) or '<body>'
        raise DecodeError(
            model.__name__,
            f"{exc.error_count()} error(s), first at {where}: {first['msg']}",
        ) from exc


def decode_location(body: str | bytes) -> Location:
    return decode(Location, body)


def decode_weather(body: str | bytes) -> WeatherObservation:
    return decode(WeatherObservation, body)
