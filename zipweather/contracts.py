from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Contract(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)


class Location(Contract):
    zip: str
    name: str
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    country: str

    def detailed_display(self) -> str:
        return (
            f'name: [{self.name}]\n'
            f'country: [{self.country}]\n'
            f'zip: [{self.zip}]\n'
            f'lat: [{self.lat}]\n'
            f'lon: [{self.lon}]'
        )


class Coordinates(Contract):
    lon: float
    lat: float


class Condition(Contract):
    id: int
    main: str
    description: str
    icon: str


class Measurements(Contract):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    sea_level: int | None = None
    grnd_level: int | None = None


class Wind(Contract):
    speed: float
    deg: int
    gust: float | None = None


class Clouds(Contract):
    all: int


class Precipitation(Contract):
    one_hour: float | None = Field(default=None, alias='1h')
    three_hours: float | None = Field(default=None, alias='3h')


class SystemInfo(Contract):
    type: int | None = None
    id: int | None = None
    country: str
    sunrise: int
    sunset: int


class WeatherObservation(Contract):
    coord: Coordinates
    weather: list[Condition]
    base: str
    main: Measurements
    visibility: int
    wind: Wind
    clouds: Clouds
    rain: Precipitation | None = None
    snow: Precipitation | None = None
    dt: int
    sys: SystemInfo
    timezone: int
    id: int
    name: str | None = None
    cod: int

    def main_condition(self) -> str | None:
        if not self.weather:
            return None
        return self.weather[0].main

    def description(self) -> str | None:
        if not self.weather:
            return None
        return self.weather[0].description


class WeatherReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    observation: WeatherObservation
    units: str


class WeatherRequest(BaseModel):
    zip: str
    country: str = 'CA'
    units: str = 'standard'
    api_key: str


class WeatherResponse(BaseModel):
    location: Location | None = None
    weather: str = ''
    error: str | None = None
