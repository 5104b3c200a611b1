from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSetting(BaseSettings):
    log_level: str = 'INFO'
    enable_file_logging: bool = False
    log_file_path: str = 'zipweather.log'
    geocoding_url: str = 'https://api.openweathermap.org/geo/1.0/zip'
    weather_url: str = 'https://api.openweathermap.org/data/2.5/weather'
    transport: str = 'httpx'
    debug: bool = False
    api_key: str | None = Field(
        default=None, validation_alias='OPENWEATHERMAP_API_KEY'
    )

    model_config = SettingsConfigDict(
        env_prefix='APP_', env_file='.env', extra='ignore'
    )


app_settings = AppSetting()
