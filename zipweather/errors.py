from __future__ import annotations


class ZipWeatherError(Exception):
    """Base exception for everything the client pipeline raises."""

    # set by the pipeline to the stage that failed: "Location" or "Weather"
    stage: str | None = None


class TransportError(ZipWeatherError):
    """The underlying network primitive could not complete the exchange."""


class RequestFailed(ZipWeatherError):
    def __init__(self, status: int, url: str | None = None) -> None:
        self.status = status
        # always the redacted form
        self.url = url
        message = f'API request failed with status: {status}'
        if url:
            message = f'{message} ({url})'
        super().__init__(message)


class DecodeError(ZipWeatherError):
    def __init__(self, model: str, detail: str) -> None:
        self.model = model
        self.detail = detail
        super().__init__(f'Could not decode {model}: {detail}')
