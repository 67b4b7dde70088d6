import logging
from urllib.parse import quote

import pydantic
import requests

from huecontrol.api.http_client import DEFAULT_TIMEOUT, HttpClient
from huecontrol.errors import NoWeatherData, WeatherUnavailable
from huecontrol.models.weather import WttrResponse

log = logging.getLogger(__name__)

WTTR_URL = "https://wttr.in"


class WeatherClient:
    def __init__(self, base_url: str = WTTR_URL, client: HttpClient | None = None,
                 timeout: float = DEFAULT_TIMEOUT):
        self.client = client or HttpClient(base_url)
        self.timeout = timeout

    def fetch(self, location: str = "") -> WttrResponse:
        """Current conditions for ``location``; an empty location lets wttr.in geolocate us."""
        path = quote(location.strip(), safe="")
        try:
            data = self.client.get(path, params={"format": "j1"}, timeout=self.timeout)
        except requests.JSONDecodeError as e:
            raise WeatherUnavailable(f"failed to parse weather data: {e}") from e
        except requests.RequestException as e:
            raise WeatherUnavailable(f"failed to fetch weather: {e}") from e

        try:
            weather = WttrResponse.model_validate(data)
        except pydantic.ValidationError as e:
            raise WeatherUnavailable(f"failed to parse weather data: {e}") from e

        if not weather.current_condition:
            raise NoWeatherData("No weather data received")
        log.debug("Weather for %r: code=%s temp=%s", location or "auto", weather.current.weather_code,
                  weather.current.temp_c)
        return weather
