"""Weather code and temperature rules for picking a light color.

All results are names from ``huecontrol.presets.COLOR_PRESETS``.
"""
from types import MappingProxyType

DEFAULT_COLOR = "warm"

# wttr.in (WWO) condition codes
WEATHER_CONDITIONS = MappingProxyType({
    # Clear / sunny
    "113": "warm",    # Sunny
    "116": "warm",    # Partly cloudy

    # Cloudy
    "119": "cool",    # Cloudy
    "122": "cool",    # Overcast
    "143": "cool",    # Mist
    "248": "cool",    # Fog
    "260": "cool",    # Freezing fog

    # Rain
    "176": "blue",    # Patchy rain
    "263": "blue",    # Patchy light drizzle
    "266": "blue",    # Light drizzle
    "293": "blue",    # Patchy light rain
    "296": "blue",    # Light rain
    "299": "blue",    # Moderate rain at times
    "302": "blue",    # Moderate rain
    "305": "blue",    # Heavy rain at times
    "308": "blue",    # Heavy rain
    "311": "cyan",    # Light freezing rain
    "314": "cyan",    # Moderate or heavy freezing rain
    "353": "blue",    # Light rain shower
    "356": "blue",    # Moderate or heavy rain shower
    "359": "blue",    # Torrential rain shower

    # Snow, sleet, ice
    "179": "white",   # Patchy snow
    "182": "cyan",    # Patchy sleet
    "185": "cyan",    # Patchy freezing drizzle
    "227": "white",   # Blowing snow
    "230": "white",   # Blizzard
    "317": "cyan",    # Light sleet
    "320": "cyan",    # Moderate or heavy sleet
    "323": "white",   # Patchy light snow
    "326": "white",   # Light snow
    "329": "white",   # Patchy moderate snow
    "332": "white",   # Moderate snow
    "335": "white",   # Patchy heavy snow
    "338": "white",   # Heavy snow
    "350": "cyan",    # Ice pellets
    "362": "cyan",    # Light sleet showers
    "365": "cyan",    # Moderate or heavy sleet showers
    "368": "white",   # Light snow showers
    "371": "white",   # Moderate or heavy snow showers
    "374": "cyan",    # Light showers of ice pellets
    "377": "cyan",    # Moderate or heavy showers of ice pellets

    # Thunder
    "200": "purple",  # Thundery outbreaks
    "386": "purple",  # Patchy light rain with thunder
    "389": "purple",  # Moderate or heavy rain with thunder
    "392": "purple",  # Patchy light snow with thunder
    "395": "purple",  # Moderate or heavy snow with thunder
})

# (from °C inclusive, to °C exclusive, substitutions); None = unbounded
TEMPERATURE_BANDS = (
    (None, 0, MappingProxyType({"warm": "cool", "orange": "cool", "yellow": "cyan"})),
    (0, 10, MappingProxyType({"warm": "white"})),
    (10, 30, MappingProxyType({})),
    (30, 38, MappingProxyType({"cool": "warm", "white": "warm", "warm": "orange"})),
    (38, None, MappingProxyType({"cool": "orange", "white": "orange", "warm": "orange", "yellow": "red"})),
)


def base_color_for(code: str) -> str:
    return WEATHER_CONDITIONS.get(str(code).strip(), DEFAULT_COLOR)


def _band_for(temp_c: int):
    for low, high, substitutions in TEMPERATURE_BANDS:
        if (low is None or temp_c >= low) and (high is None or temp_c < high):
            return substitutions
    raise AssertionError(f"no temperature band covers {temp_c}")


def adjust_color_by_temperature(color: str, temp_c: int) -> str:
    """One substitution step for the band ``temp_c`` falls in; never repeated."""
    return _band_for(temp_c).get(color, color)
