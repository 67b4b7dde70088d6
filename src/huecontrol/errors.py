class HueError(Exception):
    """Base class for everything the hue tools report to the user."""


class ConfigurationMissing(HueError):
    pass


class BridgeUnreachable(HueError):
    pass


class ProtocolError(HueError):
    """The bridge answered with something we could not make sense of."""


class BridgeError(HueError):
    """The bridge understood the request and rejected it."""


class RoomNotFound(HueError):
    pass


class ValidationError(HueError):
    pass


class WeatherUnavailable(HueError):
    pass


class NoWeatherData(HueError):
    pass


class DependencyMissing(HueError):
    pass


class ConfigurationNotSaved(HueError):
    pass


class HueControlFailed(HueError):
    """The hue-control executable ran but exited non-zero."""
