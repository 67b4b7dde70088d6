from typing import Optional

from pydantic import BaseModel, Field

from huecontrol.models.weather import WttrResponse
from huecontrol.weather.mappings import adjust_color_by_temperature, base_color_for


class LightingAdvice(BaseModel):
    location: str
    temperature: int
    feels_like: Optional[int] = None
    description: str
    weather_code: str
    base_color: str
    color: str
    brightness: int = Field(80, ge=0, le=100)

    @property
    def adjusted(self) -> bool:
        return self.color != self.base_color

    def report(self) -> list[str]:
        feels_like = self.feels_like if self.feels_like is not None else "?"
        lines = [
            f"📍 Location: {self.location}",
            f"🌡️  Temperature: {self.temperature}°C (feels like {feels_like}°C)",
            f"☁️  Condition: {self.description} (code: {self.weather_code})",
        ]
        setting = f"💡 Setting lights to: {self.color} at {self.brightness}% brightness"
        if self.adjusted:
            setting += f" (adjusted from {self.base_color} due to temperature)"
        lines.append(setting)
        return lines


def advise(weather: WttrResponse, brightness: int = 80) -> LightingAdvice:
    current = weather.current
    base_color = base_color_for(current.weather_code)
    return LightingAdvice(
        location=weather.location_name,
        temperature=current.temp_c,
        feels_like=current.feels_like_c,
        description=current.description,
        weather_code=current.weather_code,
        base_color=base_color,
        color=adjust_color_by_temperature(base_color, current.temp_c),
        brightness=brightness,
    )
