from pydantic import BaseModel, ConfigDict, Field


class TextValue(BaseModel):
    value: str = ""


def _first(values: list[TextValue], default: str = "") -> str:
    return values[0].value if values else default


class CurrentCondition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weather_code: str = Field(alias="weatherCode")
    weather_desc: list[TextValue] = Field(default_factory=list, alias="weatherDesc")
    temp_c: int = Field(alias="temp_C")
    feels_like_c: int | None = Field(None, alias="FeelsLikeC")

    @property
    def description(self) -> str:
        return _first(self.weather_desc, "Unknown")


class NearestArea(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    area_name: list[TextValue] = Field(default_factory=list, alias="areaName")


class WttrResponse(BaseModel):
    """The parts of wttr.in's ``format=j1`` document we care about."""

    current_condition: list[CurrentCondition] = Field(default_factory=list)
    nearest_area: list[NearestArea] = Field(default_factory=list)

    @property
    def current(self) -> CurrentCondition:
        return self.current_condition[0]

    @property
    def location_name(self) -> str:
        if not self.nearest_area:
            return "Unknown"
        return _first(self.nearest_area[0].area_name, "Unknown")
