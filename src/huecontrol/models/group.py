from pydantic import BaseModel, Field

from huecontrol.presets import bri_to_percent

ALL_LIGHTS_GROUP_ID = "0"


class GroupAction(BaseModel):
    on: bool = False
    bri: int = Field(0, ge=0, le=254)
    hue: int | None = Field(None, ge=0, le=65535)
    sat: int | None = Field(None, ge=0, le=254)


class Group(BaseModel):
    id: str = ""
    name: str
    type: str = ""  # z.B. "Room", "Zone", "LightGroup"
    lights: list[str] = Field(default_factory=list)
    action: GroupAction = Field(default_factory=GroupAction)

    @property
    def status(self) -> str:
        if not self.action.on:
            return "off"
        return f"on ({bri_to_percent(self.action.bri)}%)"

    def sort_key(self) -> tuple:
        return (not self.id.isdigit(), int(self.id) if self.id.isdigit() else 0, self.id)
