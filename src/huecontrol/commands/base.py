from typing import Optional

import pydantic
from pydantic import BaseModel, Field, field_validator

from huecontrol.errors import ValidationError
from huecontrol.presets import COLOR_PRESETS, percent_to_bri, preset_names, resolve_preset

ALL_ROOMS = "all"


class GroupActionCommand(BaseModel):
    """Body for PUT /groups/<id>/action."""

    on: bool
    bri: Optional[int] = Field(None, ge=1, le=254)
    hue: Optional[int] = Field(None, ge=0, le=65535)
    sat: Optional[int] = Field(None, ge=0, le=254)

    def payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class SetStateRequest(BaseModel):
    room: str = ALL_ROOMS
    brightness: int = Field(100, ge=0, le=100)
    hue: Optional[int] = Field(None, ge=0, le=65535)
    sat: Optional[int] = Field(None, ge=0, le=254)
    color: Optional[str] = None

    @field_validator("color")
    @classmethod
    def known_color(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        name = v.strip().lower()
        if name not in COLOR_PRESETS:
            raise ValueError(f"Unknown color '{v}'. Available: {preset_names()}")
        return name

    @classmethod
    def build(cls, **fields) -> "SetStateRequest":
        """Validate user input, turning pydantic's errors into ours."""
        try:
            return cls(**fields)
        except pydantic.ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ValidationError(problems) from e

    @property
    def targets_all(self) -> bool:
        return self.room.strip().lower() == ALL_ROOMS

    def resolved_color(self) -> tuple[Optional[int], Optional[int]]:
        # explicit --hue / --sat win over the preset, component by component
        hue, sat = resolve_preset(self.color) if self.color else (None, None)
        if self.hue is not None:
            hue = self.hue
        if self.sat is not None:
            sat = self.sat
        return hue, sat

    def to_command(self) -> GroupActionCommand:
        bri = percent_to_bri(self.brightness)
        hue, sat = self.resolved_color()
        return GroupActionCommand(on=bri > 0, bri=bri or None, hue=hue, sat=sat)

    def describe(self) -> str:
        msg = f"Set {self.room} to {self.brightness}% brightness"
        if self.color:
            return msg + f" with color '{self.color}'"
        parts = [f"{k}={v}" for k, v in (("hue", self.hue), ("sat", self.sat)) if v is not None]
        if parts:
            msg += " with " + " ".join(parts)
        return msg
