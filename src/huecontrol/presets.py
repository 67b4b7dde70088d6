from types import MappingProxyType

# name -> (hue 0-65535, saturation 0-254)
COLOR_PRESETS = MappingProxyType({
    "red":    (0, 254),
    "orange": (5000, 254),
    "yellow": (10000, 254),
    "green":  (25500, 254),
    "cyan":   (35000, 254),
    "blue":   (46920, 254),
    "purple": (50000, 254),
    "pink":   (56100, 254),
    "warm":   (8000, 200),   # warm white
    "cool":   (34000, 50),   # cool white
    "white":  (0, 0),        # no color
})

MAX_BRIGHTNESS = 254


def preset_names() -> str:
    return ", ".join(COLOR_PRESETS)


def resolve_preset(name: str) -> tuple[int, int]:
    """Look up a preset case-insensitively. Raises KeyError for unknown names."""
    return COLOR_PRESETS[name.strip().lower()]


def percent_to_bri(percent: int) -> int:
    """Scale 0-100 % to the bridge's 1-254 range; 0 stays 0 (off)."""
    if percent <= 0:
        return 0
    bri = (percent * MAX_BRIGHTNESS + 50) // 100  # round half up
    return max(1, min(bri, MAX_BRIGHTNESS))


def bri_to_percent(bri: int) -> int:
    return int(bri / MAX_BRIGHTNESS * 100)
