"""Getting the advised setting onto the lights.

The default path calls ``GroupService.set_state`` directly. ``run_hue_control``
keeps the older route of shelling out to a ``hue-control`` executable for
setups where only the binary is installed next to this tool.
"""
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable

from huecontrol.commands.base import ALL_ROOMS, SetStateRequest
from huecontrol.errors import DependencyMissing, HueControlFailed
from huecontrol.services.group_service import GroupService
from huecontrol.weather.advisor import LightingAdvice

log = logging.getLogger(__name__)

HUE_CONTROL = "hue-control"
COMMON_PATHS = (
    Path(HUE_CONTROL),
    Path("..") / HUE_CONTROL / HUE_CONTROL,
    Path("scripts") / HUE_CONTROL / HUE_CONTROL,
)


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_hue_control(executable: str | None = None) -> Path:
    own_dir = Path(executable or sys.argv[0]).resolve().parent
    candidates = [
        own_dir / ".." / HUE_CONTROL / HUE_CONTROL,   # sibling checkout
        own_dir / HUE_CONTROL,                        # same bin/ directory
    ]
    for candidate in candidates:
        if _is_executable(candidate):
            return candidate.resolve()

    on_path = shutil.which(HUE_CONTROL)
    if on_path:
        return Path(on_path)

    for candidate in COMMON_PATHS:
        if _is_executable(candidate):
            return candidate.resolve()

    raise DependencyMissing(
        f"{HUE_CONTROL} executable not found. Install the package or put {HUE_CONTROL} on PATH"
    )


def hue_control_args(advice: LightingAdvice, room: str = ALL_ROOMS) -> list[str]:
    args = ["set", "--color", advice.color, "--brightness", str(advice.brightness)]
    if room.strip().lower() != ALL_ROOMS:
        args += ["--room", room]
    return args


def run_hue_control(advice: LightingAdvice, room: str = ALL_ROOMS, executable: Path | None = None) -> None:
    path = executable or find_hue_control()
    cmd = [str(path), *hue_control_args(advice, room)]
    log.debug("Running %s", cmd)
    result = subprocess.run(cmd, check=False)
    if result.returncode != 0:
        raise HueControlFailed(f"setting lights failed: {HUE_CONTROL} exited with status {result.returncode}")


def apply_advice(advice: LightingAdvice, room: str, service_factory: Callable[[], GroupService]) -> str:
    request = SetStateRequest.build(room=room, brightness=advice.brightness, color=advice.color)
    service_factory().set_state(request)
    return request.describe()
