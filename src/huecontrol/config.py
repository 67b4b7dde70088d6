"""Bridge credentials: where they come from and where `setup` puts them.

Sources are tried in order (environment, ``.env`` in the working directory,
``~/.hue-config.json``); each one only fills the fields the earlier ones left
empty.
"""
import json
import logging
import os
from pathlib import Path
from typing import Callable, Mapping

from dotenv import dotenv_values
from pydantic import BaseModel

from huecontrol.errors import ConfigurationMissing, ConfigurationNotSaved

log = logging.getLogger(__name__)

ENV_BRIDGE_IP = "HUE_BRIDGE_IP"
ENV_API_KEY = "HUE_API_KEY"
ENV_FILE = Path(".env")
LEGACY_CONFIG_FILE = Path("~/.hue-config.json")

Provider = Callable[[], Mapping[str, str]]


class BridgeConfig(BaseModel):
    bridge_ip: str = ""
    api_key: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.bridge_ip and self.api_key)


def from_environ(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    environ = os.environ if environ is None else environ
    return {
        "bridge_ip": environ.get(ENV_BRIDGE_IP, ""),
        "api_key": environ.get(ENV_API_KEY, ""),
    }


def from_env_file(path: Path = ENV_FILE) -> dict[str, str]:
    values = dotenv_values(path)
    return {
        "bridge_ip": values.get(ENV_BRIDGE_IP) or "",
        "api_key": values.get(ENV_API_KEY) or "",
    }


def from_legacy_file(path: Path = LEGACY_CONFIG_FILE) -> dict[str, str]:
    path = path.expanduser()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable legacy config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring legacy config %s: expected a JSON object", path)
        return {}
    return {
        "bridge_ip": str(data.get("bridge_ip") or ""),
        "api_key": str(data.get("api_key") or ""),
    }


DEFAULT_PROVIDERS: tuple[Provider, ...] = (from_environ, from_env_file, from_legacy_file)


def load_config(providers: tuple[Provider, ...] = DEFAULT_PROVIDERS) -> BridgeConfig:
    config = BridgeConfig()
    for provider in providers:
        if config.is_complete:
            break
        values = provider()
        for field in ("bridge_ip", "api_key"):
            if not getattr(config, field) and values.get(field):
                log.debug("%s taken from %s", field, getattr(provider, "__name__", provider))
                setattr(config, field, values[field].strip())

    if not config.is_complete:
        raise ConfigurationMissing(
            f"configuration not found. Set {ENV_BRIDGE_IP} and {ENV_API_KEY} environment "
            "variables, or run 'hue-control setup'"
        )
    return config


def save_config(config: BridgeConfig, path: Path = ENV_FILE) -> Path:
    """Overwrite ``path`` with the two credential lines, readable by the owner only."""
    content = f"{ENV_BRIDGE_IP}={config.bridge_ip}\n{ENV_API_KEY}={config.api_key}\n"
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            f.write(content)
        os.chmod(path, 0o600)
    except OSError as e:
        # pairing cannot be repeated without another button press, so keep the key visible
        raise ConfigurationNotSaved(
            f"could not save configuration to {path}: {e}. Add these lines yourself:\n{content}"
        ) from e
    return path
