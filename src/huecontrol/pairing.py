import logging

import requests

from huecontrol.api.hue_api import bridge_client, call_bridge
from huecontrol.api.http_client import DEFAULT_TIMEOUT
from huecontrol.errors import BridgeError, ProtocolError

log = logging.getLogger(__name__)

DEVICE_TYPE = "hue-control#cli"


class HuePairingService:
    """Obtains an API key from the bridge. The link button must be pressed first."""

    def __init__(self, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.session = session
        self.timeout = timeout

    def create_user(self, bridge_ip: str, devicetype: str = DEVICE_TYPE) -> str:
        client = bridge_client(f"https://{bridge_ip}/api", session=self.session)
        result = call_bridge(
            lambda: client.post("", {"devicetype": devicetype}, timeout=self.timeout), "pairing"
        )
        log.debug("Pairing response: %s", result)

        # Erwartet: [{"success": {"username": "<key>"}}] oder [{"error": {...}}]
        if not isinstance(result, list) or not result:
            raise ProtocolError("empty or unexpected response from bridge")

        first = result[0]
        if not isinstance(first, dict):
            raise ProtocolError("unexpected response from bridge")
        if isinstance(first.get("error"), dict):
            raise BridgeError(first["error"].get("description", "bridge reported an error"))
        success = first.get("success")
        if isinstance(success, dict) and isinstance(success.get("username"), str):
            return success["username"]
        raise ProtocolError("unexpected response from bridge")
