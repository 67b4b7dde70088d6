import logging
from typing import Any

import requests
import urllib3

from huecontrol.api.http_client import DEFAULT_TIMEOUT, HttpClient
from huecontrol.config import BridgeConfig
from huecontrol.errors import BridgeError, BridgeUnreachable, ProtocolError

# Bridge uses a self-signed certificate on the LAN
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

log = logging.getLogger(__name__)


def bridge_client(base_url: str, session: requests.Session | None = None) -> HttpClient:
    return HttpClient(base_url, {"Content-Type": "application/json"}, verify=False, session=session)


def call_bridge(send, what: str) -> Any:
    """Run ``send()`` and map requests' failures onto our error kinds."""
    try:
        return send()
    except requests.JSONDecodeError as e:
        raise ProtocolError(f"invalid response from bridge while {what}: {e}") from e
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "error"
        raise BridgeError(f"bridge returned HTTP {status} while {what}") from e
    except requests.RequestException as e:
        raise BridgeUnreachable(f"failed to connect to bridge: {e}") from e


def raise_for_errors(result: Any, what: str) -> None:
    """v1 replies are lists of ``{"success": ...}`` / ``{"error": ...}`` entries."""
    if not isinstance(result, list):
        return
    errors = [item["error"] for item in result if isinstance(item, dict) and "error" in item]
    if errors:
        descriptions = "; ".join(str(err.get("description", err)) for err in errors)
        raise BridgeError(f"bridge rejected {what}: {descriptions}")


class HueApi:
    def __init__(self, config: BridgeConfig, client: HttpClient | None = None,
                 timeout: float = DEFAULT_TIMEOUT):
        self.config = config
        self.timeout = timeout
        self.client = client or bridge_client(f"https://{config.bridge_ip}/api/{config.api_key}")

    def get_groups(self) -> dict[str, Any]:
        data = call_bridge(lambda: self.client.get("groups", timeout=self.timeout), "listing groups")
        raise_for_errors(data, "listing groups")
        if not isinstance(data, dict):
            raise ProtocolError(f"invalid response from bridge: expected an object, got {type(data).__name__}")
        return data

    def put_group_action(self, group_id: str, payload: dict) -> list:
        what = f"update of group {group_id}"
        result = call_bridge(
            lambda: self.client.put(f"groups/{group_id}/action", payload, timeout=self.timeout), what
        )
        raise_for_errors(result, what)
        return result
