"""Shared fixtures: bridge/weather payloads and a fake requests session."""
from unittest.mock import Mock

import pytest
import requests

from huecontrol.api.hue_api import HueApi
from huecontrol.config import BridgeConfig


def make_response(data=None, *, json_error=False, status=200):
    response = Mock()
    response.status_code = status
    if json_error:
        response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
    else:
        response.json.return_value = data
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    """A requests.Session stand-in; set ``session.request.return_value`` per test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def config():
    return BridgeConfig(bridge_ip="192.168.1.2", api_key="secret-key")


@pytest.fixture
def groups_payload():
    return {
        "1": {
            "name": "Living Room",
            "type": "Room",
            "lights": ["1", "2", "3"],
            "action": {"on": True, "bri": 127, "hue": 8000, "sat": 200},
        },
        "2": {
            "name": "Bedroom",
            "type": "Room",
            "lights": ["4"],
            "action": {"on": False, "bri": 254},
        },
        "10": {
            "name": "Office",
            "type": "Zone",
            "lights": ["5", "6"],
            "action": {"on": True, "bri": 254},
        },
    }


@pytest.fixture
def api(groups_payload):
    fake = Mock(spec=HueApi)
    fake.get_groups.return_value = groups_payload
    fake.put_group_action.return_value = [{"success": {}}]
    return fake


@pytest.fixture
def wttr_payload():
    return {
        "current_condition": [
            {
                "weatherCode": "113",
                "weatherDesc": [{"value": "Sunny"}],
                "temp_C": "35",
                "FeelsLikeC": "37",
            }
        ],
        "nearest_area": [
            {
                "areaName": [{"value": "Seville"}],
                "country": [{"value": "Spain"}],
            }
        ],
    }
