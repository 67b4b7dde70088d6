"""End-to-end tests for both command-line tools, with the bridge and wttr.in faked."""
from unittest.mock import Mock

import pytest
from click.testing import CliRunner

from huecontrol.cli import common, hue_control, weather_lights
from huecontrol.errors import BridgeError, BridgeUnreachable, DependencyMissing, WeatherUnavailable
from huecontrol.models.weather import WttrResponse
from huecontrol.services.group_service import GroupService
from huecontrol.weather.client import WeatherClient


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(hue_control, "setup_logging", lambda verbose: None)
    monkeypatch.setattr(weather_lights, "setup_logging", lambda verbose: None)


@pytest.fixture
def service(api, monkeypatch):
    service = GroupService(api)
    monkeypatch.setattr(common, "build_service", lambda: service)
    return service


class TestHueControl:

    def test_help_command(self, runner):
        result = runner.invoke(hue_control.cli, ["help"])
        assert result.exit_code == 0
        for name in ("setup", "list", "set", "on", "off"):
            assert name in result.output

    def test_list(self, runner, service):
        result = runner.invoke(hue_control.cli, ["list"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Available Rooms/Groups:",
            "------------------------",
            "  [1] Living Room (Room) - 3 lights - on (50%)",
            "  [2] Bedroom (Room) - 1 lights - off",
            "  [10] Office (Zone) - 2 lights - on (100%)",
        ]

    def test_set_room_with_color(self, runner, service, api):
        result = runner.invoke(hue_control.cli,
                               ["set", "--room", "Bedroom", "--color", "warm", "--brightness", "60"])

        assert result.exit_code == 0, result.output
        assert "Set Bedroom to 60% brightness with color 'warm'" in result.output
        api.put_group_action.assert_called_once_with("2", {"on": True, "bri": 152, "hue": 8000, "sat": 200})

    def test_set_preset_with_hue_override(self, runner, service, api):
        result = runner.invoke(hue_control.cli, ["set", "--color", "Blue", "--hue", "100"])

        assert result.exit_code == 0, result.output
        api.put_group_action.assert_called_once_with("0", {"on": True, "bri": 254, "hue": 100, "sat": 254})

    def test_set_unknown_room(self, runner, service, api):
        result = runner.invoke(hue_control.cli, ["set", "--room", "Kitchen", "--brightness", "50"])

        assert result.exit_code == 1
        assert "room 'Kitchen' not found" in result.output
        api.put_group_action.assert_not_called()

    @pytest.mark.parametrize("args, message", [
        (["--brightness", "150"], "brightness"),
        (["--hue", "70000"], "hue"),
        (["--sat", "300"], "sat"),
        (["--color", "magenta"], "Available: red"),
    ])
    def test_set_validation_happens_before_any_request(self, runner, monkeypatch, args, message):
        build = Mock()
        monkeypatch.setattr(common, "build_service", build)

        result = runner.invoke(hue_control.cli, ["set", *args])

        assert result.exit_code == 1
        assert message in result.output
        build.assert_not_called()

    def test_on_and_off(self, runner, service, api):
        assert runner.invoke(hue_control.cli, ["on"]).output == "All lights turned on\n"
        assert runner.invoke(hue_control.cli, ["off"]).output == "All lights turned off\n"
        assert [c.args for c in api.put_group_action.call_args_list] == [
            ("0", {"on": True, "bri": 254}),
            ("0", {"on": False}),
        ]

    def test_bridge_unreachable_exits_non_zero(self, runner, service, api):
        api.get_groups.side_effect = BridgeUnreachable("failed to connect to bridge: timed out")

        result = runner.invoke(hue_control.cli, ["list"])

        assert result.exit_code == 1
        assert "Error: failed to connect to bridge: timed out" in result.output

    def test_missing_configuration(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("HUE_BRIDGE_IP", raising=False)
        monkeypatch.delenv("HUE_API_KEY", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        result = runner.invoke(hue_control.cli, ["on"])

        assert result.exit_code == 1
        assert "configuration not found" in result.output


class TestSetup:

    @pytest.fixture
    def pairing(self, monkeypatch):
        pairing = Mock()
        monkeypatch.setattr(hue_control, "HuePairingService", lambda: pairing)
        return pairing

    def test_pairs_and_writes_env_file(self, runner, pairing, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        pairing.create_user.return_value = "fresh-key"

        result = runner.invoke(hue_control.cli, ["setup"], input="192.168.1.50\n\n")

        assert result.exit_code == 0, result.output
        pairing.create_user.assert_called_once_with("192.168.1.50")
        assert (tmp_path / ".env").read_text() == "HUE_BRIDGE_IP=192.168.1.50\nHUE_API_KEY=fresh-key\n"
        assert "Success!" in result.output

    def test_empty_address(self, runner, pairing, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(hue_control.cli, ["setup"], input="\n")

        assert result.exit_code == 1
        assert "Bridge IP is required" in result.output
        pairing.create_user.assert_not_called()

    def test_link_button_not_pressed(self, runner, pairing, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        pairing.create_user.side_effect = BridgeError("link button not pressed")

        result = runner.invoke(hue_control.cli, ["setup"], input="192.168.1.50\n\n")

        assert result.exit_code == 1
        assert "link button not pressed" in result.output
        assert not (tmp_path / ".env").exists()

    def test_unwritable_env_file_reports_the_key(self, runner, pairing, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").mkdir()
        pairing.create_user.return_value = "fresh-key"

        result = runner.invoke(hue_control.cli, ["setup"], input="192.168.1.50\n\n")

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "Error: could not save configuration to .env" in result.output
        assert "HUE_API_KEY=fresh-key" in result.output


class TestWeatherLights:

    @pytest.fixture
    def weather(self, monkeypatch, wttr_payload):
        fetch = Mock(return_value=WttrResponse.model_validate(wttr_payload))
        monkeypatch.setattr(WeatherClient, "fetch", lambda self, location: fetch(location))
        return fetch

    def test_dry_run(self, runner, weather, monkeypatch):
        build = Mock()
        monkeypatch.setattr(common, "build_service", build)

        result = runner.invoke(weather_lights.cli, ["--location", "Seville", "--dry-run"])

        assert result.exit_code == 0, result.output
        weather.assert_called_once_with("Seville")
        assert "💡 Setting lights to: orange at 80% brightness (adjusted from warm due to temperature)" \
            in result.output
        assert "[Dry run - no changes made]" in result.output
        build.assert_not_called()

    def test_applies_in_process(self, runner, weather, service, api):
        result = runner.invoke(weather_lights.cli, ["--room", "Office", "--brightness", "50"])

        assert result.exit_code == 0, result.output
        api.put_group_action.assert_called_once_with("10", {"on": True, "bri": 127, "hue": 5000, "sat": 254})
        assert "Set Office to 50% brightness with color 'orange'" in result.output

    def test_use_binary(self, runner, weather, monkeypatch):
        run = Mock()
        monkeypatch.setattr(weather_lights, "run_hue_control", run)

        result = runner.invoke(weather_lights.cli, ["--use-binary", "--room", "Office"])

        assert result.exit_code == 0, result.output
        advice, room = run.call_args.args
        assert (advice.color, room) == ("orange", "Office")

    def test_missing_binary(self, runner, weather, monkeypatch):
        monkeypatch.setattr(weather_lights, "run_hue_control",
                            Mock(side_effect=DependencyMissing("hue-control executable not found")))

        result = runner.invoke(weather_lights.cli, ["--use-binary"])

        assert result.exit_code == 1
        assert "hue-control executable not found" in result.output

    def test_weather_unavailable(self, runner, monkeypatch):
        monkeypatch.setattr(WeatherClient, "fetch",
                            Mock(side_effect=WeatherUnavailable("failed to fetch weather: offline")))

        result = runner.invoke(weather_lights.cli, [])

        assert result.exit_code == 1
        assert "failed to fetch weather" in result.output

    def test_brightness_out_of_range(self, runner, weather):
        result = runner.invoke(weather_lights.cli, ["--brightness", "101"])

        assert result.exit_code == 1
        weather.assert_not_called()
