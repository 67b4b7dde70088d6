"""Philips Hue light controller.

\b
Examples:
  hue-control setup
  hue-control list
  hue-control set --brightness 50
  hue-control set --room "Living Room" --brightness 75
  hue-control set --color blue
  hue-control set --room "Bedroom" --color warm --brightness 60

\b
Credentials are read from HUE_BRIDGE_IP / HUE_API_KEY in the environment,
then from .env in the current directory, then from ~/.hue-config.json.
"""
import click

from huecontrol.cli import common
from huecontrol.commands.base import ALL_ROOMS, SetStateRequest
from huecontrol.config import BridgeConfig, save_config
from huecontrol.errors import ValidationError
from huecontrol.log import setup_logging
from huecontrol.pairing import HuePairingService
from huecontrol.presets import preset_names


@click.group(cls=common.HueCommandGroup, help=__doc__,
             context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log requests and fallbacks to stderr.")
def cli(verbose):
    setup_logging(verbose)


@cli.command()
def setup():
    """Pair with a bridge and save the API key to .env."""
    bridge_ip = click.prompt("Enter Hue Bridge IP address", default="", show_default=False).strip()
    if not bridge_ip:
        raise ValidationError("Bridge IP is required")

    click.prompt("\nPress the button on your Hue Bridge, then press Enter here",
                 default="", show_default=False, prompt_suffix="...")
    api_key = HuePairingService().create_user(bridge_ip)

    path = save_config(BridgeConfig(bridge_ip=bridge_ip, api_key=api_key))
    click.echo(f"\nSuccess! Configuration saved to {path}")
    click.echo("You can now use 'hue-control list' to see your rooms.")


@cli.command("list")
def list_groups():
    """List available rooms/groups."""
    groups = common.build_service().list_groups()
    click.echo("Available Rooms/Groups:")
    click.echo("------------------------")
    for group in groups:
        click.echo(f"  [{group.id}] {group.name} ({group.type}) - {len(group.lights)} lights - {group.status}")


@cli.command("set")
@click.option("--room", default=ALL_ROOMS, show_default=True, help="Room name to control.")
@click.option("--brightness", type=int, default=100, show_default=True, help="Brightness percentage (0-100).")
@click.option("--hue", "hue_value", type=int, default=None, help="Hue value (0-65535).")
@click.option("--sat", type=int, default=None, help="Saturation value (0-254).")
@click.option("--color", default=None, help=f"Color preset: {preset_names()}.")
def set_state(room, brightness, hue_value, sat, color):
    """Set brightness and color for a room or all lights."""
    request = SetStateRequest.build(room=room, brightness=brightness, hue=hue_value, sat=sat, color=color)
    common.build_service().set_state(request)
    click.echo(request.describe())


@cli.command()
def on():
    """Turn all lights on."""
    common.build_service().turn_on()
    click.echo("All lights turned on")


@cli.command()
def off():
    """Turn all lights off."""
    common.build_service().turn_off()
    click.echo("All lights turned off")


@cli.command("help")
@click.pass_context
def show_help(ctx):
    """Show this help message."""
    click.echo(ctx.parent.get_help())


def main():
    cli(prog_name="hue-control")


if __name__ == "__main__":
    main()
