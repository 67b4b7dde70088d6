import click

from huecontrol.cli import common
from huecontrol.commands.base import ALL_ROOMS
from huecontrol.errors import ValidationError
from huecontrol.log import setup_logging
from huecontrol.weather.advisor import advise
from huecontrol.weather.client import WeatherClient
from huecontrol.weather.delegate import apply_advice, run_hue_control


@click.command(cls=common.HueCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--location", default="", help="Location for weather (default: auto-detect).")
@click.option("--room", default=ALL_ROOMS, show_default=True, help="Room to control.")
@click.option("--brightness", type=int, default=80, show_default=True, help="Brightness percentage (0-100).")
@click.option("--dry-run", is_flag=True, help="Show what would be done without executing.")
@click.option("--use-binary", is_flag=True, help="Apply through the hue-control executable.")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
def cli(location, room, brightness, dry_run, use_binary, verbose):
    """Set Hue lights to a color that matches the current weather."""
    setup_logging(verbose)
    if not 0 <= brightness <= 100:
        raise ValidationError("Brightness must be between 0 and 100")

    weather = WeatherClient().fetch(location)
    advice = advise(weather, brightness)
    for line in advice.report():
        click.echo(line)

    if dry_run:
        click.echo("\n[Dry run - no changes made]")
        return

    if use_binary:
        run_hue_control(advice, room)
    else:
        click.echo(apply_advice(advice, room, common.build_service))


def main():
    cli(prog_name="weather-lights")


if __name__ == "__main__":
    main()
