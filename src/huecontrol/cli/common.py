import click

from huecontrol.api.hue_api import HueApi
from huecontrol.config import load_config
from huecontrol.errors import HueError
from huecontrol.services.group_service import GroupService


class ReportErrorsMixin:
    """Show HueErrors as ``Error: <message>`` and exit 1 instead of a traceback."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except HueError as e:
            raise click.ClickException(str(e)) from e


class HueCommandGroup(ReportErrorsMixin, click.Group):
    pass


class HueCommand(ReportErrorsMixin, click.Command):
    pass


def build_service() -> GroupService:
    return GroupService(HueApi(load_config()))
