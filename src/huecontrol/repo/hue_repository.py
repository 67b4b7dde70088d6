import pydantic

from huecontrol.api.hue_api import HueApi
from huecontrol.errors import ProtocolError, RoomNotFound
from huecontrol.models.group import Group


class HueRepository:
    """Read side of the bridge. Nothing is cached; every call hits the bridge."""

    def __init__(self, api: HueApi):
        self.api = api

    def list_groups(self) -> dict[str, Group]:
        raw = self.api.get_groups()
        try:
            return {gid: Group.model_validate({**data, "id": gid}) for gid, data in raw.items()}
        except (pydantic.ValidationError, TypeError) as e:
            raise ProtocolError(f"invalid group listing from bridge: {e}") from e

    def find_group_by_name(self, name: str) -> Group:
        needle = name.strip().lower()
        for group in self.list_groups().values():
            if group.name.lower() == needle:
                return group
        raise RoomNotFound(f"room '{name}' not found. Use 'hue-control list' to see available rooms")
