import logging

from huecontrol.api.hue_api import HueApi
from huecontrol.commands.base import GroupActionCommand, SetStateRequest
from huecontrol.errors import BridgeError, BridgeUnreachable, HueError, ProtocolError
from huecontrol.models.group import ALL_LIGHTS_GROUP_ID, Group
from huecontrol.repo.hue_repository import HueRepository

log = logging.getLogger(__name__)


class GroupService:
    def __init__(self, api: HueApi, repository: HueRepository | None = None):
        self.api = api
        self.repository = repository or HueRepository(api)

    def list_groups(self) -> list[Group]:
        return sorted(self.repository.list_groups().values(), key=Group.sort_key)

    def set_state(self, request: SetStateRequest) -> GroupActionCommand:
        command = request.to_command()
        if request.targets_all:
            self._set_all(command)
        else:
            group = self.repository.find_group_by_name(request.room)
            self.api.put_group_action(group.id, command.payload())
        return command

    def turn_on(self) -> GroupActionCommand:
        return self.set_state(SetStateRequest(brightness=100))

    def turn_off(self) -> GroupActionCommand:
        return self.set_state(SetStateRequest(brightness=0))

    def _set_all(self, command: GroupActionCommand) -> None:
        payload = command.payload()
        try:
            self.api.put_group_action(ALL_LIGHTS_GROUP_ID, payload)
            return
        except (BridgeUnreachable, BridgeError, ProtocolError) as e:
            log.warning("Writing group %s failed (%s), setting each group instead", ALL_LIGHTS_GROUP_ID, e)

        # Best effort: one bad group must not stop the others.
        for group_id in self.repository.list_groups():
            try:
                self.api.put_group_action(group_id, payload)
            except HueError as e:
                log.debug("Skipping group %s: %s", group_id, e)
