"""Server-side authorization rules for events.

Host: the user who created the event. Sole authority over deletion and the
co-host set.
Co-host: a user granted read/edit access (and the right to invite guests)
without ownership rights.
"""

from enum import Enum
from uuid import UUID

from partyweaver.events.dtos import EventDTO, PermissionDeniedError


class EventAction(str, Enum):
    READ = "read"
    EDIT = "edit"
    INVITE = "invite"
    DELETE = "delete"
    MANAGE_COHOSTS = "manage_cohosts"


HOST_ONLY_ACTIONS = frozenset({EventAction.DELETE, EventAction.MANAGE_COHOSTS})

DENIED_MESSAGES = {
    EventAction.READ: "You don't have permission to view this event.",
    EventAction.EDIT: "You don't have permission to edit this event.",
    EventAction.INVITE: "You don't have permission to invite guests to this event.",
    EventAction.DELETE: "Only the event host can delete this event.",
    EventAction.MANAGE_COHOSTS: "Only the event host can manage co-hosts.",
}


class EventPolicy:
    @staticmethod
    def is_host(event: EventDTO, user_id: UUID) -> bool:
        return event.host_user_id == user_id

    @staticmethod
    def is_cohost(event: EventDTO, user_id: UUID) -> bool:
        return user_id in event.cohost_user_ids

    def allows(self, action: EventAction, event: EventDTO, user_id: UUID) -> bool:
        if self.is_host(event, user_id):
            return True
        if action in HOST_ONLY_ACTIONS:
            return False
        return self.is_cohost(event, user_id)

    def authorize(self, action: EventAction, event: EventDTO, user_id: UUID) -> None:
        """Raise PermissionDeniedError unless ``user_id`` may perform ``action``."""
        if not self.allows(action, event, user_id):
            raise PermissionDeniedError(DENIED_MESSAGES[action])


event_policy = EventPolicy()
