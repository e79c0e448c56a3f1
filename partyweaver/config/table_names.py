from enum import Enum


class TableNames(str, Enum):
    USERS = "users"
    EVENTS = "events"
    EVENT_COHOSTS = "event_cohosts"
    EVENT_INVITES = "event_invites"
    SIGN_IN_LINKS = "sign_in_links"
