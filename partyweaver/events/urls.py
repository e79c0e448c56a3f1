EVENTS_URL = "/api/v1/events"
EVENT_URL = "/api/v1/events/{event_id}"
EVENT_COHOSTS_URL = "/api/v1/events/{event_id}/cohosts"
EVENT_COHOST_URL = "/api/v1/events/{event_id}/cohosts/{user_id}"
EVENT_INVITES_URL = "/api/v1/events/{event_id}/invites"
SEND_EVENT_INVITE_URL = "/api/v1/events/{event_id}/invites/{invite_id}/send"
