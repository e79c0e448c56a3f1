from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo


def build_rsvp_url(public_site_url: str, invite_token: str) -> str:
    return f"{public_site_url.rstrip('/')}/rsvp/{invite_token}"


def _zone(name: str) -> tzinfo:
    return UTC if name.upper() == "UTC" else ZoneInfo(name)


def format_event_date(start_time: datetime, timezone: str = "UTC") -> str:
    """Render a start time the way invitations show it.

    >>> format_event_date(datetime(2025, 6, 1, 18, 0, tzinfo=UTC))
    'Sunday, June 1, 2025 at 6:00 PM'
    """
    if start_time.tzinfo is None:
        start_time = start_time.replace(tzinfo=UTC)
    local = start_time.astimezone(_zone(timezone))
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local:%A}, {local:%B} {local.day}, {local.year} at {hour}:{local:%M} {meridiem}"


def format_sms_message(guest_name: str, event_title: str, event_date: str, rsvp_url: str) -> str:
    return f"Hi {guest_name}! You're invited to {event_title} on {event_date}. RSVP here: {rsvp_url}"
