import html
from dataclasses import dataclass


@dataclass
class EmailTemplates:
    INVITATION_SUBJECT = "You're invited to {event_title}!"
    INVITATION_HTML = """
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h1 style="color: #333;">You're Invited!</h1>
        <h2 style="color: #6366f1;">{event_title}</h2>
        <p><strong>When:</strong> {event_date}</p>
        <p><strong>Where:</strong> {event_location}</p>
        <p>Hi {guest_name},</p>
        <p>You've been invited to join us for this special event. We'd love to have you there!</p>
        <div style="text-align: center; margin: 30px 0;">
            <a href="{rsvp_url}" style="background-color: #6366f1; color: white; padding: 12px 24px; text-decoration: none; border-radius: 8px; display: inline-block;">RSVP Now</a>
        </div>
        <p>Or copy and paste this link: {rsvp_url}</p>
        <p>Looking forward to celebrating with you!</p>
    </div>
    """

    INVITATION_TEXT = """
    Hi {guest_name},

    You've been invited to {event_title}!

    When: {event_date}
    Where: {event_location}

    RSVP here: {rsvp_url}

    Looking forward to celebrating with you!
    """

    SIGN_IN_SUBJECT = "Your Party Weaver sign-in link"
    SIGN_IN_HTML = """
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h1 style="color: #333;">Sign in to Party Weaver</h1>
        <p>Click the button below to sign in. The link can be used once.</p>
        <div style="text-align: center; margin: 30px 0;">
            <a href="{sign_in_url}" style="background-color: #6366f1; color: white; padding: 12px 24px; text-decoration: none; border-radius: 8px; display: inline-block;">Sign In</a>
        </div>
        <p>Or copy and paste this link: {sign_in_url}</p>
        <p>If you didn't request this email you can ignore it.</p>
    </div>
    """

    SIGN_IN_TEXT = """
    Sign in to Party Weaver by visiting:
    {sign_in_url}

    The link can be used once. If you didn't request this email you can ignore it.
    """

    @classmethod
    def render_invitation(
        cls,
        guest_name: str,
        event_title: str,
        event_date: str,
        event_location: str,
        rsvp_url: str,
    ) -> tuple[str, str, str]:
        """Return (subject, html_body, text_body) for an invitation."""
        values = {
            "guest_name": guest_name,
            "event_title": event_title,
            "event_date": event_date,
            "event_location": event_location,
            "rsvp_url": rsvp_url,
        }
        escaped = {key: html.escape(value) for key, value in values.items()}
        return (
            cls.INVITATION_SUBJECT.format(event_title=event_title),
            cls.INVITATION_HTML.format(**escaped),
            cls.INVITATION_TEXT.format(**values),
        )

    @classmethod
    def render_sign_in(cls, sign_in_url: str) -> tuple[str, str, str]:
        """Return (subject, html_body, text_body) for a sign-in link."""
        return (
            cls.SIGN_IN_SUBJECT,
            cls.SIGN_IN_HTML.format(sign_in_url=html.escape(sign_in_url)),
            cls.SIGN_IN_TEXT.format(sign_in_url=sign_in_url),
        )
