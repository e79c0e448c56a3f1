"""CLI commands for Party Weaver management."""

import asyncio
from datetime import datetime

import typer
from sqlalchemy import select

from partyweaver.config.database import async_session_manager
from partyweaver.email_service import get_email_service
from partyweaver.events.dtos import EventChangesDTO, EventDTO
from partyweaver.events.repository.read_models import SqlEventReadModel
from partyweaver.events.repository.write_models import SqlEventWriteModel
from partyweaver.invitations.dispatcher import InvitationDispatcher
from partyweaver.invitations.dtos import DispatchFailure, DispatchResult, InvitationRequest
from partyweaver.models.user import User
from partyweaver.sms_service import get_sms_service

app = typer.Typer(help="CLI commands for Party Weaver management")


async def _get_or_create_user(email: str) -> User:
    async with async_session_manager() as session:
        result = await session.execute(select(User).where(User.email == email.lower()))
        user = result.scalar_one_or_none()
        if user is None:
            user = User(email=email.lower(), is_active=True)
            session.add(user)
            await session.flush()
        return user


async def _create_event(
    host_email: str,
    changes: EventChangesDTO,
) -> EventDTO:
    host = await _get_or_create_user(host_email)
    write_model = SqlEventWriteModel()
    return await write_model.create_event(host_user_id=host.uuid, changes=changes)


@app.command()
def create_event(
    host_email: str = typer.Argument(
        ...,
        help="Email of the host; the user is created if it does not exist",
    ),
    title: str = typer.Option(
        ...,
        "--title",
        "-t",
        help="Event title",
    ),
    start_time: datetime = typer.Option(
        ...,
        "--start",
        "-s",
        help="Start time, e.g. 2025-06-01T18:00:00",
    ),
    location: str = typer.Option(
        None,
        "--location",
        "-l",
        help="Where the event takes place",
    ),
    description: str = typer.Option(
        None,
        "--description",
        "-d",
        help="Event description",
    ),
):
    """Create an event hosted by the given user."""
    changes = EventChangesDTO(
        title=title.strip(),
        start_time=start_time,
        description=description,
        location=location,
    )
    event = asyncio.run(_create_event(host_email, changes))

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Title: {event.title}", fg=typer.colors.BLUE)
    typer.secho(f"  Event ID: {event.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Host: {host_email}", fg=typer.colors.BLUE)


async def _send_invite(invite_token: str) -> DispatchResult:
    read_model = SqlEventReadModel()
    invite = await read_model.get_invite_by_token(invite_token)
    if invite is None:
        raise ValueError(f"Invite not found: {invite_token}")

    dispatcher = InvitationDispatcher(
        event_read_model=read_model,
        email_service=get_email_service(),
        sms_service=get_sms_service(),
    )
    return await dispatcher.dispatch(InvitationRequest.from_invite(invite))


@app.command()
def send_invite(
    invite_token: str = typer.Argument(
        ...,
        help="Invite token of the guest to send the invitation to",
    ),
):
    """Send (or resend) the invitation for an existing invite."""
    try:
        result = asyncio.run(_send_invite(invite_token))
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    if isinstance(result, DispatchFailure):
        typer.secho(f"Invitation not sent: {result.error}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(result.message, fg=typer.colors.GREEN)
    if result.email_sent:
        typer.secho("  Email sent", fg=typer.colors.BLUE)
    if result.sms_sent:
        typer.secho("  SMS sent", fg=typer.colors.BLUE)


if __name__ == "__main__":
    app()
