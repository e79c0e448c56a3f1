from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from partyweaver.config.table_names import TableNames
from partyweaver.events.dtos import RSVPStatus
from partyweaver.models.base import Base, TimeStamp
from partyweaver.models.user import User  # noqa: F401


def generate_invite_token() -> str:
    return str(uuid4())


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(500), nullable=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)

    host_user_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    cohosts: Mapped[list["EventCohost"]] = relationship(
        "EventCohost",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
    invites: Mapped[list["EventInvite"]] = relationship(
        "EventInvite",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def cohost_user_ids(self) -> list[UUID]:
        return [cohost.user_id for cohost in self.cohosts]

    def __repr__(self) -> str:
        return f"<Event {self.title} on {self.start_time}>"


class EventCohost(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_COHOSTS.value
    __table_args__ = (UniqueConstraint("event_id", "user_id", name="uq_event_cohost"),)

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event: Mapped["Event"] = relationship("Event", back_populates="cohosts")

    def __repr__(self) -> str:
        return f"<EventCohost {self.user_id} for event {self.event_id}>"


class EventInvite(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_INVITES.value

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event: Mapped["Event"] = relationship("Event", back_populates="invites")

    guest_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)

    invite_token: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, index=True, default=generate_invite_token
    )
    rsvp_status: Mapped[str] = mapped_column(
        Enum(RSVPStatus, name="rsvp_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=RSVPStatus.PENDING,
        nullable=False,
    )
    responded_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    def __repr__(self) -> str:
        return f"<EventInvite {self.guest_name} - {self.rsvp_status}>"
