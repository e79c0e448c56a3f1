"""create party weaver tables

Revision ID: 3f1c2a7b9d40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c2a7b9d40"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("last_sign_in_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "events",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=500), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("host_user_id", sa.UUID(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["host_user_id"], ["users.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_events_start_time"), "events", ["start_time"], unique=False)
    op.create_index(op.f("ix_events_host_user_id"), "events", ["host_user_id"], unique=False)

    op.create_table(
        "event_cohosts",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("event_id", "user_id", name="uq_event_cohost"),
    )
    op.create_index(op.f("ix_event_cohosts_event_id"), "event_cohosts", ["event_id"], unique=False)
    op.create_index(op.f("ix_event_cohosts_user_id"), "event_cohosts", ["user_id"], unique=False)

    op.create_table(
        "event_invites",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("guest_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=50), nullable=True),
        sa.Column("invite_token", sa.String(length=36), nullable=False),
        sa.Column(
            "rsvp_status",
            sa.Enum("pending", "attending", "maybe", "not_attending", name="rsvp_status_enum"),
            nullable=False,
        ),
        sa.Column("responded_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_event_invites_event_id"), "event_invites", ["event_id"], unique=False)
    op.create_index(
        op.f("ix_event_invites_invite_token"), "event_invites", ["invite_token"], unique=True
    )

    op.create_table(
        "sign_in_links",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("token", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("used_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_sign_in_links_email"), "sign_in_links", ["email"], unique=False)
    op.create_index(op.f("ix_sign_in_links_token"), "sign_in_links", ["token"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_sign_in_links_token"), table_name="sign_in_links")
    op.drop_index(op.f("ix_sign_in_links_email"), table_name="sign_in_links")
    op.drop_table("sign_in_links")
    op.drop_index(op.f("ix_event_invites_invite_token"), table_name="event_invites")
    op.drop_index(op.f("ix_event_invites_event_id"), table_name="event_invites")
    op.drop_table("event_invites")
    sa.Enum(name="rsvp_status_enum").drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f("ix_event_cohosts_user_id"), table_name="event_cohosts")
    op.drop_index(op.f("ix_event_cohosts_event_id"), table_name="event_cohosts")
    op.drop_table("event_cohosts")
    op.drop_index(op.f("ix_events_host_user_id"), table_name="events")
    op.drop_index(op.f("ix_events_start_time"), table_name="events")
    op.drop_table("events")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
