from partyweaver.events.repository.read_models import EventReadModel, SqlEventReadModel
from partyweaver.events.repository.write_models import (
    EventWriteModel,
    InviteWriteModel,
    SqlEventWriteModel,
    SqlInviteWriteModel,
)


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


def get_event_write_model() -> EventWriteModel:
    """Dependency to get event write model instance."""
    return SqlEventWriteModel()


def get_invite_write_model() -> InviteWriteModel:
    """Dependency to get invite write model instance."""
    return SqlInviteWriteModel()
