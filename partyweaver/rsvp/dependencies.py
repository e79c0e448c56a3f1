from partyweaver.rsvp.repository.read_models import RSVPReadModel, SqlRSVPReadModel
from partyweaver.rsvp.repository.write_models import RSVPWriteModel, SqlRSVPWriteModel


def get_rsvp_read_model() -> RSVPReadModel:
    """Dependency to get RSVP read model instance."""
    return SqlRSVPReadModel()


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel()
