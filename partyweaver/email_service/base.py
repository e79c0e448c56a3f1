from abc import ABC, abstractmethod


class EmailDeliveryError(Exception):
    """Raised when the email provider rejects or cannot accept a message."""


class EmailServiceBase(ABC):
    @abstractmethod
    async def send_invitation(
        self,
        to_address: str,
        guest_name: str,
        event_title: str,
        event_date: str,
        event_location: str,
        rsvp_url: str,
    ) -> None:
        pass

    @abstractmethod
    async def send_sign_in_link(
        self,
        to_address: str,
        sign_in_url: str,
    ) -> None:
        pass
