"""Outbound email transport interface."""

from abc import ABC, abstractmethod


class EmailProvider(ABC):
    """Delivers one rendered message per call."""

    @abstractmethod
    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
    ) -> bool:
        """Deliver a message with HTML and plain-text alternatives.

        Returns True once the transport accepted the message. Transport
        failures are raised, not reported through the return value.
        """
