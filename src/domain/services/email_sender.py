"""Email sender protocol."""

from typing import Protocol

from domain.entities.user import User


class IEmailSender(Protocol):
    """Protocol for outbound account emails."""

    async def send_confirmation_email(self, user: User) -> bool:
        """
        Send the email address confirmation message to a user.

        Args:
            user: The newly registered user

        Returns:
            True if the message was handed to the provider, False otherwise
        """
        ...
