"""Transactional email sender over an HTTP API.

The provider receives a template ID and the dynamic data for the
template; rendering happens on the provider side. Payload:

    {
        "to": "user@example.com",
        "from": "no-reply@example.com",
        "template_id": "confirmation-email",
        "dynamic_data": {"name": "Jane", "link": "https://.../auth/confirm-email/<token>"}
    }
"""

from typing import Any, Optional

import httpx
import structlog

from core.config import settings
from domain.entities.user import User
from infrastructure.email.tokens import create_confirmation_token

logger = structlog.get_logger()


class HttpEmailSender:
    """Email sender backed by a transactional email HTTP API."""

    def __init__(
        self,
        api_url: str = settings.email_api_url,
        api_key: str = settings.email_api_key,
        sender: str = settings.email_from,
        client_url: str = settings.client_url,
        confirmation_template_id: str = settings.confirmation_template_id,
        timeout: float = settings.email_timeout_seconds,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_url = api_url
        self._api_key = api_key
        self._sender = sender
        self._client_url = client_url.rstrip("/")
        self._confirmation_template_id = confirmation_template_id
        self._timeout = timeout
        self._transport = transport

    def confirmation_link(self, token: str) -> str:
        """Build the web client link that confirms an email address."""
        return f"{self._client_url}/auth/confirm-email/{token}"

    async def send_confirmation_email(self, user: User) -> bool:
        """Send the confirmation email. Delivery failures are logged, not raised."""
        token = create_confirmation_token(user.id)
        return await self._send(
            to=user.email,
            template_id=self._confirmation_template_id,
            dynamic_data={
                "name": user.name,
                "link": self.confirmation_link(token),
            },
            user_id=str(user.id),
        )

    async def _send(
        self,
        to: str,
        template_id: str,
        dynamic_data: dict[str, Any],
        user_id: str,
    ) -> bool:
        if not self._api_url:
            logger.warning("confirmation_email_failed", user_id=user_id, reason="not_configured")
            return False

        payload = {
            "to": to,
            "from": self._sender,
            "template_id": template_id,
            "dynamic_data": dynamic_data,
        }

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    timeout=self._timeout,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(
                "confirmation_email_failed",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        logger.info("confirmation_email_sent", user_id=user_id)
        return True
