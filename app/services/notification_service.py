import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from app.config import settings
from app.models import User

# Configure logging
logger = logging.getLogger(__name__)


class Notifier(Protocol):
    async def send_activation(self, user: User, code: str) -> None: ...

    async def send_recovery(self, user: User, code: str) -> None: ...


def build_activation_message(user: User, code: str) -> Dict[str, Any]:
    link = f"{settings.frontend_url}/activate/{code}"
    return {
        "from": settings.mail_sender,
        "to": user.email,
        "subject": "Activate your account",
        "body": f"Hello {user.first_name}, confirm your email by opening {link}",
        "code": code,
    }


def build_recovery_message(user: User, code: str) -> Dict[str, Any]:
    link = f"{settings.frontend_url}/password-recovery/{code}"
    return {
        "from": settings.mail_sender,
        "to": user.email,
        "subject": "Password recovery",
        "body": f"Hello {user.first_name}, reset your password by opening {link}",
        "code": code,
    }


class HttpMailNotifier:
    """
    Delivers account emails through an HTTP mail relay.

    Delivery is fire-and-forget: failures are logged and never raised.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def send_activation(self, user: User, code: str) -> None:
        await self._send(build_activation_message(user, code))

    async def send_recovery(self, user: User, code: str) -> None:
        await self._send(build_recovery_message(user, code))

    async def _send(self, payload: Dict[str, Any]) -> None:
        logger.info(f"Sending '{payload['subject']}' email to {payload['to']}")
        try:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport) as client:
                response = await client.post("/send", json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to send '{payload['subject']}' email to {payload['to']}: {e}")


class LoggingNotifier:
    """Development notifier: writes the message to the log instead of sending it."""

    async def send_activation(self, user: User, code: str) -> None:
        logger.info(f"Activation email for {user.email}: {build_activation_message(user, code)['body']}")

    async def send_recovery(self, user: User, code: str) -> None:
        logger.info(f"Recovery email for {user.email}: {build_recovery_message(user, code)['body']}")


def get_notifier() -> Notifier:
    if settings.mail_service_url:
        return HttpMailNotifier(settings.mail_service_url)
    logger.info("No mail service configured - logging account emails instead")
    return LoggingNotifier()
