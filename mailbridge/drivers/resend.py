"""
Resend Driver — HTTP delivery through the Resend email API via httpx.

Options:
    api_key     Resend API key (required)
    endpoint    Send endpoint (default https://api.resend.com/emails)
    timeout     Request timeout in seconds (default 30)

Usage::

    driver = ResendMailDriver({"api_key": "re_xxx"})
    await driver.send(mail)
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ..base import BaseMailAdapter
from ..faults import MailConfigFault, MailSendFault
from ..mail import Mail

logger = logging.getLogger("mailbridge.drivers.resend")

_RESEND_ENDPOINT = "https://api.resend.com/emails"


class ResendMailDriver(BaseMailAdapter):
    """
    Driver that posts each mail to the Resend API.

    One POST per send.  A non-2xx answer becomes a MailSendFault carrying
    the status; network errors from httpx propagate unchanged.
    """

    provider_type: str = "resend"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(options)
        self.api_key: str = self.options.get("api_key", "")
        self.endpoint: str = self.options.get("endpoint") or _RESEND_ENDPOINT
        self.timeout: float = float(self.options.get("timeout", 30.0))
        self._transport = transport

        if not self.api_key:
            raise MailConfigFault(
                "Resend driver requires an 'api_key' option",
                config_key="api_key",
            )

    # ── Payload Construction ────────────────────────────────────────

    def build_payload(self, mail: Mail, body: str) -> Dict[str, Any]:
        """Build the Resend JSON payload from a mail and its resolved body."""
        options = mail.get_options()

        payload: Dict[str, Any] = {
            "from": mail.get_from(),
            "to": mail.recipients(),
            "subject": mail.get_subject(),
        }

        if mail.is_template() or options.get("html"):
            payload["html"] = body
        else:
            payload["text"] = body

        for key in ("cc", "bcc", "reply_to", "headers", "tags"):
            if options.get(key):
                payload[key] = options[key]

        if mail.get_attachments():
            payload["attachments"] = [
                {
                    "filename": att.name,
                    "content": base64.b64encode(att.content_bytes).decode("ascii"),
                    **({"content_type": att.content_type} if att.content_type else {}),
                }
                for att in mail.get_attachments()
            ]

        return payload

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    # ── Send ────────────────────────────────────────────────────────

    async def send(self, mail: Mail) -> None:
        body = await self.generate_body_string(mail)
        payload = self.build_payload(mail, body)

        async with self._create_client() as client:
            response = await client.post(
                self.endpoint,
                json=payload,
                headers=self._headers(),
            )

        if not response.is_success:
            reason = response.reason_phrase or "Unknown error"
            raise MailSendFault(
                f"Resend responded with HTTP {response.status_code}: {reason}",
                provider="resend",
                status_code=response.status_code,
                details={"response": response.text},
            )

        logger.debug(
            f"Resend accepted mail to {payload['to']} "
            f"(HTTP {response.status_code})"
        )

    def __repr__(self) -> str:
        return f"ResendMailDriver(endpoint={self.endpoint!r})"
