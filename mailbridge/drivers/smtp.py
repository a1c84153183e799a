"""
SMTP Driver — async SMTP delivery via aiosmtplib.

Options:
    host        SMTP server hostname (default "localhost")
    port        SMTP port (default 587)
    secure      Connect with direct TLS, usually port 465 (default False)
    start_tls   Force (True) or disable (False) STARTTLS; None lets
                aiosmtplib upgrade when the server offers it
    username    Login user (auth is skipped when unset)
    password    Login password
    timeout     Seconds before the transport gives up (default 30)

Usage::

    driver = SMTPMailDriver({
        "host": "smtp.example.com",
        "port": 465,
        "secure": True,
        "username": "user@example.com",
        "password": "secret",
    })
    await driver.send(mail)
"""

from __future__ import annotations

import logging
import mimetypes
from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from typing import Any, List, Mapping, Optional

import aiosmtplib

from ..base import BaseMailAdapter
from ..mail import Mail

logger = logging.getLogger("mailbridge.drivers.smtp")


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class SMTPMailDriver(BaseMailAdapter):
    """
    Driver that delivers through an SMTP server.

    A connection is opened per send; transport errors (connection,
    authentication, recipient refusal) propagate unchanged.
    """

    provider_type: str = "smtp"

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)
        self.host: str = self.options.get("host", "localhost")
        self.port: int = int(self.options.get("port", 587))
        self.secure: bool = bool(self.options.get("secure", False))
        self.start_tls: Optional[bool] = self.options.get("start_tls")
        self.username: Optional[str] = self.options.get("username")
        self.password: Optional[str] = self.options.get("password")
        self.timeout: float = float(self.options.get("timeout", 30.0))

    # ── MIME Message Construction ───────────────────────────────────

    def build_message(self, mail: Mail, body: str) -> EmailMessage:
        """
        Build the MIME message for *mail* with an already resolved body.

        Rendered templates and mails with ``options["html"]`` set are sent
        as text/html; everything else as text/plain.
        """
        options = mail.get_options()

        msg = EmailMessage()
        msg["From"] = mail.get_from()
        msg["To"] = ", ".join(mail.recipients())
        cc = _as_list(options.get("cc"))
        if cc:
            msg["Cc"] = ", ".join(cc)
        if options.get("reply_to"):
            msg["Reply-To"] = options["reply_to"]
        msg["Subject"] = mail.get_subject()
        msg["Date"] = formatdate(localtime=True)
        msg["Message-ID"] = make_msgid(domain=self._extract_domain(mail.get_from()))

        for key, value in (options.get("headers") or {}).items():
            msg[key] = value

        if mail.is_template() or options.get("html"):
            msg.set_content(body, subtype="html")
        else:
            msg.set_content(body)

        for attachment in mail.get_attachments():
            content_type = attachment.content_type or (
                mimetypes.guess_type(attachment.name)[0]
                or "application/octet-stream"
            )
            maintype, _, subtype = content_type.partition("/")
            msg.add_attachment(
                attachment.content_bytes,
                maintype=maintype,
                subtype=subtype or "octet-stream",
                filename=attachment.name,
            )

        return msg

    @staticmethod
    def _extract_domain(email: str) -> str:
        """Extract domain from an email address."""
        if "<" in email:
            email = email.split("<")[1].rstrip(">")
        return email.rsplit("@", 1)[-1] if "@" in email else "localhost"

    def envelope_recipients(self, mail: Mail) -> List[str]:
        """All SMTP recipients: to + cc + bcc."""
        options = mail.get_options()
        return (
            mail.recipients()
            + _as_list(options.get("cc"))
            + _as_list(options.get("bcc"))
        )

    # ── Send ────────────────────────────────────────────────────────

    async def send(self, mail: Mail) -> None:
        body = await self.generate_body_string(mail)
        message = self.build_message(mail, body)
        recipients = self.envelope_recipients(mail)

        await aiosmtplib.send(
            message,
            sender=mail.get_from(),
            recipients=recipients,
            hostname=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            use_tls=self.secure,
            start_tls=False if self.secure else self.start_tls,
            timeout=self.timeout,
        )

        logger.debug(
            f"SMTP sent via {self.host}:{self.port} → {recipients} "
            f"(msg_id={message['Message-ID']})"
        )

    def __repr__(self) -> str:
        return (
            f"SMTPMailDriver(host={self.host!r}, port={self.port}, "
            f"secure={self.secure})"
        )
