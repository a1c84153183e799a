"""
MailBridge — driver-based async mail sending.

A named registry of mail drivers plus a dispatch call that picks one and
forwards a Mail to it:

- Local driver (logs mail, for development)
- SMTP driver (aiosmtplib)
- Resend HTTP API driver (httpx)
- Template bodies rendered through an injected view renderer (Jinja2)

Quick Start:
    from mailbridge import Mail, MailConfig, MailService, LocalMailDriver

    config = MailConfig(
        default="local",
        drivers=[MailConfig.define(name="local", driver=LocalMailDriver)],
    )
    service = MailService(config, locales={"app_name": "Acme"})
    service.boot()

    await service.send(
        Mail(to="user@example.com", from_="noreply@acme.io",
             subject="Hello", body="Welcome!")
    )
"""

__version__ = "1.0.0"

# ── Core message types ──────────────────────────────────────────────
from .mail import Attachment, Mail, TemplateBody

# ── Config & service ───────────────────────────────────────────────
from .config import MailConfig, MailDriverConfig
from .registry import BaseAdapter
from .service import MailService

# ── Driver interface & implementations ──────────────────────────────
from .interfaces import (
    ILoggerService,
    IMailService,
    IViewRenderService,
    MailAdapter,
)
from .base import BaseMailAdapter
from .drivers import LocalMailDriver, ResendMailDriver, SMTPMailDriver

# ── Dependencies ────────────────────────────────────────────────────
from .logger import LoggerService
from .views import JinjaViewRenderer

# ── Faults ──────────────────────────────────────────────────────────
from .faults import (
    Fault,
    MailConfigFault,
    MailFault,
    MailSendFault,
    MailTemplateFault,
    UnknownMailDriverFault,
)

__all__ = [
    # Message types
    "Attachment",
    "Mail",
    "TemplateBody",
    # Config & service
    "MailConfig",
    "MailDriverConfig",
    "BaseAdapter",
    "MailService",
    # Interfaces
    "ILoggerService",
    "IMailService",
    "IViewRenderService",
    "MailAdapter",
    # Drivers
    "BaseMailAdapter",
    "LocalMailDriver",
    "ResendMailDriver",
    "SMTPMailDriver",
    # Dependencies
    "LoggerService",
    "JinjaViewRenderer",
    # Faults
    "Fault",
    "MailConfigFault",
    "MailFault",
    "MailSendFault",
    "MailTemplateFault",
    "UnknownMailDriverFault",
]
