"""
MailBridge Drivers — built-in MailAdapter implementations.

Included drivers:
- Local (logger)             — mailbridge.drivers.local
- SMTP (aiosmtplib)          — mailbridge.drivers.smtp
- Resend HTTP API (httpx)    — mailbridge.drivers.resend
"""

from __future__ import annotations

from typing import Dict, Type

from .local import LocalMailDriver
from .resend import ResendMailDriver
from .smtp import SMTPMailDriver

# Aliases accepted in plain-data configuration
BUILTIN_DRIVERS: Dict[str, Type] = {
    "local": LocalMailDriver,
    "smtp": SMTPMailDriver,
    "resend": ResendMailDriver,
}

__all__ = [
    "BUILTIN_DRIVERS",
    "LocalMailDriver",
    "ResendMailDriver",
    "SMTPMailDriver",
]
