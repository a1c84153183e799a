"""
MailBridge Testing — in-memory driver and captured outbox.

Register ``MemoryMailDriver`` in a test configuration and assert on the
outbox instead of sending anything::

    config = MailConfig(
        default="memory",
        drivers=[MailConfig.define(name="memory", driver=MemoryMailDriver)],
    )
    ...
    assert get_outbox()[-1].subject == "Welcome"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .base import BaseMailAdapter
from .mail import Mail


@dataclass
class CapturedMail:
    """A mail captured by MemoryMailDriver, with its body resolved."""
    to: List[str]
    subject: str
    body: str = ""
    from_email: str = ""
    attachments: List[Dict[str, Any]] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)
    template_name: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"<CapturedMail to={self.to} "
            f"subject={self.subject!r}>"
        )


# Module-level outbox for capturing sent mail
_mail_outbox: List[CapturedMail] = []


def get_outbox() -> List[CapturedMail]:
    """Return the global mail outbox."""
    return _mail_outbox


def clear_outbox() -> None:
    """Clear the global mail outbox."""
    _mail_outbox.clear()


class MemoryMailDriver(BaseMailAdapter):
    """Driver that appends every mail to the module outbox."""

    provider_type: str = "memory"

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)

    async def send(self, mail: Mail) -> None:
        body = mail.get_body()
        _mail_outbox.append(
            CapturedMail(
                to=mail.recipients(),
                subject=mail.get_subject(),
                body=await self.generate_body_string(mail),
                from_email=mail.get_from(),
                attachments=[a.to_dict() for a in mail.get_attachments()],
                options=dict(mail.get_options()),
                template_name=getattr(body, "view", None),
            )
        )
