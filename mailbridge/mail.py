"""
MailBridge Mail — the message object handed to a driver.

A Mail is a plain mutable holder.  Nothing is validated here: empty
recipients or malformed template descriptors are accepted and fail
later, at the transport or render stage.

Usage:
    mail = Mail(
        to="user@example.com",
        from_="noreply@example.com",
        subject="Welcome",
        body={"view": "welcome.html", "data": {"name": "Asha"}},
    )
    mail.attach("report.pdf", pdf_bytes, "application/pdf")
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union


@dataclass
class TemplateBody:
    """A body that must be rendered through a view renderer."""

    view: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"view": self.view, "data": dict(self.data)}


@dataclass
class Attachment:
    """A named blob carried alongside the mail."""

    name: str
    content: Union[bytes, str]
    content_type: Optional[str] = None

    @property
    def content_bytes(self) -> bytes:
        if isinstance(self.content, bytes):
            return self.content
        return self.content.encode("utf-8")

    def to_dict(self) -> dict:
        if isinstance(self.content, bytes):
            content = base64.b64encode(self.content).decode("ascii")
        else:
            content = self.content
        return {
            "name": self.name,
            "content": content,
            "content_type": self.content_type,
        }


Recipient = Union[str, Sequence[str]]
Body = Union[str, TemplateBody]


def _coerce_body(body: Any) -> Any:
    """Normalise ``{"view": ..., "data": ...}`` mappings into TemplateBody."""
    if isinstance(body, Mapping) and "view" in body:
        data = body.get("data")
        return TemplateBody(view=body["view"], data=dict(data) if data else {})
    return body


def _coerce_attachment(item: Any) -> Attachment:
    if isinstance(item, Attachment):
        return item
    if isinstance(item, Mapping):
        return Attachment(
            name=item.get("name") or item.get("filename", ""),
            content=item.get("content", b""),
            content_type=item.get("content_type") or item.get("contentType"),
        )
    if isinstance(item, (tuple, list)):
        return Attachment(*item)
    raise TypeError(
        f"Unsupported attachment {type(item).__name__!r}: expected Attachment, "
        "mapping or (name, content[, content_type]) tuple"
    )


class Mail:
    """
    A single outgoing mail.

    Attributes are plain and mutable; the ``get_*`` / ``set_*`` accessors
    exist for callers that prefer an explicit API and for drivers that
    want one place to read each field.
    """

    def __init__(
        self,
        to: Recipient = "",
        from_: str = "",
        subject: str = "",
        body: Any = "",
        attachments: Optional[Sequence[Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ):
        self.to = to
        self.from_ = from_
        self.subject = subject
        self.body = body
        self.attachments: List[Attachment] = [
            _coerce_attachment(a) for a in (attachments or [])
        ]
        self.options: Dict[str, Any] = dict(options or {})

    @property
    def body(self) -> Body:
        return self._body

    @body.setter
    def body(self, value: Any) -> None:
        self._body = _coerce_body(value)

    # ── Accessors ───────────────────────────────────────────────────

    def get_to(self) -> Recipient:
        return self.to

    def set_to(self, to: Recipient) -> None:
        self.to = to

    def get_from(self) -> str:
        return self.from_

    def set_from(self, from_: str) -> None:
        self.from_ = from_

    def get_subject(self) -> str:
        return self.subject

    def set_subject(self, subject: str) -> None:
        self.subject = subject

    def get_body(self) -> Body:
        return self.body

    def set_body(self, body: Any) -> None:
        self.body = body

    def get_attachments(self) -> List[Attachment]:
        return self.attachments

    def set_attachments(self, attachments: Sequence[Any]) -> None:
        self.attachments = [_coerce_attachment(a) for a in attachments]

    def get_options(self) -> Dict[str, Any]:
        return self.options

    def set_options(self, options: Mapping[str, Any]) -> None:
        self.options = dict(options)

    # ── Helpers ─────────────────────────────────────────────────────

    def attach(
        self,
        name: str,
        content: Union[bytes, str],
        content_type: Optional[str] = None,
    ) -> "Mail":
        """Append an attachment."""
        self.attachments.append(Attachment(name, content, content_type))
        return self

    def is_template(self) -> bool:
        return isinstance(self.body, TemplateBody)

    def recipients(self) -> List[str]:
        """Return the recipient(s) as a list."""
        if not self.to:
            return []
        if isinstance(self.to, str):
            return [self.to]
        return list(self.to)

    def to_dict(self) -> dict:
        body = self.body
        return {
            "to": self.to if isinstance(self.to, str) else list(self.to),
            "from": self.from_,
            "subject": self.subject,
            "body": body.to_dict() if isinstance(body, TemplateBody) else body,
            "attachments": [a.to_dict() for a in self.attachments],
            "options": dict(self.options),
        }

    def __repr__(self) -> str:
        return f"<Mail to={self.to!r} subject={self.subject!r}>"
