"""
MailBridge Faults — Structured, typed fault definitions.

A fault is a first-class exception value with a stable machine-readable
code, a human-readable message, a domain and a severity.  Only the
conditions the mail layer itself detects are expressed as faults; render
errors and transport errors raised by third-party libraries propagate
as the original exception objects.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional


# ============================================================================
# Severity & Domain
# ============================================================================

class Severity(str, Enum):
    """Fault severity levels."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"


class FaultDomain:
    """
    Fault domains (taxonomy).

    Identifies the functional area where a fault occurred.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.value = name
        self.description = description

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"FaultDomain(name='{self.name}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FaultDomain):
            return self.name == other.name
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(self.name)


FaultDomain.CONFIG = FaultDomain("config", "Configuration errors")
FaultDomain.MAIL = FaultDomain("mail", "Email sending, templating, and delivery faults")


# ============================================================================
# Fault - Base Class
# ============================================================================

class Fault(Exception):
    """
    Base fault class - structured, typed fault object.

    Attributes:
        code: Stable machine-readable identifier (e.g., "MAIL_UNKNOWN_DRIVER")
        message: Human-readable summary
        severity: Fault severity
        domain: Fault domain
        metadata: Additional context data
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        domain: FaultDomain,
        severity: Severity = Severity.ERROR,
        metadata: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.domain = domain
        self.severity = severity
        self.metadata = metadata or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, domain={self.domain.value}, "
            f"severity={self.severity.value})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "domain": self.domain.value,
            "severity": self.severity.value,
            "metadata": dict(self.metadata),
        }


# ── Mail faults ─────────────────────────────────────────────────────

class MailFault(Fault):
    """Base class for all mail faults."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "MAIL_ERROR",
        severity: Severity = Severity.ERROR,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.MAIL,
            severity=severity,
            metadata=details,
        )


class UnknownMailDriverFault(MailFault):
    """No adapter is registered under the requested driver name."""

    def __init__(self, driver: str, *, known: Iterable[str] = ()):
        self.driver = driver
        self.known = list(known)
        super().__init__(
            f"Unknown mail driver {driver!r} "
            f"(registered: {', '.join(self.known) or 'none'})",
            code="MAIL_UNKNOWN_DRIVER",
            details={"driver": driver, "known": self.known},
        )


class MailTemplateFault(MailFault):
    """A template body could not be handed to a renderer."""

    def __init__(
        self,
        message: str,
        *,
        template_name: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.template_name = template_name
        super().__init__(
            message,
            code="MAIL_TEMPLATE_ERROR",
            details={**(details or {}), "template_name": template_name},
        )


class MailSendFault(MailFault):
    """A provider answered a send request with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        provider: str = "unknown",
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.provider = provider
        self.status_code = status_code
        super().__init__(
            message,
            code="MAIL_SEND_FAILED",
            details={
                **(details or {}),
                "provider": provider,
                "status_code": status_code,
            },
        )


class MailConfigFault(MailFault):
    """Mail configuration error (unknown alias, bad import path, etc.)."""

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.config_key = config_key
        super().__init__(
            message,
            code="MAIL_CONFIG_ERROR",
            severity=Severity.FATAL,
            details={**(details or {}), "config_key": config_key},
        )
