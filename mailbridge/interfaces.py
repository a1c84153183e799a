"""
MailBridge Interfaces — Protocols for drivers, the service and the
dependencies they are handed.

All delivery drivers implement MailAdapter.  MailService selects a driver
by name and awaits ``send(mail)``.
"""

from __future__ import annotations

from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Type,
    TypeVar,
    runtime_checkable,
)

from .mail import Mail

T = TypeVar("T")


@runtime_checkable
class MailAdapter(Protocol):
    """
    Interface that all mail drivers must implement.

    Drivers are registered in MailConfig.drivers and resolved by
    MailService at send-time.
    """

    async def send(self, mail: Mail) -> None:
        """
        Resolve the body and hand the mail to the driver's transport.

        Raises whatever the transport raises; drivers never retry.
        """
        ...

    def get_options(self) -> Dict[str, Any]:
        """Return the options the driver was constructed with."""
        ...


MailAdapterFactory = Type[MailAdapter]


@runtime_checkable
class ILoggerService(Protocol):
    """Logger capability handed to the service and drivers."""

    def info(self, message: str, context: Any = None) -> None: ...

    def error(self, error: Any) -> None: ...


@runtime_checkable
class IViewRenderService(Protocol):
    """Renders a named view with data into a string."""

    async def render(self, view: str, data: Optional[Mapping[str, Any]] = None) -> str: ...


@runtime_checkable
class IMailService(Protocol):
    def boot(self) -> None: ...

    async def send(self, mail: Mail, driver: Optional[str] = None) -> None: ...

    def get_default_driver(self) -> MailAdapter: ...

    def get_driver(self, name: str) -> MailAdapter: ...

    def driver_names(self) -> List[str]: ...
