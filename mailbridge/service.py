"""
MailBridge Service — selects a named driver and forwards mail to it.

MailService owns the driver registry.  ``boot()`` constructs every
configured driver once; ``send()`` enriches template bodies with locale
data, resolves the requested (or default) driver and awaits it.  Failures
are logged once and re-raised; nothing is retried.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from .config import MailConfig
from .interfaces import ILoggerService, IViewRenderService, MailAdapter
from .logger import LoggerService
from .mail import Mail, TemplateBody
from .registry import BaseAdapter

logger = logging.getLogger("mailbridge.service")


class MailService(BaseAdapter[MailAdapter]):
    """
    Central mail service.

    Args:
        config: Default driver name and driver registration entries
        locales: Process-wide locale data merged into template bodies
        logger: Logger capability (defaults to a stdlib-backed LoggerService)
        view: View renderer handed to drivers for template bodies

    Usage:
        service = MailService(config, locales={"app_name": "Acme"})
        service.boot()
        await service.send(Mail(to="a@b.com", subject="Hi", body="Hello"))
    """

    def __init__(
        self,
        config: MailConfig,
        locales: Optional[Mapping[str, Any]] = None,
        *,
        logger: Optional[ILoggerService] = None,
        view: Optional[IViewRenderService] = None,
    ):
        super().__init__()
        self.config = config
        self.locales: Mapping[str, Any] = dict(locales or {})
        self.logger: ILoggerService = logger or LoggerService()
        self.view = view
        self._booted = False

    # ── Lifecycle ───────────────────────────────────────────────────

    def boot(self) -> None:
        """Construct and register every configured driver (once per name)."""
        for entry in self.config.drivers:
            if self.has_adapter(entry.name):
                logger.debug(f"Mail driver {entry.name!r} already registered, skipping")
                continue
            adapter = entry.driver(entry.options)
            if hasattr(adapter, "set_dependencies"):
                adapter.set_dependencies(logger=self.logger, view=self.view)
            self.add_adapter_once(entry.name, adapter)
            logger.debug(f"Mail driver {entry.name!r} registered ({type(adapter).__name__})")
        self._booted = True

    @property
    def booted(self) -> bool:
        return self._booted

    # ── Send ────────────────────────────────────────────────────────

    async def send(self, mail: Mail, driver: Optional[str] = None) -> None:
        """
        Send *mail* through *driver* (the configured default when None).

        Raises:
            UnknownMailDriverFault: If no driver is registered under the name
            Exception: Whatever the driver raises, unchanged
        """
        try:
            mail = self._add_locales_data(mail)
            adapter = self.get_adapter(self.config.default if driver is None else driver)
            await adapter.send(mail)
        except Exception as e:
            self.logger.error(e)
            raise

    def _add_locales_data(self, mail: Mail) -> Mail:
        """
        Merge locale data and the current date into a template body.

        Template data is copied; the ``locales`` key is reserved and
        replaced on every send.
        """
        body = mail.get_body()

        if isinstance(body, TemplateBody):
            locales: Dict[str, Any] = {
                **self.locales,
                "date": datetime.now(timezone.utc),
            }
            mail.set_body(
                TemplateBody(
                    view=body.view,
                    data={**(body.data or {}), "locales": locales},
                )
            )

        return mail

    # ── Lookup ──────────────────────────────────────────────────────

    def get_default_driver(self) -> MailAdapter:
        return self.get_adapter(self.config.default)

    def get_driver(self, name: str) -> MailAdapter:
        return self.get_adapter(name)

    def driver_names(self) -> List[str]:
        return self.adapter_names()

    def __repr__(self) -> str:
        return (
            f"MailService(default={self.config.default!r}, "
            f"drivers={self.driver_names()!r}, booted={self._booted})"
        )
