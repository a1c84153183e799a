"""
MailBridge Configuration — driver registration entries and the default
driver name.

Declarative style::

    config = MailConfig(
        default="local",
        drivers=MailConfig.driver_list(
            MailConfig.define(name="local", driver=LocalMailDriver),
            MailConfig.define(
                name="smtp",
                driver=SMTPMailDriver,
                options={"host": "smtp.example.com", "port": 587},
            ),
        ),
    )

Plain data (config files) and environment variables are also accepted
via ``MailConfig.from_dict`` and ``MailConfig.from_env``.
"""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv

from .faults import MailConfigFault


@dataclass
class MailDriverConfig:
    """A single driver registration entry."""

    name: str
    driver: Any
    options: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        driver = self.driver
        return {
            "name": self.name,
            "driver": f"{driver.__module__}:{driver.__qualname__}"
            if isinstance(driver, type) else repr(driver),
            "options": dict(self.options),
        }


def _resolve_driver(ref: Any, key: str) -> Any:
    """Resolve a driver class from a class, a built-in alias or 'module:Class'."""
    if not isinstance(ref, str):
        return ref

    from .drivers import BUILTIN_DRIVERS

    if ref in BUILTIN_DRIVERS:
        return BUILTIN_DRIVERS[ref]

    module_path, sep, attr = ref.partition(":")
    if not sep:
        module_path, _, attr = ref.rpartition(".")
    if not module_path or not attr:
        raise MailConfigFault(
            f"Unknown mail driver {ref!r} "
            f"(built-in: {', '.join(BUILTIN_DRIVERS)})",
            config_key=key,
        )
    try:
        module = importlib.import_module(module_path)
        return getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise MailConfigFault(
            f"Cannot import mail driver {ref!r}: {e}",
            config_key=key,
        ) from e


def _env_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class MailConfig:
    """Default driver name plus ordered driver registration entries."""

    default: str = "local"
    drivers: List[MailDriverConfig] = field(default_factory=list)

    # ── Declarative helpers ─────────────────────────────────────────

    @staticmethod
    def define(
        name: str,
        driver: Any,
        options: Optional[Mapping[str, Any]] = None,
    ) -> MailDriverConfig:
        return MailDriverConfig(name=name, driver=driver, options=dict(options or {}))

    @staticmethod
    def driver_list(*entries: Union[MailDriverConfig, List[MailDriverConfig]]) -> List[MailDriverConfig]:
        if len(entries) == 1 and isinstance(entries[0], list):
            return list(entries[0])
        return list(entries)

    # ── Factories ───────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MailConfig":
        """
        Build a config from plain data.

        ``driver`` may be a class, a built-in alias ("local", "smtp",
        "resend") or an import path ("package.module:ClassName").
        """
        entries: List[MailDriverConfig] = []
        for i, item in enumerate(data.get("drivers", [])):
            if isinstance(item, MailDriverConfig):
                entries.append(item)
                continue
            name = item.get("name")
            if not name:
                raise MailConfigFault(
                    "Driver entry is missing a name",
                    config_key=f"drivers[{i}].name",
                )
            entries.append(
                MailDriverConfig(
                    name=name,
                    driver=_resolve_driver(
                        item.get("driver", name), f"drivers[{i}].driver"
                    ),
                    options=dict(item.get("options") or {}),
                )
            )
        return cls(default=data.get("default", "local"), drivers=entries)

    @classmethod
    def from_env(
        cls,
        prefix: str = "MAIL_",
        dotenv_path: Optional[str] = None,
    ) -> "MailConfig":
        """
        Build a config from environment variables (after loading ``.env``).

        ``local`` is always registered; ``smtp`` when ``<prefix>SMTP_HOST``
        is set and ``resend`` when ``<prefix>RESEND_API_KEY`` is set.
        """
        path = dotenv_path or find_dotenv(usecwd=True)
        if path:
            load_dotenv(path)

        def env(key: str, default: Optional[str] = None) -> Optional[str]:
            return os.environ.get(f"{prefix}{key}", default)

        from .drivers import LocalMailDriver, ResendMailDriver, SMTPMailDriver

        entries = [cls.define(name="local", driver=LocalMailDriver)]

        if env("SMTP_HOST"):
            smtp_options: Dict[str, Any] = {
                "host": env("SMTP_HOST"),
                "port": int(env("SMTP_PORT", "587")),
                "secure": _env_bool(env("SMTP_SECURE")),
            }
            if env("SMTP_USERNAME"):
                smtp_options["username"] = env("SMTP_USERNAME")
                smtp_options["password"] = env("SMTP_PASSWORD", "")
            entries.append(cls.define(name="smtp", driver=SMTPMailDriver, options=smtp_options))

        if env("RESEND_API_KEY"):
            resend_options: Dict[str, Any] = {"api_key": env("RESEND_API_KEY")}
            if env("RESEND_ENDPOINT"):
                resend_options["endpoint"] = env("RESEND_ENDPOINT")
            entries.append(cls.define(name="resend", driver=ResendMailDriver, options=resend_options))

        return cls(default=env("DRIVER", "local"), drivers=entries)

    # ── Introspection ───────────────────────────────────────────────

    def driver_names(self) -> List[str]:
        return [entry.name for entry in self.drivers]

    def duplicate_names(self) -> List[str]:
        seen: set = set()
        dupes: List[str] = []
        for name in self.driver_names():
            if name in seen and name not in dupes:
                dupes.append(name)
            seen.add(name)
        return dupes

    def validate(self) -> "MailConfig":
        """Raise MailConfigFault if the default driver has no entry or names collide."""
        if self.default not in self.driver_names():
            raise MailConfigFault(
                f"Default mail driver {self.default!r} is not configured "
                f"(configured: {', '.join(self.driver_names()) or 'none'})",
                config_key="default",
            )
        dupes = self.duplicate_names()
        if dupes:
            raise MailConfigFault(
                f"Mail driver names defined more than once: {', '.join(dupes)}",
                config_key="drivers",
                details={"duplicates": dupes},
            )
        return self

    def to_dict(self) -> dict:
        return {
            "default": self.default,
            "drivers": [entry.to_dict() for entry in self.drivers],
        }
