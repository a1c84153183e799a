"""
MailBridge Registry — named adapter registry.

BaseAdapter is the keyed store MailService builds on: adapters are
added once under a unique name and looked up by that name afterwards.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Generic, List, Mapping, TypeVar

from .faults import UnknownMailDriverFault

logger = logging.getLogger("mailbridge.registry")

T = TypeVar("T")


class BaseAdapter(Generic[T]):
    """
    Registry of named adapters.

    The first adapter registered under a name wins; later registrations
    under the same name are ignored.
    """

    def __init__(self) -> None:
        self._adapters: Dict[str, T] = {}

    def add_adapter_once(self, name: str, adapter: T) -> bool:
        """
        Register *adapter* under *name* unless the name is taken.

        Returns:
            True if the adapter was registered, False if it was ignored.
        """
        if name in self._adapters:
            logger.debug(f"Adapter {name!r} already registered, ignoring")
            return False
        self._adapters[name] = adapter
        return True

    def get_adapter(self, name: str) -> T:
        try:
            return self._adapters[name]
        except KeyError:
            raise UnknownMailDriverFault(name, known=self._adapters) from None

    def has_adapter(self, name: str) -> bool:
        return name in self._adapters

    def adapter_names(self) -> List[str]:
        return list(self._adapters)

    @property
    def adapters(self) -> Mapping[str, T]:
        """Read-only view of registered adapters."""
        return MappingProxyType(self._adapters)
