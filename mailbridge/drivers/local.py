"""
Local Driver — logs emails instead of sending them (development).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..base import BaseMailAdapter
from ..mail import Mail


class LocalMailDriver(BaseMailAdapter):
    """
    Driver that writes each mail to the injected logger.

    Options are ignored.  Sending always succeeds unless the body is a
    template and rendering fails.
    """

    provider_type: str = "local"

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__()

    def get_options(self) -> Dict[str, Any]:
        return {}

    async def send(self, mail: Mail) -> None:
        self.logger.info(
            "Email",
            {
                "to": mail.get_to(),
                "from": mail.get_from(),
                "subject": mail.get_subject(),
                "body": await self.generate_body_string(mail),
                "attachments": [a.to_dict() for a in mail.get_attachments()],
            },
        )
