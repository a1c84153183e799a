"""
MailBridge Logger — adapts a stdlib logger to the injected logger
capability (``info(message, context)`` / ``error(error)``).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional


class LoggerService:
    """
    Logger handed to MailService and drivers.

    ``info`` attaches the context both as ``extra={"context": ...}`` for
    structured handlers and as a JSON suffix on the message for plain ones.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("mailbridge")

    def info(self, message: str, context: Any = None) -> None:
        if context is None:
            self.logger.info(message)
            return
        if isinstance(context, str):
            rendered = context
        else:
            rendered = json.dumps(context, default=str)
        self.logger.info(f"{message} {rendered}", extra={"context": context})

    def error(self, error: Any) -> None:
        if isinstance(error, BaseException):
            self.logger.error(
                f"{type(error).__name__}: {error}",
                exc_info=(type(error), error, error.__traceback__),
            )
        else:
            self.logger.error(str(error))

    def __repr__(self) -> str:
        return f"LoggerService(logger={self.logger.name!r})"
