"""
MailBridge BaseMailAdapter — shared body resolution for drivers.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .faults import MailTemplateFault
from .interfaces import ILoggerService, IViewRenderService
from .logger import LoggerService
from .mail import Mail, TemplateBody


class BaseMailAdapter:
    """
    Base for drivers that need a logger and template rendering.

    Dependencies are injected after construction with
    ``set_dependencies`` (MailService does this at boot).  Until then the
    adapter logs through a default LoggerService and has no renderer.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self.options: Dict[str, Any] = dict(options or {})
        self.logger: ILoggerService = LoggerService()
        self.view: Optional[IViewRenderService] = None

    def set_dependencies(
        self,
        *,
        logger: Optional[ILoggerService] = None,
        view: Optional[IViewRenderService] = None,
    ) -> None:
        if logger is not None:
            self.logger = logger
        if view is not None:
            self.view = view

    def get_options(self) -> Dict[str, Any]:
        return self.options

    async def generate_body_string(self, mail: Mail) -> str:
        """
        Return the mail body as a string.

        Literal bodies are returned unchanged; template bodies are
        rendered through the injected view renderer.  Render errors are
        not caught.
        """
        body = mail.get_body()

        if not isinstance(body, TemplateBody):
            return body

        if self.view is None:
            raise MailTemplateFault(
                f"Cannot render template {body.view!r}: no view renderer configured",
                template_name=body.view,
            )

        return await self.view.render(body.view, body.data or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
