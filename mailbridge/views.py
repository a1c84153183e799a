"""
MailBridge Views — async Jinja2 renderer for template mail bodies.

Usage:
    view = JinjaViewRenderer(["/path/to/mail_templates"])
    html = await view.render("welcome.html", {"user": {"name": "Asha"}})
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape


class JinjaViewRenderer:
    """
    View renderer backed by an async Jinja2 environment.

    Args:
        search_paths: Template directories, searched in order
        autoescape: Enable HTML autoescaping for .html/.htm/.xml templates
        globals: Extra globals available to every template
        filters: Extra filters
    """

    def __init__(
        self,
        search_paths: Sequence[Union[str, Path]],
        *,
        autoescape: bool = True,
        globals: Optional[Dict[str, Any]] = None,
        filters: Optional[Dict[str, Any]] = None,
    ):
        self.search_paths: List[Path] = [Path(p) for p in search_paths]
        self.env = Environment(
            loader=FileSystemLoader([str(p) for p in self.search_paths]),
            autoescape=select_autoescape(
                enabled_extensions=["html", "htm", "xml"],
                default_for_string=True,
            ) if autoescape else False,
            enable_async=True,
        )
        if globals:
            self.env.globals.update(globals)
        if filters:
            self.env.filters.update(filters)

    async def render(self, view: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render *view* with *data*.

        Raises:
            TemplateNotFound: If the view doesn't exist
            TemplateSyntaxError: If the view has syntax errors
        """
        template = self.env.get_template(view)
        return await template.render_async(**dict(data or {}))

    def __repr__(self) -> str:
        return f"JinjaViewRenderer(search_paths={[str(p) for p in self.search_paths]!r})"
