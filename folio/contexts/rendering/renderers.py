"""
Template Renderers

One renderer class serves all four layouts: the shared policy lives in
page_structure.project_page(), and each layout contributes only its
layout.yaml and page.html.jinja.
"""

from typing import Any

from folio.contexts.drafting.normalizer import normalize_draft
from folio.contexts.rendering.logger import _log_debug
from folio.contexts.rendering.page_structure import Page, project_page
from folio.contexts.rendering.registries import LayoutConfig, LayoutConfigRegistry, TemplateRegistry


class TemplateRenderer:
    """Renders drafts with one layout."""

    def __init__(
        self,
        layout_id: str,
        template_registry: TemplateRegistry = None,
        layout_registry: LayoutConfigRegistry = None,
    ):
        self.layout_id = layout_id
        self.template_registry = template_registry or TemplateRegistry()
        self.layout_registry = layout_registry or LayoutConfigRegistry()

    def __repr__(self) -> str:
        return f"TemplateRenderer({self.layout_id!r})"

    @property
    def layout(self) -> LayoutConfig:
        return self.layout_registry.get_config(self.layout_id)

    def project(self, draft: Any) -> Page:
        """
        Build the display-ready Page without producing HTML.

        Args:
            draft: Draft or raw draft-shaped input (normalized first)

        Returns:
            Page with html left empty
        """
        return project_page(normalize_draft(draft), self.layout)

    def render(self, draft: Any) -> Page:
        """
        Render a draft with this layout.

        The input is normalized into a new Draft first, so raw input is accepted
        and the caller's object is never touched.

        Args:
            draft: Draft or raw draft-shaped input

        Returns:
            Page with html filled in
        """
        page = self.project(draft)
        template = self.template_registry.get_template(self.layout_id)
        page.html = template.render(page=page)
        _log_debug(
            f"Rendered layout '{self.layout_id}' with sections {page.section_ids} "
            f"({len(page.html)} chars)"
        )
        return page
