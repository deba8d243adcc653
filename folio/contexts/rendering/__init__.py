"""
Rendering Context

Responsibilities:
- Builds contact links from a profile
- Applies the shared display policy (section visibility, placeholders, caps, date ranges)
- Selects a layout for a draft, falling back when the declared id is unknown
- Renders pages to HTML with per-layout Jinja2 templates

Owns: Layouts (layouts/), display policy, layout selection, HTML output
Never: Modifies drafts
"""

from folio.contexts.rendering.contact_links import (
    DEFAULT_LINK_ORDER,
    ContactLink,
    build_contact_links,
)
from folio.contexts.rendering.page_structure import Page, PageLink, PageSection, project_page
from folio.contexts.rendering.portfolio import RenderResult, render_portfolio, render_portfolio_file
from folio.contexts.rendering.renderers import TemplateRenderer
from folio.contexts.rendering.selector import (
    FALLBACK_TEMPLATE_ID,
    TemplateSelector,
    select_renderer,
)

__all__ = [
    # Contact links
    "ContactLink",
    "DEFAULT_LINK_ORDER",
    "build_contact_links",
    # Page model
    "Page",
    "PageLink",
    "PageSection",
    "project_page",
    # Renderers and selection
    "TemplateRenderer",
    "TemplateSelector",
    "FALLBACK_TEMPLATE_ID",
    "select_renderer",
    # Orchestration
    "render_portfolio",
    "render_portfolio_file",
    "RenderResult",
]
