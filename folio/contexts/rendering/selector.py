"""
Template Selection

Maps a draft's declared template id to its renderer. Selection never fails:
anything outside the known ids (including "" and non-strings) gets the
fallback layout.
"""

import threading
from typing import Any, Dict

from folio.contexts.drafting.draft_data_structure import TEMPLATE_IDS
from folio.contexts.rendering.logger import _log_warning
from folio.contexts.rendering.registries import LayoutConfigRegistry, TemplateRegistry
from folio.contexts.rendering.renderers import TemplateRenderer

FALLBACK_TEMPLATE_ID = "glass"


class TemplateSelector:
    """
    Closed mapping of template ids to renderers.

    Renderers share one template registry and one layout registry, so loaded
    templates and configs are cached across selections.
    """

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        layout_registry: LayoutConfigRegistry = None,
    ):
        template_registry = template_registry or TemplateRegistry()
        layout_registry = layout_registry or LayoutConfigRegistry()
        self._renderers: Dict[str, TemplateRenderer] = {
            template_id: TemplateRenderer(template_id, template_registry, layout_registry)
            for template_id in TEMPLATE_IDS
        }

    @property
    def fallback(self) -> TemplateRenderer:
        return self._renderers[FALLBACK_TEMPLATE_ID]

    def resolve_id(self, template_id: Any) -> str:
        """Return template_id if it is known, otherwise the fallback id."""
        if isinstance(template_id, str) and template_id in self._renderers:
            return template_id
        return FALLBACK_TEMPLATE_ID

    def select(self, template_id: Any) -> TemplateRenderer:
        """
        Get the renderer for a template id.

        Args:
            template_id: Declared template id (any value)

        Returns:
            Matching renderer, or the fallback renderer for unknown ids
        """
        resolved = self.resolve_id(template_id)
        if resolved != template_id:
            _log_warning(
                f"Unknown template id {template_id!r}; falling back to '{FALLBACK_TEMPLATE_ID}'"
            )
        return self._renderers[resolved]


_default_selector = None
_default_selector_lock = threading.Lock()


def get_default_selector() -> TemplateSelector:
    """Module-wide selector, created once on first use."""
    global _default_selector
    with _default_selector_lock:
        if _default_selector is None:
            _default_selector = TemplateSelector()
    return _default_selector


def select_renderer(template_id: Any) -> TemplateRenderer:
    """Select a renderer using the module-wide selector."""
    return get_default_selector().select(template_id)
