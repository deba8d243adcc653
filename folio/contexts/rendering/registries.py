"""
Rendering Registries

Centralized registries for loading and caching layout templates and layout configs.

Each layout lives in its own directory:
    layouts/{layout_id}/page.html.jinja   Jinja2 HTML template
    layouts/{layout_id}/layout.yaml       declarative settings (link order, labels, copy)
Shared building blocks live in layouts/structure/.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from omegaconf import OmegaConf

from folio.contexts.rendering.contact_links import DEFAULT_LINK_ORDER

load_dotenv()
LAYOUTS_PATH = Path(os.getenv("FOLIO_LAYOUTS_PATH", Path(__file__).parent / "layouts"))

TEMPLATE_FILENAME = "page.html.jinja"
CONFIG_FILENAME = "layout.yaml"


class InvalidLayoutConfigError(ValueError):
    """Raised when a layout.yaml is missing required keys."""

    def __init__(self, layout_id: str, config_path: Path, missing: List[str]):
        self.layout_id = layout_id
        self.config_path = config_path
        self.missing = missing
        super().__init__(
            f"Layout config for '{layout_id}' at {config_path} is missing: {', '.join(missing)}"
        )


@dataclass
class LayoutConfig:
    """
    Declarative per-layout settings.

    Attributes:
        layout_id: Layout identifier (e.g., "minimal")
        summary_placeholder: Sentence shown when the profile has no summary
        link_order: Contact channel order for this layout
        link_labels: Label overrides per channel (e.g., {"phone": "Call"})
        project_link_label: Text of the link on project cards
        projects_subtitle: Optional subtitle next to the Projects heading
        show_nav: Render in-page navigation for the visible sections
        primary_link: Emphasize the first contact link as the main call to action
    """

    layout_id: str
    summary_placeholder: str
    link_order: List[str] = field(default_factory=lambda: list(DEFAULT_LINK_ORDER))
    link_labels: Dict[str, str] = field(default_factory=dict)
    project_link_label: str = "↗"
    projects_subtitle: str = ""
    show_nav: bool = False
    primary_link: bool = False

    REQUIRED_KEYS = ("summary_placeholder",)

    @classmethod
    def from_dict(cls, layout_id: str, data: Dict[str, Any], config_path: Path) -> "LayoutConfig":
        missing = [key for key in cls.REQUIRED_KEYS if key not in data]
        if missing:
            raise InvalidLayoutConfigError(layout_id, config_path, missing)

        defaults = cls(layout_id=layout_id, summary_placeholder="")
        return cls(
            layout_id=layout_id,
            summary_placeholder=data["summary_placeholder"],
            link_order=list(data.get("link_order", defaults.link_order)),
            link_labels=dict(data.get("link_labels") or {}),
            project_link_label=data.get("project_link_label", defaults.project_link_label),
            projects_subtitle=data.get("projects_subtitle", defaults.projects_subtitle),
            show_nav=bool(data.get("show_nav", defaults.show_nav)),
            primary_link=bool(data.get("primary_link", defaults.primary_link)),
        )


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML page generation.

    Templates are stored in layouts/{layout_id}/page.html.jinja and may extend or
    import anything under layouts/structure/.
    """

    def __init__(self, layouts_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            layouts_base_path: Base path for layout directories. Defaults to
                               FOLIO_LAYOUTS_PATH from environment
        """
        if layouts_base_path is None:
            layouts_base_path = LAYOUTS_PATH

        self.layouts_base_path = Path(layouts_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.layouts_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, layout_id: str) -> Template:
        """
        Get a template by layout id, loading and caching it if necessary.

        Args:
            layout_id: Layout identifier (e.g., 'minimal')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if layout_id in self._cache:
            return self._cache[layout_id]

        template_path = f"{layout_id}/{TEMPLATE_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for layout '{layout_id}' at {self.layouts_base_path / template_path}"
            ) from e

        self._cache[layout_id] = template
        return template

    def get_template_path(self, layout_id: str) -> Path:
        """Get the file path for a layout's template."""
        return self.layouts_base_path / layout_id / TEMPLATE_FILENAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, layout_id: str) -> bool:
        """Check if a template is in the cache."""
        return layout_id in self._cache


class LayoutConfigRegistry:
    """
    Registry for loading and caching layout configs.

    Configs are stored in layouts/{layout_id}/layout.yaml.
    """

    def __init__(self, layouts_base_path: Path = None):
        if layouts_base_path is None:
            layouts_base_path = LAYOUTS_PATH

        self.layouts_base_path = Path(layouts_base_path)
        self._cache: Dict[str, LayoutConfig] = {}

    def get_config(self, layout_id: str) -> LayoutConfig:
        """
        Get a layout config by id, loading and caching it if necessary.

        Args:
            layout_id: Layout identifier (e.g., 'classic')

        Returns:
            LayoutConfig

        Raises:
            FileNotFoundError: If config file doesn't exist
            InvalidLayoutConfigError: If required keys are missing
        """
        if layout_id in self._cache:
            return self._cache[layout_id]

        config_path = self.get_config_path(layout_id)

        if not config_path.exists():
            raise FileNotFoundError(f"Layout config not found for '{layout_id}' at {config_path}")

        config = OmegaConf.load(config_path)
        config_dict = OmegaConf.to_container(config, resolve=True)

        layout_config = LayoutConfig.from_dict(layout_id, config_dict, config_path)
        self._cache[layout_id] = layout_config
        return layout_config

    def get_config_path(self, layout_id: str) -> Path:
        """Get the file path for a layout's config."""
        return self.layouts_base_path / layout_id / CONFIG_FILENAME

    def clear_cache(self):
        """Clear the layout config cache."""
        self._cache.clear()

    def is_cached(self, layout_id: str) -> bool:
        """Check if a layout config is in the cache."""
        return layout_id in self._cache
