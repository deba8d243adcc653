"""
Page Structure

Display-ready page model and the shared projection from Draft to Page.

project_page() applies the rendering policy every layout shares:
- sections appear in a fixed order (projects, experience, skills, education)
  and only when their collection is non-empty
- empty display fields get placeholders (see display_policy.PLACEHOLDERS)
- list caps truncate highlights, tech tags and skills
- date ranges use one format

Layouts only decide composition and styling; the Jinja2 templates read a Page
and never touch the Draft directly.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from folio.contexts.drafting.draft_data_structure import (
    Draft,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from folio.contexts.rendering.contact_links import ContactLink, build_contact_links
from folio.contexts.rendering.display_policy import (
    EXPERIENCE_HIGHLIGHTS_CAP,
    PROJECT_HIGHLIGHTS_CAP,
    PROJECT_TECH_CAP,
    SKILLS_CAP,
    format_date_range,
    join_details,
    or_placeholder,
    take,
)
from folio.contexts.rendering.registries import LayoutConfig

SECTION_ORDER = ("projects", "experience", "skills", "education")

SECTION_TITLES = {
    "projects": "Projects",
    "experience": "Experience",
    "skills": "Skills",
    "education": "Education",
}


@dataclass
class PageLink:
    """A rendered link. new_context links open in a new tab."""

    label: str
    target: str
    new_context: bool = True
    value: str = ""

    @classmethod
    def from_contact(cls, link: ContactLink) -> "PageLink":
        return cls(
            label=link.label,
            target=link.target,
            new_context=link.opens_new_context,
            value=link.value,
        )


@dataclass
class Hero:
    """Top-of-page introduction."""

    name: str
    headline: str = ""
    location: str = ""
    email: str = ""
    summary: str = ""
    summary_is_placeholder: bool = False


@dataclass
class ProjectCard:
    name: str
    link: Optional[PageLink] = None
    description: str = ""
    highlights: List[str] = field(default_factory=list)
    tech: List[str] = field(default_factory=list)


@dataclass
class ExperienceCard:
    role: str
    company_line: str
    dates: str = ""
    highlights: List[str] = field(default_factory=list)


@dataclass
class EducationCard:
    school: str
    degree: str
    dates: str = ""
    notes: str = ""


@dataclass
class PageSection:
    """
    One visible section of a page.

    Attributes:
        id: Anchor id (e.g., "projects")
        title: Heading text
        items: Cards (projects/experience/education) or skill labels (skills)
        subtitle: Optional text next to the heading
    """

    id: str
    title: str
    items: List[Any] = field(default_factory=list)
    subtitle: str = ""


@dataclass
class Page:
    """
    Fully display-ready page for one layout.

    Attributes:
        template_id: Layout that produced this page
        hero: Introduction block
        links: Contact links in layout order
        sections: Visible sections only, in display order
        project_link_label: Text of the link on project cards
        show_nav: Whether the layout renders in-page navigation
        primary_link: Whether the first link is the main call to action
        html: Rendered HTML document (filled by TemplateRenderer)
    """

    template_id: str
    hero: Hero
    links: List[PageLink] = field(default_factory=list)
    sections: List[PageSection] = field(default_factory=list)
    project_link_label: str = "↗"
    show_nav: bool = False
    primary_link: bool = False
    html: str = ""

    @property
    def section_ids(self) -> List[str]:
        return [section.id for section in self.sections]

    @property
    def nav(self) -> List[Tuple[str, str]]:
        """(anchor id, title) pairs for the visible sections."""
        return [(section.id, section.title) for section in self.sections]

    def has_section(self, section_id: str) -> bool:
        return section_id in self.section_ids

    def get_section(self, section_id: str) -> Optional[PageSection]:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None


def _project_card(project: ProjectEntry, link_label: str) -> ProjectCard:
    link = PageLink(label=link_label, target=project.link, value=project.link) if project.link else None
    return ProjectCard(
        name=or_placeholder(project.name, "project_name"),
        link=link,
        description=project.description,
        highlights=take(project.highlights, PROJECT_HIGHLIGHTS_CAP),
        tech=take(project.tech, PROJECT_TECH_CAP),
    )


def _experience_card(entry: ExperienceEntry) -> ExperienceCard:
    return ExperienceCard(
        role=or_placeholder(entry.role, "role"),
        company_line=join_details(or_placeholder(entry.company, "company"), entry.location),
        dates=format_date_range(entry.start, entry.end),
        highlights=take(entry.highlights, EXPERIENCE_HIGHLIGHTS_CAP),
    )


def _education_card(entry: EducationEntry) -> EducationCard:
    return EducationCard(
        school=or_placeholder(entry.school, "school"),
        degree=or_placeholder(entry.degree, "degree"),
        dates=format_date_range(entry.start, entry.end),
        notes=entry.notes,
    )


def _build_sections(draft: Draft, layout: LayoutConfig) -> List[PageSection]:
    builders = {
        "projects": lambda: [_project_card(p, layout.project_link_label) for p in draft.projects],
        "experience": lambda: [_experience_card(e) for e in draft.experience],
        "skills": lambda: take(draft.skills, SKILLS_CAP),
        "education": lambda: [_education_card(e) for e in draft.education],
    }
    subtitles = {"projects": layout.projects_subtitle}

    sections = []
    for section_id in SECTION_ORDER:
        # Empty collections hide the whole section, heading included
        if not getattr(draft, section_id):
            continue
        sections.append(
            PageSection(
                id=section_id,
                title=SECTION_TITLES[section_id],
                items=builders[section_id](),
                subtitle=subtitles.get(section_id, ""),
            )
        )
    return sections


def project_page(draft: Draft, layout: LayoutConfig) -> Page:
    """
    Project a normalized draft into a display-ready Page for one layout.

    Args:
        draft: Normalized Draft (see normalize_draft)
        layout: Layout settings (link order/labels, placeholder copy)

    Returns:
        Page with html left empty
    """
    profile = draft.profile
    links = build_contact_links(profile, order=layout.link_order, labels=layout.link_labels)

    hero = Hero(
        name=or_placeholder(profile.full_name, "full_name"),
        headline=profile.headline,
        location=profile.location,
        email=profile.email,
        summary=profile.summary or layout.summary_placeholder,
        summary_is_placeholder=not profile.summary,
    )

    return Page(
        template_id=layout.layout_id,
        hero=hero,
        links=[PageLink.from_contact(link) for link in links],
        sections=_build_sections(draft, layout),
        project_link_label=layout.project_link_label,
        show_nav=layout.show_nav,
        primary_link=layout.primary_link,
    )
