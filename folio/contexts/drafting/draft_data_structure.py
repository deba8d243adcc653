"""
Portfolio Draft Structure

Defines the canonical data representation of a portfolio draft for FOLIO.
This structure is the interface between the Drafting and Rendering contexts.

Drafting owns:
- Lifting loosely-shaped input into Draft instances (see normalizer.py)
- The sample draft used for template previews (see defaults.py)

Rendering reads Draft instances and never mutates them.

Field names are snake_case in Python; to_dict() emits the camelCase wire keys
(updatedAt, templateId, fullName) the draft is stored with.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# Closed set of layout identifiers a draft may declare
TEMPLATE_IDS = ("minimal", "glass", "neo", "classic")

PROFILE_FIELDS = {
    "full_name": "fullName",
    "headline": "headline",
    "location": "location",
    "email": "email",
    "phone": "phone",
    "website": "website",
    "github": "github",
    "linkedin": "linkedin",
    "summary": "summary",
}


@dataclass
class Profile:
    """
    Who the portfolio belongs to and how to reach them.

    Every field is a display string; empty means "not provided".
    """

    full_name: str = ""
    headline: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    github: str = ""
    linkedin: str = ""
    summary: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {wire: getattr(self, attr) for attr, wire in PROFILE_FIELDS.items()}


@dataclass
class ExperienceEntry:
    """A single role. An empty end date means the role is ongoing."""

    company: str = ""
    role: str = ""
    start: str = ""
    end: str = ""
    location: str = ""
    highlights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "role": self.role,
            "start": self.start,
            "end": self.end,
            "location": self.location,
            "highlights": list(self.highlights),
        }


@dataclass
class ProjectEntry:
    name: str = ""
    link: str = ""
    tech: List[str] = field(default_factory=list)
    description: str = ""
    highlights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "link": self.link,
            "tech": list(self.tech),
            "description": self.description,
            "highlights": list(self.highlights),
        }


@dataclass
class EducationEntry:
    school: str = ""
    degree: str = ""
    start: str = ""
    end: str = ""
    notes: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "school": self.school,
            "degree": self.degree,
            "start": self.start,
            "end": self.end,
            "notes": self.notes,
        }


@dataclass
class Draft:
    """
    Structured representation of a complete portfolio draft.

    A Draft produced by normalize_draft() has every field present: strings may
    be empty and collections may be empty, but nothing is missing. Collection
    order is display order.

    Attributes:
        updated_at: Milliseconds since the epoch (advisory only)
        template_id: Declared layout identifier, carried verbatim. Unknown values
                     are resolved by the template selector, not here.
        responsibilities: Free text carried through untouched (no layout reads it)
        profile: Contact and introduction fields
        experience: Roles, in display order
        projects: Projects, in display order
        skills: Skill labels, in display order
        education: Education entries, in display order
        extras: Unrecognized top-level keys from the source. The dict is new but its
                values are the caller's own objects, not copies
    """

    updated_at: float = 0
    template_id: str = ""
    responsibilities: str = ""
    profile: Profile = field(default_factory=Profile)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_known_template(self) -> bool:
        """True if template_id is one of the layouts FOLIO ships."""
        return self.template_id in TEMPLATE_IDS

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the camelCase wire shape.

        Extras are merged back at the top level, so normalize_draft(d.to_dict())
        reproduces d.
        """
        data = dict(self.extras)
        data.update(
            {
                "updatedAt": self.updated_at,
                "templateId": self.template_id,
                "responsibilities": self.responsibilities,
                "profile": self.profile.to_dict(),
                "experience": [entry.to_dict() for entry in self.experience],
                "projects": [entry.to_dict() for entry in self.projects],
                "skills": list(self.skills),
                "education": [entry.to_dict() for entry in self.education],
            }
        )
        return data
