"""
Drafting Context

Responsibilities:
- Defines the canonical portfolio draft structure (profile, experience, projects,
  skills, education)
- Normalizes loosely-shaped input into complete drafts
- Provides the sample draft used for template previews
- Loads stored drafts from JSON/YAML files

Owns: Draft data model, normalization rules, default draft
Never: Decides how a draft is laid out or rendered
"""

from folio.contexts.drafting.defaults import DEFAULT_DRAFT, get_default_draft
from folio.contexts.drafting.draft_data_structure import (
    TEMPLATE_IDS,
    Draft,
    EducationEntry,
    ExperienceEntry,
    Profile,
    ProjectEntry,
)
from folio.contexts.drafting.loader import (
    InvalidDraftFileError,
    UnsupportedDraftFormatError,
    load_draft,
    load_raw_draft,
)
from folio.contexts.drafting.normalizer import normalize_draft, normalize_profile

__all__ = [
    # Data structure classes
    "Draft",
    "Profile",
    "ExperienceEntry",
    "ProjectEntry",
    "EducationEntry",
    "TEMPLATE_IDS",
    # Normalization
    "normalize_draft",
    "normalize_profile",
    # Defaults
    "DEFAULT_DRAFT",
    "get_default_draft",
    # Loading
    "load_draft",
    "load_raw_draft",
    "UnsupportedDraftFormatError",
    "InvalidDraftFileError",
]
