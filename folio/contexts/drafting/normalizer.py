"""
Draft Normalization

Lifts ANY draft-shaped input into a complete Draft ready for rendering.

- Input: anything (partial mapping, existing Draft, None, wrong types)
- Output: Draft where every string field is a str and every collection is a list
- Operations:
  1. Top-level collections that are not lists/tuples become empty lists
  2. Every item of a kept collection is lifted into its entry type (never dropped,
     never reordered, never deduplicated)
  3. Missing or wrong-typed scalar fields become ""
  4. Unrecognized top-level keys are carried in Draft.extras untouched (values are
     shared with the input, not copied)

URLs, emails and dates are opaque display strings and are not validated.
The caller's input is never mutated; normalize_draft() always builds a new Draft.
Normalizing a normalized draft is a no-op.
"""

import math
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, Dict, List

from folio.contexts.drafting.draft_data_structure import (
    PROFILE_FIELDS,
    Draft,
    EducationEntry,
    ExperienceEntry,
    Profile,
    ProjectEntry,
)
from folio.contexts.drafting.logger import _log_debug

# Top-level wire keys read by the normalizer; anything else lands in extras
KNOWN_KEYS = {
    "updatedAt",
    "templateId",
    "responsibilities",
    "profile",
    "experience",
    "projects",
    "skills",
    "education",
}


def _as_mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _entry_source(raw: Any, entry_type: type) -> Mapping:
    # Entry attribute names match their wire keys; values are coerced by the caller
    if isinstance(raw, entry_type):
        return {f.name: getattr(raw, f.name) for f in fields(entry_type)}
    return _as_mapping(raw)


def _is_sequence(value: Any) -> bool:
    # str and bytes are sequences too, but never a valid collection here
    return isinstance(value, (list, tuple))


def _string(source: Mapping, key: str) -> str:
    value = source.get(key)
    if isinstance(value, str):
        return value
    if value is not None:
        _log_debug(f"Field '{key}' is {type(value).__name__}, not str; using empty string")
    return ""


def _string_list(source: Mapping, key: str) -> List[str]:
    """Coerce a list of display strings, keeping length and order."""
    value = source.get(key)
    if not _is_sequence(value):
        if value is not None:
            _log_debug(f"Field '{key}' is {type(value).__name__}, not a list; using empty list")
        return []
    return [item if isinstance(item, str) else "" for item in value]


def _timestamp(value: Any) -> float:
    # bool is an int subclass; NaN/inf would break equality of normalized drafts
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return value


def normalize_profile(raw: Any) -> Profile:
    """
    Build a Profile from a profile-shaped mapping (or an existing Profile).

    Args:
        raw: Mapping with camelCase profile keys, a Profile, or anything else

    Returns:
        Profile with every field a str
    """
    if isinstance(raw, Profile):
        raw = raw.to_dict()
    source = _as_mapping(raw)
    return Profile(**{attr: _string(source, wire) for attr, wire in PROFILE_FIELDS.items()})


def _normalize_experience(raw: Any) -> ExperienceEntry:
    source = _entry_source(raw, ExperienceEntry)
    return ExperienceEntry(
        company=_string(source, "company"),
        role=_string(source, "role"),
        start=_string(source, "start"),
        end=_string(source, "end"),
        location=_string(source, "location"),
        highlights=_string_list(source, "highlights"),
    )


def _normalize_project(raw: Any) -> ProjectEntry:
    source = _entry_source(raw, ProjectEntry)
    return ProjectEntry(
        name=_string(source, "name"),
        link=_string(source, "link"),
        tech=_string_list(source, "tech"),
        description=_string(source, "description"),
        highlights=_string_list(source, "highlights"),
    )


def _normalize_education(raw: Any) -> EducationEntry:
    source = _entry_source(raw, EducationEntry)
    return EducationEntry(
        school=_string(source, "school"),
        degree=_string(source, "degree"),
        start=_string(source, "start"),
        end=_string(source, "end"),
        notes=_string(source, "notes"),
    )


def _entries(source: Mapping, key: str, lift) -> list:
    value = source.get(key)
    if not _is_sequence(value):
        if value is not None:
            _log_debug(f"Collection '{key}' is {type(value).__name__}, not a list; using empty list")
        return []
    return [lift(item) for item in value]


def _draft_source(draft: Draft) -> Dict[str, Any]:
    """Wire-keyed view of a Draft's attributes, with no assumption about their types."""
    source = dict(_as_mapping(draft.extras))
    source.update(
        {
            "updatedAt": draft.updated_at,
            "templateId": draft.template_id,
            "responsibilities": draft.responsibilities,
            "profile": draft.profile,
            "experience": draft.experience,
            "projects": draft.projects,
            "skills": draft.skills,
            "education": draft.education,
        }
    )
    return source


def normalize_draft(raw: Any) -> Draft:
    """
    Normalize a raw or partial draft into a complete Draft.

    Never raises: malformed input resolves field by field to empty defaults.

    Args:
        raw: Draft-shaped mapping (camelCase keys), an existing Draft, or anything else

    Returns:
        New Draft with every field present

    Example:
        >>> draft = normalize_draft({"profile": {"fullName": "Ada"}, "skills": "oops"})
        >>> draft.profile.full_name, draft.profile.email, draft.skills
        ('Ada', '', [])
    """
    if isinstance(raw, Draft):
        raw = _draft_source(raw)
    elif raw is not None and not isinstance(raw, Mapping):
        _log_debug(f"Draft input is {type(raw).__name__}, not a mapping; using empty draft")
    source = _as_mapping(raw)

    return Draft(
        updated_at=_timestamp(source.get("updatedAt")),
        template_id=_string(source, "templateId"),
        responsibilities=_string(source, "responsibilities"),
        profile=normalize_profile(source.get("profile")),
        experience=_entries(source, "experience", _normalize_experience),
        projects=_entries(source, "projects", _normalize_project),
        skills=_string_list(source, "skills"),
        education=_entries(source, "education", _normalize_education),
        extras={key: value for key, value in source.items() if key not in KNOWN_KEYS},
    )
