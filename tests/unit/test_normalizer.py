"""Unit tests for draft normalization."""

import copy

import pytest

from folio.contexts.drafting import (
    DEFAULT_DRAFT,
    Draft,
    EducationEntry,
    ExperienceEntry,
    Profile,
    ProjectEntry,
    normalize_draft,
    normalize_profile,
)

PROFILE_ATTRS = [
    "full_name",
    "headline",
    "location",
    "email",
    "phone",
    "website",
    "github",
    "linkedin",
    "summary",
]

MALFORMED_INPUTS = [
    None,
    {},
    [],
    "not a draft",
    42,
    {"profile": None, "experience": None, "projects": None, "skills": None, "education": None},
    {"profile": "Ada", "experience": "lots", "projects": {"a": 1}, "skills": 7, "education": True},
    {"profile": {"fullName": 12, "email": ["a@b.com"], "summary": None}},
    {"experience": [None, 3, "x", {"role": 5, "highlights": "one"}]},
    {"projects": [{"tech": [1, "Go", None], "highlights": None, "link": {}}]},
    {"education": [{"school": ["MIT"], "notes": 0}]},
    {"templateId": 3, "updatedAt": "yesterday", "responsibilities": ["a"]},
    {"updatedAt": float("nan")},
    {"updatedAt": True},
    Draft(skills=None),
    Draft(profile=None),
    Draft(profile={"fullName": "Ada"}),
    Draft(experience=[{"role": "Lead"}]),
    Draft(projects=(ProjectEntry(tech=None, highlights="x"),), education="MIT", extras=None),
    Draft(experience=[ExperienceEntry(role=5, highlights=[1, "a"])], template_id=None, updated_at="now"),
]


def _assert_fully_populated(draft: Draft):
    assert isinstance(draft.template_id, str)
    assert isinstance(draft.responsibilities, str)
    assert isinstance(draft.updated_at, (int, float))
    for attr in PROFILE_ATTRS:
        assert isinstance(getattr(draft.profile, attr), str)
    for collection in (draft.experience, draft.projects, draft.skills, draft.education):
        assert isinstance(collection, list)
    assert all(isinstance(skill, str) for skill in draft.skills)
    for entry in draft.experience:
        assert all(isinstance(v, str) for v in (entry.company, entry.role, entry.start, entry.end, entry.location))
        assert all(isinstance(h, str) for h in entry.highlights)
    for entry in draft.projects:
        assert all(isinstance(v, str) for v in (entry.name, entry.link, entry.description))
        assert all(isinstance(t, str) for t in entry.tech)
        assert all(isinstance(h, str) for h in entry.highlights)
    for entry in draft.education:
        assert all(isinstance(v, str) for v in (entry.school, entry.degree, entry.start, entry.end, entry.notes))


@pytest.mark.unit
def test_empty_input_gives_empty_draft():
    """Test that {} normalizes to a draft with every field empty but present."""
    draft = normalize_draft({})

    assert draft == Draft()
    assert draft.profile == Profile()
    assert draft.experience == []
    assert draft.projects == []
    assert draft.skills == []
    assert draft.education == []
    assert draft.template_id == ""


@pytest.mark.unit
@pytest.mark.parametrize("raw", MALFORMED_INPUTS)
def test_normalize_is_total(raw):
    """Test that malformed input never raises and always yields a complete draft."""
    _assert_fully_populated(normalize_draft(raw))


@pytest.mark.unit
@pytest.mark.parametrize("raw", MALFORMED_INPUTS + [DEFAULT_DRAFT])
def test_normalize_is_idempotent(raw):
    """Test normalize(normalize(x)) == normalize(x)."""
    once = normalize_draft(raw)
    twice = normalize_draft(once)

    assert twice == once


@pytest.mark.unit
def test_wire_roundtrip_is_stable():
    """Test that normalizing the wire form of a normalized draft reproduces it."""
    draft = normalize_draft(DEFAULT_DRAFT)
    assert normalize_draft(draft.to_dict()) == draft


@pytest.mark.unit
def test_profile_fields_are_read_from_camel_case_keys():
    """Test that profile wire keys map onto profile attributes."""
    profile = normalize_profile(
        {
            "fullName": "Ada Lovelace",
            "headline": "Analyst",
            "email": "ada@example.com",
            "phone": "+44 20 0000 0000",
            "github": "https://github.com/ada",
        }
    )

    assert profile.full_name == "Ada Lovelace"
    assert profile.headline == "Analyst"
    assert profile.email == "ada@example.com"
    assert profile.phone == "+44 20 0000 0000"
    assert profile.github == "https://github.com/ada"
    assert profile.website == ""
    assert profile.linkedin == ""


@pytest.mark.unit
def test_wrong_typed_profile_fields_become_empty():
    """Test that non-string profile fields fall back to empty strings individually."""
    profile = normalize_profile({"fullName": 12, "headline": "Engineer", "summary": None})

    assert profile.full_name == ""
    assert profile.headline == "Engineer"
    assert profile.summary == ""


@pytest.mark.unit
def test_non_sequence_collections_become_empty():
    """Test that collections of the wrong type are replaced with empty lists."""
    draft = normalize_draft(
        {"experience": "lots", "projects": {"name": "x"}, "skills": "Python, Go", "education": 1}
    )

    assert draft.experience == []
    assert draft.projects == []
    assert draft.skills == []
    assert draft.education == []


@pytest.mark.unit
def test_tuples_are_accepted_as_sequences():
    """Test that tuples are treated like lists."""
    draft = normalize_draft({"skills": ("Python", "Go")})
    assert draft.skills == ["Python", "Go"]


@pytest.mark.unit
def test_order_and_duplicates_are_preserved():
    """Test that collections keep their order and duplicates."""
    draft = normalize_draft(
        {
            "skills": ["Go", "Python", "Go", "Assembly"],
            "experience": [{"role": "B"}, {"role": "A"}, {"role": "B"}],
            "projects": [{"name": "Z", "tech": ["b", "a", "b"]}, {"name": "A"}],
        }
    )

    assert draft.skills == ["Go", "Python", "Go", "Assembly"]
    assert [entry.role for entry in draft.experience] == ["B", "A", "B"]
    assert [entry.name for entry in draft.projects] == ["Z", "A"]
    assert draft.projects[0].tech == ["b", "a", "b"]


@pytest.mark.unit
def test_malformed_entries_are_kept_as_empty_entries():
    """Test that non-mapping entries are not dropped, keeping display positions intact."""
    draft = normalize_draft({"experience": [{"role": "Lead"}, None, "oops"]})

    assert len(draft.experience) == 3
    assert draft.experience[0].role == "Lead"
    assert draft.experience[1] == ExperienceEntry()
    assert draft.experience[2] == ExperienceEntry()


@pytest.mark.unit
def test_entry_fields_get_defaults():
    """Test that missing entry fields, including optional ones, become empty."""
    draft = normalize_draft(
        {
            "experience": [{"company": "Acme"}],
            "projects": [{"name": "Tool"}],
            "education": [{"school": "MIT"}],
        }
    )

    assert draft.experience[0] == ExperienceEntry(company="Acme")
    assert draft.experience[0].location == ""
    assert draft.experience[0].highlights == []
    assert draft.projects[0] == ProjectEntry(name="Tool")
    assert draft.education[0] == EducationEntry(school="MIT")
    assert draft.education[0].notes == ""


@pytest.mark.unit
def test_non_string_list_items_become_empty_strings():
    """Test that list items of the wrong type keep their slot as empty strings."""
    draft = normalize_draft({"skills": ["Python", 3, None], "projects": [{"tech": [1, "Go"]}]})

    assert draft.skills == ["Python", "", ""]
    assert draft.projects[0].tech == ["", "Go"]


@pytest.mark.unit
def test_template_id_is_carried_verbatim():
    """Test that unknown template ids are not rewritten by the normalizer."""
    assert normalize_draft({"templateId": "retro"}).template_id == "retro"
    assert normalize_draft({"templateId": "neo"}).template_id == "neo"
    assert normalize_draft({"templateId": None}).template_id == ""


@pytest.mark.unit
def test_has_known_template():
    """Test Draft.has_known_template for known and unknown ids."""
    assert normalize_draft({"templateId": "classic"}).has_known_template
    assert not normalize_draft({"templateId": "retro"}).has_known_template
    assert not normalize_draft({}).has_known_template


@pytest.mark.unit
def test_updated_at_accepts_numbers_only():
    """Test updatedAt coercion."""
    assert normalize_draft({"updatedAt": 1700000000000}).updated_at == 1700000000000
    assert normalize_draft({"updatedAt": 1.5}).updated_at == 1.5
    assert normalize_draft({"updatedAt": "2024-01-01"}).updated_at == 0
    assert normalize_draft({"updatedAt": True}).updated_at == 0
    assert normalize_draft({"updatedAt": float("inf")}).updated_at == 0


@pytest.mark.unit
def test_responsibilities_passes_through():
    """Test that responsibilities is carried untouched."""
    draft = normalize_draft({"responsibilities": "Own the roadmap"})

    assert draft.responsibilities == "Own the roadmap"
    assert draft.to_dict()["responsibilities"] == "Own the roadmap"


@pytest.mark.unit
def test_extra_fields_are_carried_in_extras():
    """Test that unrecognized top-level keys survive normalization unchanged."""
    raw = {"profile": {"fullName": "Ada"}, "theme": {"accent": "teal"}, "version": 2}
    draft = normalize_draft(raw)

    assert draft.extras == {"theme": {"accent": "teal"}, "version": 2}
    assert draft.to_dict()["theme"] == {"accent": "teal"}
    assert draft.to_dict()["version"] == 2


@pytest.mark.unit
def test_input_is_not_mutated():
    """Test that normalization never modifies the caller's object."""
    raw = {
        "profile": {"fullName": "Ada", "email": None},
        "experience": [{"role": "Lead", "highlights": ["a", 1]}],
        "skills": "broken",
    }
    snapshot = copy.deepcopy(raw)

    draft = normalize_draft(raw)
    draft.experience[0].highlights.append("new")
    draft.skills.append("Go")

    assert raw == snapshot


@pytest.mark.unit
def test_normalizing_a_draft_returns_a_new_object():
    """Test that normalizing an existing Draft builds an independent copy."""
    original = normalize_draft(DEFAULT_DRAFT)
    copy_ = normalize_draft(original)

    copy_.skills.append("Extra")
    copy_.projects[0].highlights.clear()

    assert "Extra" not in original.skills
    assert original.projects[0].highlights


@pytest.mark.unit
def test_hand_built_draft_fields_are_coerced():
    """Test that a Draft with wrong-typed attributes is repaired field by field."""
    draft = normalize_draft(
        Draft(
            profile={"fullName": "Ada"},
            experience=[{"role": "Lead"}, ExperienceEntry(company="Acme", highlights=None)],
            skills=None,
            extras=None,
        )
    )

    assert draft.profile.full_name == "Ada"
    assert draft.experience[0].role == "Lead"
    assert draft.experience[1].company == "Acme"
    assert draft.experience[1].highlights == []
    assert draft.skills == []
    assert draft.extras == {}


@pytest.mark.unit
def test_entry_instances_in_raw_input_are_kept():
    """Test that entry objects inside a mapping keep their data."""
    draft = normalize_draft(
        {
            "profile": Profile(full_name="Ada"),
            "experience": [ExperienceEntry(role="Lead", highlights=["Shipped"])],
            "projects": [ProjectEntry(name="Engine", tech=["Brass"])],
            "education": [EducationEntry(school="Home", degree="Mathematics")],
        }
    )

    assert draft.profile.full_name == "Ada"
    assert draft.experience[0] == ExperienceEntry(role="Lead", highlights=["Shipped"])
    assert draft.projects[0] == ProjectEntry(name="Engine", tech=["Brass"])
    assert draft.education[0] == EducationEntry(school="Home", degree="Mathematics")


@pytest.mark.unit
def test_entry_instances_are_copied():
    """Test that lifted entries do not share lists with the caller's entries."""
    entry = ExperienceEntry(role="Lead", highlights=["Shipped"])
    draft = normalize_draft({"experience": [entry]})

    draft.experience[0].highlights.append("More")

    assert entry.highlights == ["Shipped"]


@pytest.mark.unit
def test_extras_values_are_shared_not_copied():
    """Test that extras is a new dict holding the caller's own values."""
    theme = {"accent": "teal"}
    raw = {"theme": theme}
    draft = normalize_draft(raw)

    assert draft.extras is not raw
    assert draft.extras["theme"] is theme
    draft.extras["version"] = 2
    assert "version" not in raw
