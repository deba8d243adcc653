"""Unit tests for the sample draft."""

import pytest

from folio.contexts.drafting import DEFAULT_DRAFT, TEMPLATE_IDS, get_default_draft, normalize_draft


@pytest.mark.unit
def test_default_draft_is_normalized():
    """Test that the sample draft is a fixed point of normalization."""
    draft = get_default_draft()

    assert normalize_draft(draft) == draft
    assert draft.to_dict() == DEFAULT_DRAFT


@pytest.mark.unit
def test_default_draft_is_complete():
    """Test that every section of the sample draft has content."""
    draft = get_default_draft()

    assert draft.profile.full_name
    assert draft.profile.email
    assert draft.profile.phone
    assert draft.experience
    assert draft.projects
    assert draft.skills
    assert draft.education
    assert draft.template_id in TEMPLATE_IDS
    assert draft.updated_at > 0


@pytest.mark.unit
def test_default_draft_copies_are_independent():
    """Test that callers get independent copies of the sample draft."""
    first = get_default_draft()
    first.skills.append("COBOL")
    first.profile.full_name = "Someone Else"

    second = get_default_draft()

    assert "COBOL" not in second.skills
    assert second.profile.full_name == "Jordan Rivera"
    assert "COBOL" not in DEFAULT_DRAFT["skills"]
