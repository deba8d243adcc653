"""
Display policy shared by every layout.

Caps bound how many items a layout shows per list, placeholders stand in for
empty display fields, and date ranges use one format. Keeping these in one
place means the four layouts cannot drift apart.
"""

from typing import List, Sequence

# Per-list display caps (first N items, original order, no "more" marker)
PROJECT_HIGHLIGHTS_CAP = 4
EXPERIENCE_HIGHLIGHTS_CAP = 6
PROJECT_TECH_CAP = 10
SKILLS_CAP = 60

# Stand-ins for empty display fields
PLACEHOLDERS = {
    "full_name": "Your Name",
    "project_name": "Untitled project",
    "role": "Role",
    "company": "Company",
    "school": "School",
    "degree": "Degree",
}

DATE_RANGE_SEPARATOR = " — "
DETAIL_SEPARATOR = " • "


def take(items: Sequence[str], cap: int) -> List[str]:
    """Return the first `cap` items in their original order."""
    return list(items[:cap])


def or_placeholder(value: str, placeholder_key: str) -> str:
    """Return value, or the placeholder registered under placeholder_key when empty."""
    return value or PLACEHOLDERS[placeholder_key]


def format_date_range(start: str, end: str) -> str:
    """
    Format a start/end pair for display.

    An empty end means ongoing, so only the start is shown. Dates are opaque
    strings and are not checked for order.

    Examples:
        >>> format_date_range("2019", "2022")
        '2019 — 2022'
        >>> format_date_range("2022", "")
        '2022'
    """
    if end:
        return f"{start}{DATE_RANGE_SEPARATOR}{end}"
    return start


def join_details(*parts: str) -> str:
    """Join the non-empty parts with a bullet separator (e.g., "Company • Remote")."""
    return DETAIL_SEPARATOR.join(part for part in parts if part)
