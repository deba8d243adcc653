"""
Default values for the FOLIO draft.

Provides the sample draft used wherever no real draft is supplied:
- template preview pages (scripts/render_portfolio.py preview)
- the fixture baseline for tests

The sample is complete: every profile field is filled and every collection
has at least one entry, so it is already a fixed point of normalize_draft().
"""

from typing import Any, Dict

from folio.contexts.drafting.draft_data_structure import Draft
from folio.contexts.drafting.normalizer import normalize_draft

DEFAULT_TEMPLATE_ID = "glass"

# 2026-01-01T00:00:00Z in milliseconds
DEFAULT_UPDATED_AT = 1767225600000

DEFAULT_DRAFT: Dict[str, Any] = {
    "updatedAt": DEFAULT_UPDATED_AT,
    "templateId": DEFAULT_TEMPLATE_ID,
    "responsibilities": "Own the platform roadmap and mentor the backend team.",
    "profile": {
        "fullName": "Jordan Rivera",
        "headline": "Full-Stack Engineer",
        "location": "Lisbon, Portugal",
        "email": "jordan.rivera@example.com",
        "phone": "+351 912 345 678",
        "website": "https://jordanrivera.dev",
        "github": "https://github.com/jordanrivera",
        "linkedin": "https://www.linkedin.com/in/jordanrivera",
        "summary": (
            "Engineer who likes small, sharp tools. I build web platforms end to end, "
            "from data models to the pixels people click on."
        ),
    },
    "experience": [
        {
            "company": "Northwind Labs",
            "role": "Senior Software Engineer",
            "start": "2022",
            "end": "",
            "location": "Remote",
            "highlights": [
                "Led the migration of the billing service to an event-driven design",
                "Cut p95 API latency from 480ms to 120ms",
                "Mentored four engineers through their first on-call rotations",
            ],
        },
        {
            "company": "Brightline Studio",
            "role": "Software Engineer",
            "start": "2019",
            "end": "2022",
            "location": "Porto, Portugal",
            "highlights": [
                "Shipped the customer dashboard used by 30k monthly users",
                "Introduced typed API clients generated from OpenAPI specs",
            ],
        },
    ],
    "projects": [
        {
            "name": "Tidewatch",
            "link": "https://github.com/jordanrivera/tidewatch",
            "tech": ["Python", "FastAPI", "PostgreSQL", "Docker"],
            "description": "Self-hosted uptime monitor with status pages.",
            "highlights": [
                "Checks 2,000 endpoints a minute on a single small VM",
                "Pluggable alerting via webhooks, email and chat",
            ],
        },
        {
            "name": "Inkwell",
            "link": "https://inkwell.jordanrivera.dev",
            "tech": ["TypeScript", "React", "SQLite"],
            "description": "Markdown notebook that syncs through plain files.",
            "highlights": ["Offline-first editor with conflict-free merges"],
        },
    ],
    "skills": [
        "Python",
        "TypeScript",
        "React",
        "FastAPI",
        "PostgreSQL",
        "Docker",
        "AWS",
        "System Design",
    ],
    "education": [
        {
            "school": "University of Porto",
            "degree": "BSc Computer Science",
            "start": "2015",
            "end": "2019",
            "notes": "Thesis on incremental static analysis.",
        }
    ],
}


def get_default_draft() -> Draft:
    """
    Get the sample draft used when no real draft is available.

    Returns a fresh Draft on every call so callers can never affect each other.

    Returns:
        Complete, already-normalized Draft
    """
    return normalize_draft(DEFAULT_DRAFT)
