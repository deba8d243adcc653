"""
Contact link building.

Turns a profile into the ordered list of contact links a layout displays:
one link per non-empty channel, in the order the layout asks for.

Target formatting per channel:
- email:   "mailto:" + address as written
- phone:   "tel:" + number with all whitespace removed
- website, github, linkedin: value used verbatim (callers supply full URLs)
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from folio.contexts.drafting.normalizer import normalize_profile

MAIL_PREFIX = "mailto:"
TEL_PREFIX = "tel:"

# Channel name -> Profile attribute holding its value
CHANNEL_FIELDS = {
    "website": "website",
    "github": "github",
    "linkedin": "linkedin",
    "email": "email",
    "phone": "phone",
}

DEFAULT_LINK_ORDER = ("website", "github", "linkedin", "email", "phone")

DEFAULT_LINK_LABELS = {
    "website": "Website",
    "github": "GitHub",
    "linkedin": "LinkedIn",
    "email": "Email",
    "phone": "Phone",
}

_WHITESPACE = re.compile(r"\s+")


@dataclass
class ContactLink:
    """
    A single contact link.

    Attributes:
        channel: Channel name (e.g., "email", "github")
        label: Display label (e.g., "Email", "Call")
        target: Link target (URL, mailto: or tel:)
        value: Raw profile value the link was built from
    """

    channel: str
    label: str
    target: str
    value: str

    @property
    def opens_new_context(self) -> bool:
        """Pages open in a new tab; mail and phone links hand off to a protocol handler."""
        return not self.target.startswith((MAIL_PREFIX, TEL_PREFIX))


def format_target(channel: str, value: str) -> str:
    """
    Build the link target for a channel value.

    Examples:
        >>> format_target("email", "a@b.com")
        'mailto:a@b.com'
        >>> format_target("phone", "+1 555 000 1111")
        'tel:+15550001111'
    """
    if channel == "email":
        return f"{MAIL_PREFIX}{value}"
    if channel == "phone":
        return f"{TEL_PREFIX}{_WHITESPACE.sub('', value)}"
    return value


def build_contact_links(
    profile: Any,
    order: Sequence[str] = DEFAULT_LINK_ORDER,
    labels: Optional[Dict[str, str]] = None,
) -> List[ContactLink]:
    """
    Build contact links for the channels present on a profile.

    Args:
        profile: Profile instance or profile-shaped mapping (camelCase keys)
        order: Channel priority order; unknown channel names are skipped
        labels: Label overrides per channel, merged over DEFAULT_LINK_LABELS

    Returns:
        One ContactLink per non-empty channel, in `order`
    """
    profile = normalize_profile(profile)
    merged_labels = {**DEFAULT_LINK_LABELS, **(labels or {})}

    links = []
    for channel in order:
        attr = CHANNEL_FIELDS.get(channel)
        if attr is None:
            continue
        value = getattr(profile, attr)
        if not value:
            continue
        links.append(
            ContactLink(
                channel=channel,
                label=merged_labels[channel],
                target=format_target(channel, value),
                value=value,
            )
        )
    return links
