"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamp formatting
"""

from folio.utils.timestamp import format_updated_at, now

__all__ = ["format_updated_at", "now"]
