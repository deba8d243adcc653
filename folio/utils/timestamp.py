"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Current local time as a compact, sortable string (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_updated_at(updated_at: float, relative: bool = False) -> str:
    """
    Format a draft's updatedAt value (milliseconds since the epoch) for display.

    Args:
        updated_at: Milliseconds since the Unix epoch
        relative: If True, show relative time (e.g., "2h ago")
                 If False, show absolute time (e.g., "2025-11-13 18:45:40")

    Returns:
        Human-readable timestamp, or "never" when the value is unset or unusable

    Examples:
        format_updated_at(0)
        # "never"

        format_updated_at(1763059540000, relative=True)
        # "2h ago"
    """
    if isinstance(updated_at, bool) or not isinstance(updated_at, (int, float)) or updated_at <= 0:
        return "never"

    try:
        dt = datetime.fromtimestamp(updated_at / 1000)
    except (OverflowError, OSError, ValueError):
        return "never"

    if relative:
        return _format_relative_time(dt)
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def _format_relative_time(dt: datetime) -> str:
    """
    Format datetime as relative time in compact format (e.g., "2h ago").

    - Seconds: "30s ago"
    - Minutes: "15m ago"
    - Hours: "2h ago"
    - Days: "5d ago"
    """
    diff = datetime.now() - dt

    # Future times
    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"
    else:
        suffix = "ago"

    seconds = int(diff.total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = diff.days

    if seconds < 60:
        return f"{seconds}s {suffix}"
    elif minutes < 60:
        return f"{minutes}m {suffix}"
    elif hours < 24:
        return f"{hours}h {suffix}"
    else:
        return f"{days}d {suffix}"
