"""Display formatting for route durations and saved routes."""

from backend.app.models.route import SavedRoute


def format_duration(minutes: int) -> str:
    """90 -> "1 hour 30 minutes"; 0 -> "N/A"."""
    hours, mins = divmod(max(minutes, 0), 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours} hour{'s' if hours > 1 else ''}")
    if mins > 0:
        parts.append(f"{mins} minute{'s' if mins > 1 else ''}")
    return " ".join(parts) or "N/A"


def format_duration_short(minutes: int) -> str:
    """90 -> "1hr 30min"; 0 -> "N/A"."""
    hours, mins = divmod(max(minutes, 0), 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}hr")
    if mins > 0:
        parts.append(f"{mins}min")
    return " ".join(parts) or "N/A"


def truncate(text: str, limit: int = 60) -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."


def saved_route_caption(route: SavedRoute) -> str:
    """One-line wishlist caption, e.g. "Saved: Jun 10, 2025 - 1hr 30min"."""
    saved = f"{route.saved_at:%b} {route.saved_at.day}, {route.saved_at.year}"
    return f"Saved: {saved} - {format_duration_short(route.total_estimated_time)}"
