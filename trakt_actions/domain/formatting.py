"""Episode number formatting for user-facing messages."""

from typing import Optional

FORMATS = {
    "default": "{season}x{episode}",
    "padded": "{season}x{episode:02d}",
    "english": "S{season:02d}E{episode:02d}",
}


def format_episode_number(season: int, episode: int, style: str = "default") -> str:
    """Format an episode number like 1x3, 1x03 or S01E03."""
    template = FORMATS.get(style, FORMATS["default"])
    return template.format(season=season, episode=episode)


def checkin_message(title: Optional[str], number: Optional[str] = None) -> str:
    parts = [p for p in (title, number) if p]
    return "checked in to " + " ".join(parts)
