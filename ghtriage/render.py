"""Console rendering of the triage list (ANSI 256-color)."""

from enum import IntEnum
from typing import Iterable, List

from ghtriage.models import ItemState, NotificationLevel, Reviewable
from ghtriage.triage import TriageEntry


class TerminalColor(IntEnum):
    """xterm-256 foreground color indexes."""

    GREEN = 2
    YELLOW = 3
    GRAY = 8
    CYAN = 14
    DARK_YELLOW = 58
    FADED_PURPLE = 103


LEVEL_COLORS = {
    NotificationLevel.OWNED: TerminalColor.CYAN,
    NotificationLevel.SUBSCRIBED: TerminalColor.GREEN,
    NotificationLevel.TAGGED: TerminalColor.YELLOW,
    NotificationLevel.TEAM_TAGGED: TerminalColor.DARK_YELLOW,
}


def to_color(text: str, color: TerminalColor) -> str:
    return f"\x1b[38;5;{int(color)}m{text}\x1b[0m"


class Renderer:
    """Formats triage entries as two lines each: level + title, then URL."""

    def __init__(self, color: bool = True) -> None:
        self._color = color

    def _paint(self, text: str, color: TerminalColor | None) -> str:
        if not self._color or color is None:
            return text
        return to_color(text, color)

    def format_level(self, level: NotificationLevel) -> str:
        return self._paint(level.value, LEVEL_COLORS.get(level))

    def format_title(self, title: str, item: Reviewable) -> str:
        if item.state is ItemState.CLOSED:
            return self._paint(title, TerminalColor.FADED_PURPLE)
        return title

    def format_entry(self, entry: TriageEntry) -> List[str]:
        return [
            f"[{self.format_level(entry.level)}] {self.format_title(entry.title, entry.item)}",
            f"  {self._paint(entry.item.html_url, TerminalColor.GRAY)}",
        ]

    def render(self, entries: Iterable[TriageEntry]) -> str:
        lines: List[str] = []
        for entry in entries:
            lines.extend(self.format_entry(entry))
        return "\n".join(lines)
