"""ASCII terminal renderer for obstacle maps and paths."""

from __future__ import annotations

import sys
from typing import Iterable

from ...core.components.cell import Cell
from ...core.spatial.obstacle_map import ObstacleMap


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPHS = {
    "blocked": ("#", "white"),
    "free": (".", "reset"),
    "path": ("*", "yellow"),
    "agent": ("@", "green"),
}


class TerminalView:
    """Minimal grid viewer, optionally using ANSI colours."""

    def __init__(self, colour: bool = False) -> None:
        self.colour = colour
        self.enabled: bool = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle(self) -> bool:
        """Toggle rendering. Returns ``True`` if enabled after toggle."""

        self.enabled = not self.enabled
        return self.enabled

    def render_to_string(
        self,
        obstacle_map: ObstacleMap,
        path: Iterable[Cell] = (),
        agent: Cell | None = None,
    ) -> str:
        """Return ``obstacle_map`` as rows of glyphs with ``path`` overlaid."""

        if obstacle_map.bounds is None:
            raise ValueError("cannot render an unbounded map")
        width, height = obstacle_map.bounds
        on_path = set(path)

        lines: list[str] = []
        for y in range(height):
            row: list[str] = []
            for x in range(width):
                cell = Cell(x, y)
                if cell == agent:
                    kind = "agent"
                elif not obstacle_map.is_walkable(cell):
                    kind = "blocked"
                elif cell in on_path:
                    kind = "path"
                else:
                    kind = "free"
                row.append(self._glyph(kind))
            if self.colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return "\n".join(lines)

    def render(
        self,
        obstacle_map: ObstacleMap,
        path: Iterable[Cell] = (),
        agent: Cell | None = None,
    ) -> None:
        """Clear the terminal and draw the map if the view is enabled."""

        if not self.enabled:
            return
        sys.stdout.write("\x1b[H\x1b[2J")  # clear screen
        sys.stdout.write(self.render_to_string(obstacle_map, path, agent) + "\n")
        sys.stdout.flush()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _glyph(self, kind: str) -> str:
        glyph, colour = _GLYPHS[kind]
        if not self.colour:
            return glyph
        return f"{_COLOURS.get(colour, '')}{glyph}"


__all__ = ["TerminalView"]
