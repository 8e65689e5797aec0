"""
Terminal backends: the cell grid the engine paints into.

A backend owns a :class:`CellBuffer`, reports its size, resets it before a
draw pass and presents it afterwards. The engine writes into the buffer by
absolute coordinate and never keeps a buffer of its own.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple

from blessed import Terminal

logger = logging.getLogger(__name__)

DEFAULT_COLOR = None


@dataclass(frozen=True)
class Cell:
    """One character cell with its foreground and background colour tokens."""
    char: str = ' '
    fg: Any = DEFAULT_COLOR
    bg: Any = DEFAULT_COLOR


class CellBuffer:
    """A mutable width x height grid of cells addressed by absolute position.

    Writes outside the grid are ignored; reads outside it raise IndexError.
    """

    def __init__(self, width: int, height: int, fill: Cell = Cell()):
        self.width = max(0, width)
        self.height = max(0, height)
        self.rows: List[List[Cell]] = [
            [fill] * self.width for _ in range(self.height)
        ]

    def __getitem__(self, pos: Tuple[int, int]) -> Cell:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} buffer")
        return self.rows[y][x]

    def __setitem__(self, pos: Tuple[int, int], cell: Cell):
        x, y = pos
        if 0 <= x < self.width and 0 <= y < self.height:
            self.rows[y][x] = cell

    def fill(self, cell: Cell):
        """Overwrite every cell."""
        for row in self.rows:
            row[:] = [cell] * self.width

    def line(self, y: int) -> str:
        """Return the characters of row ``y`` as a string."""
        return ''.join(cell.char for cell in self.rows[y])

    def lines(self) -> List[str]:
        return [self.line(y) for y in range(self.height)]


class Backend(Protocol):
    """What the engine needs from a terminal."""

    def size(self) -> Tuple[int, int]:
        ...

    def clear(self, fg: Any, bg: Any) -> None:
        ...

    def flush(self) -> None:
        ...

    def cell_buffer(self) -> CellBuffer:
        ...


class MemoryBackend:
    """A headless backend keeping its cells in memory.

    Every :meth:`flush` records the text of the buffer in :attr:`frames`,
    which makes it useful for tests and for rendering widgets to strings.
    """

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.buffer = CellBuffer(width, height)
        self.frames: List[List[str]] = []

    def size(self):
        return self.width, self.height

    def resize(self, width: int, height: int):
        """Change the reported size; takes effect on the next clear()."""
        self.width = width
        self.height = height

    def clear(self, fg=DEFAULT_COLOR, bg=DEFAULT_COLOR):
        blank = Cell(' ', fg, bg)
        if (self.buffer.width, self.buffer.height) != (self.width, self.height):
            self.buffer = CellBuffer(self.width, self.height, blank)
        else:
            self.buffer.fill(blank)

    def flush(self):
        self.frames.append(self.buffer.lines())

    def cell_buffer(self):
        return self.buffer

    @property
    def flush_count(self) -> int:
        return len(self.frames)

    def lines(self) -> List[str]:
        """Text of the buffer as it is right now."""
        return self.buffer.lines()


class BlessedBackend:
    """A backend presenting its cells on a blessed Terminal.

    Colour tokens are interpreted at flush time only: an ``int`` selects a
    palette colour (``term.color(n)`` / ``term.on_color(n)``), a ``str`` names
    a blessed formatter (``'yellow'`` as foreground, ``'on_yellow'`` as
    background) and ``None`` is the terminal default.

    Attributes:
        term: Blessed Terminal instance
        buffer: The cells painted since the last clear()
    """

    def __init__(self, term: Optional[Terminal] = None):
        self.term = term or Terminal()
        self.buffer = CellBuffer(self.term.width, self.term.height)

    def size(self):
        return self.term.width, self.term.height

    def clear(self, fg=DEFAULT_COLOR, bg=DEFAULT_COLOR):
        """Reset the buffer, resizing it if the terminal changed size."""
        blank = Cell(' ', fg, bg)
        width, height = self.size()
        if (self.buffer.width, self.buffer.height) != (width, height):
            logger.debug("resizing cell buffer to %dx%d", width, height)
            self.buffer = CellBuffer(width, height, blank)
        else:
            self.buffer.fill(blank)

    def cell_buffer(self):
        return self.buffer

    def flush(self):
        """Print every row of the buffer, switching colours only on change."""
        for y, row in enumerate(self.buffer.rows):
            print(self.term.move(y, 0) + self._render_row(row), end='')
        print(self.term.normal, end='', flush=True)

    def _render_row(self, row: List[Cell]) -> str:
        out = []
        current = None
        for cell in row:
            colors = (cell.fg, cell.bg)
            if colors != current:
                out.append(self.term.normal)
                out.append(self._style(cell.fg, cell.bg))
                current = colors
            out.append(cell.char)
        return ''.join(out)

    def _style(self, fg, bg) -> str:
        style = ''
        if isinstance(fg, int):
            style += self.term.color(fg)
        elif fg:
            style += getattr(self.term, fg)
        if isinstance(bg, int):
            style += self.term.on_color(bg)
        elif bg:
            style += getattr(self.term, 'on_' + bg)
        return style
