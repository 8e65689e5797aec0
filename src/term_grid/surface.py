"""
Clipped drawing surfaces.

A :class:`Surface` is a rectangular view onto a backend's cell buffer with its
own paint cursor and colours. Containers hand each child a surface derived
with :meth:`Surface.clip`, so a widget can never paint outside the rectangle
it was given. Clipping outside the parent yields :data:`ABSENT`, a surface on
which every operation does nothing.
"""

import logging
from typing import Any

from .backend import DEFAULT_COLOR, Backend, Cell, CellBuffer

logger = logging.getLogger(__name__)


class Surface:
    """A bounded view onto a cell buffer.

    Attributes:
        x, y: Absolute origin within the buffer
        width, height: Extent of the surface
        dx, dy: Paint cursor, relative to the origin
        fg, bg: Colours used by subsequent paint operations
    """

    def __init__(self, buffer: CellBuffer, x: int, y: int, width: int, height: int,
                 fg: Any = DEFAULT_COLOR, bg: Any = DEFAULT_COLOR):
        self.buffer = buffer
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.dx = 0
        self.dy = 0
        self.fg = fg
        self.bg = bg

    @classmethod
    def fullscreen(cls, backend: Backend) -> 'Surface':
        """Return a surface covering the whole of ``backend``."""
        width, height = backend.size()
        return cls(backend.cell_buffer(), 0, 0, max(0, width), max(0, height))

    def __bool__(self):
        return True

    def __repr__(self):
        return (f'{type(self).__name__}(x={self.x}, y={self.y}, '
                f'width={self.width}, height={self.height})')

    def clip(self, x: int, y: int, width: int, height: int):
        """Derive a sub-surface relative to this surface's origin.

        Returns :data:`ABSENT` if any argument is negative or the rectangle
        reaches past the right or bottom edge of this surface. The new surface
        starts with this surface's colours and its cursor at the origin.
        """
        if (x < 0 or y < 0 or width < 0 or height < 0
                or x + width > self.width or y + height > self.height):
            logger.debug("discarding clip (%d, %d, %d, %d) of %r",
                         x, y, width, height, self)
            return ABSENT
        return Surface(self.buffer, self.x + x, self.y + y, width, height,
                       self.fg, self.bg)

    def set_foreground(self, color: Any):
        self.fg = color

    def set_background(self, color: Any):
        self.bg = color

    def move_to(self, dx: int, dy: int):
        """Place the cursor at (dx, dy), clamped to the surface."""
        self.dx = max(0, min(dx, self.width))
        self.dy = max(0, min(dy, self.height))

    def clear(self):
        """Blank the whole surface in the current colours and home the cursor."""
        blank = Cell(' ', self.fg, self.bg)
        for row in range(self.y, self.y + self.height):
            for col in range(self.x, self.x + self.width):
                self.buffer[col, row] = blank
        self.dx, self.dy = 0, 0

    def print(self, text: str):
        """Paint ``text`` at the cursor, wrapping at the right edge.

        Text that does not fit above the bottom edge is dropped.
        """
        if self.width <= 0:
            return
        n = 0
        while n < len(text) and self.dy < self.height:
            if self.dx >= self.width:
                self.dx = 0
                self.dy += 1
                continue
            chunk = text[n:n + self.width - self.dx]
            self._paint_row(chunk)
            n += len(chunk)

    def println(self, text: str = ''):
        """Like :meth:`print`, then move the cursor to the next row."""
        self.print(text)
        self.dx = 0
        self.dy += 1

    def _paint_row(self, chunk: str):
        row = self.y + self.dy
        col = self.x + self.dx
        for i, char in enumerate(chunk):
            self.buffer[col + i, row] = Cell(char, self.fg, self.bg)
        self.dx += len(chunk)


class AbsentSurface:
    """The surface returned by an out-of-bounds clip.

    It is falsy, has no extent and ignores every operation, so widgets given
    no room simply paint nothing.
    """

    x = y = width = height = dx = dy = 0
    fg = bg = DEFAULT_COLOR

    def __bool__(self):
        return False

    def __repr__(self):
        return 'ABSENT'

    def clip(self, x, y, width, height):
        return self

    def set_foreground(self, color):
        pass

    def set_background(self, color):
        pass

    def move_to(self, dx, dy):
        pass

    def clear(self):
        pass

    def print(self, text):
        pass

    def println(self, text=''):
        pass


ABSENT = AbsentSurface()
