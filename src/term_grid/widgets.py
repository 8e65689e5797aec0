"""
Widgets: the nodes of a UI tree.

Every widget declares a (minimum, maximum) requirement per axis and draws
itself onto the surface it is given. Containers split their surface among
their children with :func:`~term_grid.layout.distribute` and hand each child a
clipped sub-surface.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

from .backend import DEFAULT_COLOR
from .layout import UNBOUNDED, Requirement, distribute


class Widget:
    """Base class for everything that can be placed in a UI tree."""

    def req_width(self) -> Requirement:
        """Return the (minimum, maximum) width this widget wants."""
        raise NotImplementedError

    def req_height(self) -> Requirement:
        """Return the (minimum, maximum) height this widget wants."""
        raise NotImplementedError

    def draw(self, surface):
        """Paint the widget onto ``surface``."""
        raise NotImplementedError


@dataclass(frozen=True)
class Label(Widget):
    """A single line of constant text."""
    text: str = ''

    def req_width(self):
        return Requirement(len(self.text), len(self.text))

    def req_height(self):
        return Requirement(1, 1)

    def draw(self, surface):
        surface.print(self.text)


@dataclass(frozen=True)
class Blank(Widget):
    """Empty space used to pad out rows and columns."""
    min_width: int = 0
    max_width: int = 0
    min_height: int = 0
    max_height: int = 0

    @classmethod
    def fill(cls) -> 'Blank':
        """A spacer that takes whatever room is left on either axis."""
        return cls(0, UNBOUNDED, 0, UNBOUNDED)

    def req_width(self):
        return Requirement(self.min_width, self.max_width)

    def req_height(self):
        return Requirement(self.min_height, self.max_height)

    def draw(self, surface):
        pass


@dataclass(frozen=True)
class Tint(Widget):
    """Draws its child with different colours.

    A colour left at the default keeps whatever the surrounding surface uses.
    The colours only apply to the child's region.
    """
    child: Widget
    fg: Any = DEFAULT_COLOR
    bg: Any = DEFAULT_COLOR

    def req_width(self):
        return self.child.req_width()

    def req_height(self):
        return self.child.req_height()

    def draw(self, surface):
        surface = surface.clip(0, 0, surface.width, surface.height)
        if self.fg is not DEFAULT_COLOR:
            surface.set_foreground(self.fg)
        if self.bg is not DEFAULT_COLOR:
            surface.set_background(self.bg)
        self.child.draw(surface)


class _Sequence(Widget):
    """Shared plumbing for the containers holding an ordered list of widgets."""

    def __init__(self, *children: Widget):
        self._children: Tuple[Widget, ...] = tuple(children)

    @property
    def children(self) -> Tuple[Widget, ...]:
        return self._children

    def __iter__(self) -> Iterator[Widget]:
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def __getitem__(self, index):
        return self.children[index]

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.children == other.children

    def __hash__(self):
        return hash((type(self), self.children))

    def __repr__(self):
        return f'{type(self).__name__}{self.children!r}'

    def _along(self, sel) -> Requirement:
        """Requirement when the children are laid end to end."""
        reqs = [Requirement(*sel(child)) for child in self.children]
        return Requirement(sum(r.minimum for r in reqs),
                           sum(r.maximum for r in reqs))

    def _across(self, sel) -> Requirement:
        """Requirement when the children sit side by side."""
        reqs = [Requirement(*sel(child)) for child in self.children]
        return Requirement(max((r.minimum for r in reqs), default=0),
                           max((r.maximum for r in reqs), default=0))


class Row(_Sequence):
    """Divides its surface horizontally among its children."""

    def req_width(self):
        return self._along(lambda w: w.req_width())

    def req_height(self):
        return self._across(lambda w: w.req_height())

    def draw(self, surface):
        sizes = distribute(surface.width,
                           [child.req_width() for child in self.children])
        x = 0
        for child, width in zip(self.children, sizes):
            child.draw(surface.clip(x, 0, width, surface.height))
            x += width


class Column(_Sequence):
    """Stacks its children vertically."""

    def req_width(self):
        return self._across(lambda w: w.req_width())

    def req_height(self):
        return self._along(lambda w: w.req_height())

    def draw(self, surface):
        sizes = distribute(surface.height,
                           [child.req_height() for child in self.children])
        y = 0
        for child, height in zip(self.children, sizes):
            child.draw(surface.clip(0, y, surface.width, height))
            y += height


class Grid(_Sequence):
    """Aligns its rows into a table.

    Column ``j`` gets one width for every row and row ``i`` one height for
    every cell, both taken from the cells' minimum requirements. Cells are
    separated by a single blank column. The rows are only used as lists of
    cells; their own :meth:`Row.draw` is never called.
    """

    def __init__(self, *rows: Row):
        for row in rows:
            if not isinstance(row, Row):
                raise TypeError(f'Grid rows must be Row instances, not {type(row).__name__}')
        super().__init__(*rows)

    def req_width(self):
        # One padding cell per row, not per column gap.
        req = self._across(lambda w: w.req_width())
        return Requirement(req.minimum + len(self), req.maximum + len(self))

    def req_height(self):
        return self._along(lambda w: w.req_height())

    def column_widths(self) -> List[int]:
        """Width of every column: the widest minimum among its cells."""
        cols = max((len(row) for row in self.children), default=0)
        widths = [0] * cols
        for row in self.children:
            for j, cell in enumerate(row):
                min_width, _ = cell.req_width()
                widths[j] = max(widths[j], min_width)
        return widths

    def row_heights(self) -> List[int]:
        """Height of every row: the tallest minimum among its cells."""
        heights = []
        for row in self.children:
            height = 0
            for cell in row:
                min_height, _ = cell.req_height()
                height = max(height, min_height)
            heights.append(height)
        return heights

    def draw(self, surface):
        widths = self.column_widths()
        heights = self.row_heights()
        y = 0
        for row, height in zip(self.children, heights):
            x = 0
            for cell, width in zip(row, widths):
                cell.draw(surface.clip(x, y, width, height))
                x += width + 1
            y += height
