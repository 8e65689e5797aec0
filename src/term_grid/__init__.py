"""
Terminal Grid Layout Library

A small layout and rendering engine for character-grid user interfaces.
Widgets declare minimum and maximum sizes, containers negotiate space among
their children, and every widget paints into a clipped surface on the cell
buffer of a backend (a blessed Terminal, or memory).
"""

from .layout import UNBOUNDED, Requirement, distribute
from .backend import (
    DEFAULT_COLOR,
    Backend,
    BlessedBackend,
    Cell,
    CellBuffer,
    MemoryBackend,
)
from .surface import ABSENT, AbsentSurface, Surface
from .widgets import Blank, Column, Grid, Label, Row, Tint, Widget
from .render import draw, render_lines

__all__ = [
    'UNBOUNDED',
    'Requirement',
    'distribute',
    'DEFAULT_COLOR',
    'Backend',
    'BlessedBackend',
    'Cell',
    'CellBuffer',
    'MemoryBackend',
    'ABSENT',
    'AbsentSurface',
    'Surface',
    'Widget',
    'Label',
    'Blank',
    'Tint',
    'Row',
    'Column',
    'Grid',
    'draw',
    'render_lines',
]

__version__ = '0.1.0'
