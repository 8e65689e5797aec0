"""
The root driver: one full repaint of a widget tree onto a backend.
"""

import logging
from typing import List, Optional

from .backend import DEFAULT_COLOR, Backend, MemoryBackend
from .surface import Surface
from .widgets import Widget

logger = logging.getLogger(__name__)


def draw(root: Optional[Widget], backend: Backend):
    """Clear ``backend``, paint ``root`` over the whole screen and flush.

    A ``root`` of None leaves the screen blank. The backend is flushed even
    if a widget raises.
    """
    backend.clear(DEFAULT_COLOR, DEFAULT_COLOR)
    try:
        if root is None:
            return
        surface = Surface.fullscreen(backend)
        logger.debug("drawing %s onto %dx%d",
                     type(root).__name__, surface.width, surface.height)
        root.draw(surface)
    finally:
        backend.flush()


def render_lines(root: Optional[Widget], width: int, height: int) -> List[str]:
    """Draw ``root`` onto an in-memory screen and return its rows as text."""
    backend = MemoryBackend(width, height)
    draw(root, backend)
    return backend.lines()
