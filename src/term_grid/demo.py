"""
Example program: a small table of facts about swallows.

Run with ``python -m term_grid.demo``; any key exits.
"""

import logging
import signal
from typing import Optional

from blessed import Terminal

from .backend import BlessedBackend
from .render import draw
from .widgets import Column, Grid, Label, Row, Tint, Widget

logger = logging.getLogger(__name__)


def sparrow() -> Grid:
    """Build the demo grid."""
    return Grid(
        Row(
            Label('wind speed:'),
            Label('40 knots/s'),
        ),
        Row(
            Label('species:'),
            Label('african swallow'),
            Tint(Column(
                Label('// multiple line'),
                Label('// comment'),
            ), fg='yellow'),
        ),
        Row(
            Label('laden:'),
            Tint(Label('true'), fg='red'),
            Tint(Label('// weight of coconut required!'), fg='yellow'),
        ),
    )


class DemoController:
    """Draws a widget tree full screen until a key is pressed.

    The tree is redrawn whenever the terminal is resized.
    """

    def __init__(
        self,
        root: Optional[Widget],
        *,
        term: Optional[Terminal] = None,
        inkey_timeout: float = 0.1,
        register_resize_handler: bool = True,
    ):
        self.root = root
        self.term = term or Terminal()
        self.backend = BlessedBackend(self.term)
        self.inkey_timeout = inkey_timeout
        self._resize_pending = False
        if register_resize_handler:
            signal.signal(signal.SIGWINCH, self._handle_sigwinch)

    def _handle_sigwinch(self, signum, frame):
        """Pick up the new terminal size and trigger a redraw."""
        self.term = Terminal()
        self.backend.term = self.term
        self._resize_pending = True

    def redraw(self):
        draw(self.root, self.backend)

    def run(self):
        """Enter the event loop; returns after the first keypress."""
        if self.root is None:
            raise RuntimeError(
                "DemoController.run() called with no root widget."
            )

        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            self.redraw()
            while True:
                if self._resize_pending:
                    logger.debug("terminal resized to %dx%d",
                                 self.term.width, self.term.height)
                    self._resize_pending = False
                    self.redraw()
                key = self.term.inkey(timeout=self.inkey_timeout)
                if key:
                    return key


def main():
    DemoController(sparrow()).run()


if __name__ == '__main__':
    main()
