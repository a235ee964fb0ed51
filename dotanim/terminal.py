# terminal.py

from typing import Dict, Optional

from rich.console import Console
from rich.control import Control
from rich.style import Style

# Named colors usable by TerminalSink, mapped to rich color names
COLORS: Dict[str, str] = {
    'GREEN': 'green3',
    'PINK': 'pink1',
    'BLUE': 'blue1',
    'GRAY': 'gray50',
    'YELLOW': 'yellow1',
    'WHITE': 'white',
}


class TerminalSink:
    """
    Sink that redraws each frame in place on the current terminal line.

    Frames are padded to the widest one written so far, so unpadded dot
    cycles do not leave stale dots behind. The cursor is hidden from the
    first frame until finish().
    """

    def __init__(self, color: Optional[str] = None, console: Optional[Console] = None):
        if color is not None and color not in COLORS:
            raise ValueError(f"Unknown color '{color}', expected one of {', '.join(COLORS)}")
        self.console = console or Console(highlight=False)
        self.style = Style(color=COLORS[color]) if color else Style()
        self._width = 0
        self._cursor_hidden = False

    def __call__(self, text: str) -> None:
        if not self._cursor_hidden:
            self.console.show_cursor(False)
            self._cursor_hidden = True
        self._width = max(self._width, len(text))
        self.console.control(Control.move_to_column(0))
        self.console.print(text.ljust(self._width), style=self.style, end="",
                           markup=False, highlight=False, soft_wrap=True)
        self.console.file.flush()

    def finish(self, final_text: Optional[str] = None) -> None:
        """End the animated line, optionally replacing it with final_text."""
        if final_text is not None:
            self.console.control(Control.move_to_column(0))
            self.console.print(final_text.ljust(self._width), style=self.style, end="",
                               markup=False, highlight=False, soft_wrap=True)
        self.console.print()
        if self._cursor_hidden:
            self.console.show_cursor(True)
            self._cursor_hidden = False
        self._width = 0
