"""Interactive full-screen viewer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Protocol

from notec.cli.core.input import KeyReader
from notec.cli.core.terminal import RawTerminal, TerminalSize
from notec.config import ViewerConfig
from notec.core.document import Document
from notec.core.keys import QUIT_KEY
from notec.core.viewport import EditorState
from notec.io.reader import load
from notec.render.screen import ScreenRenderer

logger = logging.getLogger(__name__)


class ViewerTerminal(Protocol):
    """What the viewer needs from a terminal; RawTerminal provides it."""

    def __enter__(self) -> "ViewerTerminal": ...
    def __exit__(self, *exc_info: object) -> None: ...
    def read_byte(self) -> bytes: ...
    def write(self, data: bytes) -> None: ...
    def clear_screen(self) -> None: ...
    def query_window_size(self) -> TerminalSize: ...


class ViewerApp:
    """
    The render / read key / apply key loop.

    Each pass scrolls the viewport to the cursor, redraws the screen,
    then waits for one key. Ctrl-Q clears the screen and ends the loop;
    navigation keys move the cursor; everything else is ignored.
    """

    def __init__(
        self,
        document: Document,
        terminal: ViewerTerminal,
        renderer: Optional[ScreenRenderer] = None,
    ) -> None:
        self.running = False
        self.terminal = terminal
        self.input = KeyReader(terminal)
        self.renderer = renderer or ScreenRenderer()
        self.state = EditorState(document=document)

    def run(self) -> None:
        """Main application loop."""
        with self.terminal:
            size = self.terminal.query_window_size()
            self.state.viewport.screenrows = size.rows
            self.state.viewport.screencols = size.cols
            logger.info("Screen is %d rows x %d cols", size.rows, size.cols)

            self.running = True
            while self.running:
                self.step()

    def step(self) -> bool:
        """Run one render/input cycle. Returns False once the user quits."""
        self.state.adjust_scroll()
        self.renderer.refresh(self.state, self.terminal)
        self._handle_input()
        return self.running

    def _handle_input(self) -> None:
        key = self.input.read_key()

        if key == QUIT_KEY:
            self.terminal.clear_screen()
            self.running = False
            return

        # Only navigation for now; other keys are left for editing
        self.state.process_key(key)


def run_viewer(path: Optional[Path] = None, config: Optional[ViewerConfig] = None) -> None:
    """Open ``path`` (or an empty buffer) in the viewer."""
    config = config or ViewerConfig()
    document = load(path) if path is not None else Document()
    terminal = RawTerminal(read_timeout_ds=config.read_timeout_ds)
    ViewerApp(document, terminal).run()


if __name__ == "__main__":
    run_viewer(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
