"""VT100 escape sequences shared by the terminal driver and the renderer."""

HIDE_CURSOR = b'\x1b[?25l'
SHOW_CURSOR = b'\x1b[?25h'
CURSOR_HOME = b'\x1b[H'
CLEAR_LINE = b'\x1b[K'
CLEAR_SCREEN = b'\x1b[2J'

# Push the cursor as far right and down as it goes, for size probing
CURSOR_FAR_CORNER = b'\x1b[999C\x1b[999B'
REPORT_CURSOR = b'\x1b[6n'


def move_cursor_seq(row: int, col: int) -> bytes:
    """Absolute cursor position sequence (1-indexed)."""
    return f'\x1b[{row};{col}H'.encode('ascii')
