"""Single-keypress reader for the terminal frontend (POSIX terminals).

Arrow keys, WASD, and the action letters are read without waiting for
Enter and turned into action names such as ``"rotate"`` or ``"undo"``.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager

_ESC = "\x1b"

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "t": "rotate",
    "T": "rotate",
    "u": "undo",
    "U": "undo",
    "n": "new",
    "N": "new",
    "h": "help",
    "?": "help",
    "y": "yes",
    "Y": "yes",
    " ": "select",
    "\r": "select",
    "\n": "select",
}

# Final byte of the ``ESC [ x`` sequence each arrow key sends.
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def read_action(read: Callable[[], str]) -> str:
    """Pull one key from *read* (one character per call) and name its action.

    Returns one of "up", "down", "left", "right", "select", "rotate",
    "undo", "new", "help", "yes", "quit", an unmapped printable character,
    or "" for anything unrecognised.  A bare Escape counts as "quit".
    """
    ch = read()
    if ch != _ESC:
        return resolve(ch)
    if read() != "[":
        return "quit"
    return _ARROW_MAP.get(read(), "")


@contextmanager
def _raw_stdin() -> Iterator[None]:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def get_key() -> str:
    """Block until a key is pressed and return its action string."""
    with _raw_stdin():
        return read_action(lambda: sys.stdin.read(1))
