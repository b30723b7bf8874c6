

import os
import select
import sys
import tty
import termios

# how long to wait for the rest of an escape sequence before treating
# the ESC byte as a bare Escape key
ESCAPE_TIMEOUT = 0.05

ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def _pending(fd, timeout=ESCAPE_TIMEOUT):
    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


def _utf8_length(lead):
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def get_user_keypress():
    """Get a single keypress from the user.

    Arrow and other CSI keys come back as their full escape sequence,
    e.g. '\\x1b[A'; a lone Escape comes back as '\\x1b'.
    """
    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        raw = os.read(fd, 1)

        if raw == b'\x1b' and _pending(fd):
            raw += os.read(fd, 1)
            if raw[-1:] in (b'[', b'O'):
                # parameters up to the final byte of the sequence
                while _pending(fd):
                    ch = os.read(fd, 1)
                    raw += ch
                    if b'@' <= ch <= b'~':
                        break
        elif raw:
            need = _utf8_length(raw[0]) - 1
            if need:
                raw += os.read(fd, need)

        return raw.decode("utf-8", errors="replace")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def enter_screen():
    sys.stdout.write(ENTER_ALT_SCREEN + HIDE_CURSOR)
    sys.stdout.flush()


def leave_screen():
    sys.stdout.write(SHOW_CURSOR + LEAVE_ALT_SCREEN)
    sys.stdout.flush()


def clear_screen():
    sys.stdout.write("\x1b[2J\x1b[H")
