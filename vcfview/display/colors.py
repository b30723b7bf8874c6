"""
Color management for the VCF viewer display.

ANSI codes for the terminal frame, plus helpers to measure and cut strings
that carry escape sequences.
"""

import re

ANSI_RE = re.compile(r"\x1b(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class Colors:

    RESET = '\x1b[0m'

    BOLD = '\033[1m'
    HIGHLIGHT = '\x1b[38;5;148m' # goldish

    # Frame
    TAB = '\x1b[38;5;44m'        # cyan
    TAB_ACTIVE = '\x1b[1m\x1b[38;5;220m'
    BORDER = '\x1b[38;5;240m'
    SUBTLE = '\x1b[38;5;240m'
    FILTER = '\x1b[38;5;114m'    # green
    INPUT = '\x1b[38;5;44m'
    SELECTED = '\x1b[1m\x1b[38;5;220m\x1b[48;5;238m'

    # Variant classes
    SNP = '\033[38;5;214m'
    INSERTION = '\033[38;5;220m'
    DELETION = '\033[38;5;202m'

    _color_frm_8b = '\x1b[{b_or_f};5;{c}m'

    _fgi = 38
    _bgi = 48

    def __init__(self, fg = 8, bg = None):

        self.fg_color = fg
        self.bg_color = bg

    @property
    def fg_code(self):
        return self.get_color(self.fg_color, background = False)

    @property
    def bg_code(self):
        return self.get_color(self.bg_color, background = True)

    @property
    def code(self):
        return self.bg_code + self.fg_code

    @classmethod
    def get_color(cls, color_spec, background = False):
        if color_spec is None:
            return ""
        return cls._color_frm_8b.format(b_or_f = cls._bgi if background else cls._fgi, c=color_spec)

    @classmethod
    def get_color_scheme(cls, name):
        """
        returns bg, fg
        """
        if name == "gray":
            return 244, 236
        elif name == "blue":
            return 17, 38
        elif name == "icy":
            return 146, 225
        elif name == "vscode":
            return 234, 224
        else:
            return None, None

    @classmethod
    def variant_color(cls, ref: str, alt: str) -> str:
        """Color for an allele pair: SNP, insertion or deletion."""
        alt = alt.split(",")[0]
        if len(ref) == len(alt):
            return cls.SNP
        elif len(alt) > len(ref):
            return cls.INSERTION
        return cls.DELETION

    @classmethod
    def scrub_codes(cls, line):
        return ANSI_RE.sub("", line)


def visible_len(line):
    """Get the length of a string excluding ANSI escape sequences."""
    return len(Colors.scrub_codes(line))


def visible_slice(line, start=0, stop=None):
    """
    Slice a string based on visible character positions, preserving ANSI codes.

    Codes seen before start are replayed so the slice keeps its color.
    """
    tokens = []
    pos = 0
    for match in ANSI_RE.finditer(line):
        for char in line[pos:match.start()]:
            tokens.append(('char', char))
        tokens.append(('ansi', match.group()))
        pos = match.end()
    for char in line[pos:]:
        tokens.append(('char', char))

    if stop is None:
        stop = sum(1 for t in tokens if t[0] == 'char')

    result = []
    pending = []
    visible_idx = 0

    for token_type, token_val in tokens:
        if visible_idx >= stop:
            break
        if token_type == 'ansi':
            if visible_idx < start:
                pending.append(token_val)
            else:
                result.append(token_val)
        else:
            if visible_idx >= start:
                if pending:
                    result.extend(pending)
                    pending = []
                result.append(token_val)
            visible_idx += 1

    if result and any(t.startswith('\x1b') for t in result):
        result.append(Colors.RESET)

    return ''.join(result)


def fit(line, width):
    """Cut or pad line to exactly width visible characters."""
    vlen = visible_len(line)
    if vlen > width:
        return visible_slice(line, 0, width)
    return line + " " * (width - vlen)
