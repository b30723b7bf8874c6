"""
Command system for the VCF viewer keybindings.

Commands are plain functions ``fn(browser, state)`` registered under a name.
Each browser context (the Files tab, the Records tab) has its own
KeybindingManager mapping keys to command names, so the same key can do
different things depending on the active tab. Bindings can be:
- Declared in code (see vcfview.browser.bindings)
- Loaded from YAML/JSON files
- Listed as help text
"""

from typing import Dict, Callable, List, Optional, TYPE_CHECKING
from dataclasses import dataclass
import yaml
import json
from pathlib import Path
import re

if TYPE_CHECKING:
    from vcfview.browser.state import AppState


# Terminal escape sequences mapped to readable names
KEY_CODES = {
    # Arrow keys
    '\x1b[A': 'up_arrow',
    '\x1b[B': 'down_arrow',
    '\x1b[C': 'right_arrow',
    '\x1b[D': 'left_arrow',

    # Other special keys
    '\x1b[H': 'home',
    '\x1b[F': 'end',
    '\x1b[3~': 'delete',
    '\x1b[5~': 'page_up',
    '\x1b[6~': 'page_down',
    '\x7f': 'backspace',
    '\x08': 'backspace',
    '\x1b': 'escape',
    '\t': 'tab',
    '\r': 'enter',
    '\n': 'enter',
    ' ': 'space',
}

# Reverse mapping for converting readable names back to codes
# (first code wins, so 'enter' -> '\r' and 'backspace' -> '\x7f')
CODE_NAMES: Dict[str, str] = {}
for _code, _name in KEY_CODES.items():
    CODE_NAMES.setdefault(_name, _code)


def normalize_key(key: str) -> str:
    """Convert a key to its canonical form (escape sequence).

    Args:
        key: Either an escape sequence or readable name like 'up_arrow'

    Returns:
        The escape sequence for the key
    """
    if key in CODE_NAMES:
        return CODE_NAMES[key]

    # aliases that read the same but arrive as different codes
    if key in KEY_CODES:
        return CODE_NAMES[KEY_CODES[key]]

    # Handle ctrl+letter combinations (e.g., 'ctrl_s' -> '\x13')
    ctrl_match = re.match(r'^ctrl_([a-z])$', key.lower())
    if ctrl_match:
        letter = ctrl_match.group(1)
        return chr(ord(letter) - ord('a') + 1)

    return key


def get_readable_key(key: str) -> str:
    """Convert an escape sequence to a readable name, or return it unchanged."""
    return KEY_CODES.get(key, key)


def is_printable(key: str) -> bool:
    """True for a single visible character (text input, not a control key)."""
    return len(key) == 1 and key.isprintable()


@dataclass
class Command:
    """A named action that can be bound to keys."""
    name: str
    method: str  # Function name, for help and debugging
    description: str
    category: str = "general"
    _bound_method: Callable = None

    def __call__(self, browser, state: 'AppState'):
        return self._bound_method(browser, state)


class CommandRegistry:
    """Registry of available browser commands."""

    def __init__(self):
        self.commands: Dict[str, Command] = {}

    def add(self, command: Command):
        self.commands[command.name] = command

    def get_command(self, name: str) -> Optional[Command]:
        return self.commands.get(name)


class KeybindingManager:
    """Maps keys to command names for one browser context."""

    def __init__(self, registry: CommandRegistry, context: str = "general"):
        self.registry = registry
        self.context = context
        self.bindings: Dict[str, str] = {}  # normalized_key -> command_name

    def bind(self, key: str, command_name: str):
        """Bind a key to a command.

        Args:
            key: Key (e.g., 'q', 'up_arrow', 'ctrl_s', '\x1b[A')
            command_name: Name of registered command
        """
        if command_name not in self.registry.commands:
            raise ValueError(f"Unknown command: {command_name}")

        self.bindings[normalize_key(key)] = command_name

    def get_command_for_key(self, key: str) -> Optional[str]:
        """Get command name for a raw key from the terminal."""
        return self.bindings.get(normalize_key(key))

    def load_from_file(self, filepath: str):
        """Load keybindings from a YAML or JSON file.

        Bindings are grouped by context; only this manager's section is read:
            bindings:
              files:
                j: move_down
              records:
                j: record_down
        """
        path = Path(filepath)

        if path.suffix in ['.yaml', '.yml']:
            with open(path) as f:
                config = yaml.safe_load(f)
        elif path.suffix == '.json':
            with open(path) as f:
                config = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {path.suffix}")

        section = (config or {}).get('bindings', {}).get(self.context, {}) or {}
        for key, command_name in section.items():
            self.bind(str(key), command_name)

    def generate_help_lines(self) -> List[str]:
        """Help text for this context, one line per binding, sorted by command."""
        lines = [f"{self.context.upper()}:"]

        items = []
        for key, cmd_name in self.bindings.items():
            command = self.registry.get_command(cmd_name)
            if command:
                items.append((key, command))

        for key, command in sorted(items, key=lambda x: x[1].name):
            key_display = self._format_key_display(key)
            lines.append(f"  {key_display:12} - {command.description}")

        return lines

    def get_footer_text(self):

        parts = []
        seen = set()

        for key, cmd_name in self.bindings.items():
            cmd = self.registry.get_command(cmd_name)
            if cmd and cmd_name not in seen:
                seen.add(cmd_name)
                parts.append(f"{self._format_key_display(key)}: {cmd.description}")

        return " | ".join(parts)

    def _format_key_display(self, key: str) -> str:
        readable = get_readable_key(key)

        display_map = {
            'up_arrow': '↑',
            'down_arrow': '↓',
            'right_arrow': '→',
            'left_arrow': '←',
            'space': 'Space',
            'enter': 'Enter',
            'tab': 'Tab',
            'backspace': 'Backspace',
            'escape': 'Esc',
        }

        return display_map.get(readable, readable)
