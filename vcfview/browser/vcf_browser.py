
import sys
from typing import Dict, List, Optional
from pathlib import Path
import logging

from vcfview.browser.commands import CommandRegistry, KeybindingManager, get_readable_key, is_printable
from vcfview.browser.bindings.general import bind_general_commands
from vcfview.browser.bindings.files import bind_files_commands
from vcfview.browser.bindings.records import bind_records_commands
from vcfview.browser.state import (AppState, VcfViewState, MenuModal, TextInputModal,
                                   FILES_TAB, RECORDS_TAB, CLEAR_ALL, CANCEL)
from vcfview.browser import utils
from vcfview.catalog import FileCatalog
from vcfview.display.renderer import VcfRenderer
from vcfview.filters import FilterField
from vcfview.records import read_records

logger = logging.getLogger(__name__)

CONTEXTS = {FILES_TAB: "files", RECORDS_TAB: "records"}


class VcfBrowser:
    """Interactive VCF viewer: owns the AppState and routes key events.

    An open modal takes every key first. Otherwise the key is looked up in
    the keybindings of the active tab; unbound printable keys typed on the
    Files tab go to the file-name filter.
    """

    footer_text = "press ? for help"

    def __init__(self, catalog: Optional[FileCatalog] = None, **kwargs):

        self.debug = kwargs.get("debug", False)

        if self.debug:
            logger.setLevel("DEBUG")
        else:
            logger.setLevel("WARNING")

        if catalog is None:
            catalog = FileCatalog.from_directory(kwargs.get("root", "."), kwargs.get("extension", "vcf"))

        self.state = AppState(
            catalog=catalog,
            vcf=VcfViewState(),
            tab_titles=tuple(kwargs.get("tab_titles") or ("Files", "VCF Viewer")),
            position_filter=kwargs.get("position_filter", True),
        )

        self.renderer: VcfRenderer = kwargs.get("renderer") or VcfRenderer()

        # Command system
        self.registry = CommandRegistry()
        self.keybindings: Dict[int, KeybindingManager] = {
            tab: KeybindingManager(self.registry, context=name) for tab, name in CONTEXTS.items()
        }
        self.register_default_commands()

        keybinding_file = kwargs.get("keybinding_file")
        if keybinding_file and Path(keybinding_file).exists():
            for manager in self.keybindings.values():
                manager.load_from_file(keybinding_file)

        self._rendered_view: List[str] = []

        # the first file is opened eagerly
        if self.state.catalog.selected is not None:
            self.load_selected()

    def register_default_commands(self):

        general = bind_general_commands(self.registry)

        binds = {FILES_TAB: {}, RECORDS_TAB: {}}
        binds[FILES_TAB].update(bind_files_commands(self.registry))
        binds[RECORDS_TAB].update(bind_records_commands(self.registry))

        for tab, keys in binds.items():
            keys.update(general)
            for k, n in keys.items():
                self.keybindings[tab].bind(k, n)

    @property
    def active_keybindings(self) -> KeybindingManager:
        return self.keybindings[self.state.tab]

    def load_selected(self):
        """Replace the loaded records with those of the selected file."""
        path = self.state.catalog.selected_path
        if path is None:
            return
        self.state.vcf.replace(read_records(path), source=path)
        logger.debug(f"Opened {path} with {len(self.state.vcf.records)} records")

    # ===== Main loop =====

    def start(self):

        utils.enter_screen()
        try:
            self.run_browser()
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.cleanup()

    def run_browser(self):
        """Main browser loop."""

        while True:
            self.render()
            self.display()

            key = self.get_input()

            result = self.handle_input(key)
            if result == "quit":
                break

    def render(self):
        footer = self.active_keybindings.get_footer_text() or self.footer_text
        help_lines = self.help_lines() if self.state.show_help else None
        self._rendered_view = self.renderer.render(self.state, footer_text=footer, help_lines=help_lines)

    def display(self):

        utils.clear_screen()
        sys.stdout.write("\r\n".join(self._rendered_view))
        sys.stdout.flush()

    def get_input(self):
        k = utils.get_user_keypress()
        if k == '\x03':
            raise KeyboardInterrupt
        return k

    def help_lines(self) -> List[str]:
        lines = []
        for manager in self.keybindings.values():
            lines.extend(manager.generate_help_lines())
            lines.append("")
        lines.extend([
            "FILTER MENU:",
            "  ↑/↓          - Move highlight",
            "  Enter        - Choose",
            "  Esc          - Close",
            "",
            "FILE FILTER:",
            "  Other printable keys typed on the Files tab filter file names.",
            f"  Bound keys cannot be typed into the filter: {' '.join(self.reserved_filter_keys())}",
        ])
        return lines

    def reserved_filter_keys(self) -> List[str]:
        """Printable keys bound on the Files tab, so never added to the file filter."""
        return sorted(k for k in self.keybindings[FILES_TAB].bindings if is_printable(k))

    # ===== Input handling =====

    def handle_input(self, key: str):
        """Handle one key event.

        Returns "quit" when the session should end, otherwise None.
        """
        state = self.state

        if state.show_help:
            state.show_help = False
            return None

        if state.modal is not None:
            self.handle_modal_key(key)
            return None

        command_name = self.active_keybindings.get_command_for_key(key)

        if not command_name:
            if state.tab == FILES_TAB:
                self.handle_files_text(key)
            else:
                logger.debug(f"No command bound to key: {repr(key)}")
            return None

        command = self.registry.get_command(command_name)
        if not command:
            logger.warning(f"Command not found in registry: {command_name}")
            return None

        try:
            return command(self, state)
        except Exception as e:
            logger.error(f"Error executing command {command_name}: {e}")
            if self.debug:
                raise
            return None

    def handle_files_text(self, key: str):
        if is_printable(key):
            self.state.catalog.push_filter_char(key)

    def handle_modal_key(self, key: str):
        modal = self.state.modal
        name = get_readable_key(key)

        if isinstance(modal, MenuModal):
            if name == 'up_arrow':
                modal.move(-1)
            elif name == 'down_arrow':
                modal.move(1)
            elif name == 'enter':
                self.choose_menu_item(modal)
            elif name == 'escape':
                self.close_modal()

        elif isinstance(modal, TextInputModal):
            if name == 'enter':
                self.commit_filter(modal.target, modal.buffer)
            elif name == 'escape':
                self.close_modal()
            elif name == 'backspace':
                modal.buffer = modal.buffer[:-1]
            elif is_printable(key):
                modal.buffer += key

    def choose_menu_item(self, modal: MenuModal):
        item = modal.current
        if isinstance(item, FilterField):
            self.state.modal = TextInputModal(target=item)
        elif item == CLEAR_ALL:
            self.state.vcf.criteria.clear()
            self.state.vcf.clamp_selection()
            self.close_modal()
        elif item == CANCEL:
            self.close_modal()

    def commit_filter(self, field: FilterField, text: str):
        self.state.vcf.criteria.set(field, text.strip())
        self.state.vcf.clamp_selection()
        logger.debug(f"{field.label} filter set to {text.strip()!r}")
        self.close_modal()

    def close_modal(self):
        self.state.modal = None

    def cleanup(self):
        utils.leave_screen()
