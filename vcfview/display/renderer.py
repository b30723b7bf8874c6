"""
Frame renderer for the VCF viewer.

Builds a full-screen frame (a list of strings with ANSI codes) from a
read-only AppState. Nothing here mutates state; the browser calls
``render`` once per key event and prints the result.
"""

from typing import List, Optional, TYPE_CHECKING
from dataclasses import dataclass
import shutil

from tabulate import tabulate

from vcfview.browser.state import FILES_TAB, RECORDS_TAB, MenuModal, TextInputModal, menu_label
from vcfview.display.colors import Colors, fit, visible_len, visible_slice
from vcfview.filters import FilterField

if TYPE_CHECKING:
    from vcfview.browser.state import AppState


TABLE_HEADERS = ["CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER"]


@dataclass
class RenderParams:
    display_width: int = 120
    display_height: int = 32
    filter_panel_width: int = 30
    modal_width_pct: int = 60
    modal_height_pct: int = 30
    color_scheme: str = "vscode"
    title: str = "VCF TUI"

    @classmethod
    def from_config(cls, cfg: dict, use_terminal_size: bool = True):
        display = cfg.get("display", {}) or {}
        width = display.get("width", cls.display_width)
        height = display.get("height", cls.display_height)
        if use_terminal_size:
            width, height = shutil.get_terminal_size((width, height))
        return cls(display_width=width, display_height=height,
                   color_scheme=display.get("color_scheme", cls.color_scheme))


class VcfRenderer:
    """Renders tabs, the active tab body, an open modal and the footer."""

    def __init__(self, params: Optional[RenderParams] = None):
        self.params = params or RenderParams()
        bg, fg = Colors.get_color_scheme(self.params.color_scheme)
        self.base = Colors(fg=fg, bg=bg).code

    def render(self, state: 'AppState', footer_text: str = "", help_lines: Optional[List[str]] = None) -> List[str]:

        width = self.params.display_width
        height = self.params.display_height

        header = self.render_tabs(state)
        footer = [self._rule(), Colors.SUBTLE + footer_text + Colors.RESET]
        body_height = max(1, height - len(header) - len(footer))

        if state.tab == FILES_TAB:
            body = self.render_files(state, body_height)
        elif state.tab == RECORDS_TAB:
            body = self.render_records(state, body_height)
        else:
            body = []

        body = (body + [""] * body_height)[:body_height]
        frame = [fit(line, width) for line in header + body + footer]

        if state.modal is not None:
            frame = self.overlay(frame, self.render_modal(state.modal))
        elif state.show_help and help_lines:
            frame = self.overlay(frame, self._box("Help (any key closes)", help_lines, height_pct=80))

        return [self.base + line + Colors.RESET for line in frame]

    # ===== Sections =====

    def render_tabs(self, state: 'AppState') -> List[str]:
        parts = []
        for i, title in enumerate(state.tab_titles):
            if i == state.tab:
                parts.append(f"{Colors.TAB_ACTIVE}{title}{Colors.RESET}{self.base}")
            else:
                parts.append(f"{Colors.TAB}{title}{Colors.RESET}{self.base}")
        bar = f" {Colors.BOLD}{self.params.title}{Colors.RESET}{self.base}  " + " │ ".join(parts)
        return [bar, self._rule()]

    def render_files(self, state: 'AppState', height: int) -> List[str]:
        catalog = state.catalog
        lines = [f"{Colors.HIGHLIGHT}File Filter: {catalog.filter}{Colors.RESET}{self.base}", ""]

        visible = catalog.visible()
        if not visible:
            lines.append(f"{Colors.SUBTLE}No matching files found{Colors.RESET}")
            return lines

        list_height = max(1, height - len(lines))
        pos = visible.index(catalog.selected) if catalog.selected in visible else 0
        start = self._window_start(pos, len(visible), list_height)

        for idx in visible[start:start + list_height]:
            name = catalog.items[idx].name
            if idx == catalog.selected:
                lines.append(f"{Colors.SELECTED}→ {name}{Colors.RESET}{self.base}")
            else:
                lines.append(f"  {name}")
        return lines

    def render_records(self, state: 'AppState', height: int) -> List[str]:
        pw = self.params.filter_panel_width
        tw = max(10, self.params.display_width - pw - 1)

        left = self.render_filter_panel(state)
        right = self.render_table(state, height, tw)

        lines = []
        for i in range(height):
            lft = left[i] if i < len(left) else ""
            rgt = right[i] if i < len(right) else ""
            lines.append(fit(lft, pw) + f"{Colors.BORDER}│{Colors.RESET}{self.base}" + fit(rgt, tw))
        return lines

    def render_filter_panel(self, state: 'AppState') -> List[str]:
        criteria = state.vcf.criteria
        fields = [FilterField.CHROM, FilterField.REF, FilterField.ALT]
        if state.position_filter:
            fields.append(FilterField.POS)

        lines = [f"{Colors.BOLD}Filter{Colors.RESET}{self.base}"]
        for f in fields:
            lines.append(f"{Colors.FILTER}{f.label}: {criteria.get(f)}{Colors.RESET}{self.base}")

        lines.append("")
        source = state.vcf.source.name if state.vcf.source else "-"
        lines.append(f"{Colors.SUBTLE}File: {source}{Colors.RESET}{self.base}")

        rec = state.vcf.selected_record
        if rec is not None:
            lines.append("")
            lines.append(f"{Colors.BOLD}Selected{Colors.RESET}{self.base}")
            lines.append(f"ID: {rec.identifier}")
            lines.append(f"QUAL: {rec.quality}")
            lines.append(f"FILTER: {rec.filter_status}")
            info = rec.info
            lines.append("INFO:")
            w = self.params.filter_panel_width - 2
            for i in range(0, len(info), w):
                lines.append("  " + info[i:i + w])
        return lines

    def render_table(self, state: 'AppState', height: int, width: int) -> List[str]:
        view = state.vcf.filtered()
        total = len(state.vcf.records)
        title = f"{Colors.BOLD}Variants{Colors.RESET}{self.base} {Colors.SUBTLE}({len(view)}/{total}){Colors.RESET}{self.base}"

        if not view:
            return [title, "", f"{Colors.SUBTLE}No variants{Colors.RESET}{self.base}"]

        body_height = max(1, height - 3)
        sel = state.vcf.selected
        start = self._window_start(sel if sel is not None else 0, len(view), body_height)
        shown = view[start:start + body_height]

        rows = [r.to_row()[:len(TABLE_HEADERS)] for r in shown]
        table = tabulate(rows, headers=TABLE_HEADERS, tablefmt="simple", disable_numparse=True).splitlines()

        lines = [title] + table[:2]
        for i, (rec, line) in enumerate(zip(shown, table[2:])):
            if sel is not None and start + i == sel:
                lines.append(f"{Colors.SELECTED}{fit(line, width)}{Colors.RESET}{self.base}")
            else:
                color = Colors.variant_color(rec.reference_allele, rec.alternate_allele)
                lines.append(f"{color}{line}{Colors.RESET}{self.base}")
        return lines

    def render_modal(self, modal) -> List[str]:
        if isinstance(modal, MenuModal):
            lines = []
            for i, item in enumerate(modal.items):
                label = menu_label(item)
                if i == modal.highlighted:
                    lines.append(f"{Colors.SELECTED}→ {label}{Colors.RESET}")
                else:
                    lines.append(f"  {label}")
            return self._box(modal.title, lines)
        elif isinstance(modal, TextInputModal):
            return self._box(modal.title, [f"{Colors.INPUT}{modal.buffer}{Colors.RESET}{Colors.BOLD}_{Colors.RESET}"])
        return []

    # ===== Layout helpers =====

    def overlay(self, frame: List[str], box: List[str]) -> List[str]:
        """Draw box centered over frame."""
        width = self.params.display_width
        box_width = max(visible_len(b) for b in box) if box else 0

        top = max(0, (len(frame) - len(box)) // 2)
        left = max(0, (width - box_width) // 2)

        out = list(frame)
        for i, bline in enumerate(box):
            row = top + i
            if row >= len(out):
                break
            base = out[row]
            out[row] = (visible_slice(base, 0, left) + self.base + fit(bline, box_width)
                        + Colors.RESET + self.base + visible_slice(base, left + box_width, width))
        return out

    def _box(self, title: str, lines: List[str], height_pct: Optional[int] = None) -> List[str]:
        inner = max(self.params.display_width * self.params.modal_width_pct // 100 - 2,
                    visible_len(title) + 2)
        inner = min(inner, max(4, self.params.display_width - 2))
        min_lines = self.params.display_height * (height_pct or self.params.modal_height_pct) // 100 - 2
        lines = lines + [""] * max(0, min_lines - len(lines))

        b = Colors.BORDER
        r = Colors.RESET + self.base
        top = f"{b}┌─{r}{Colors.BOLD}{fit(title, inner - 1)}{r}{b}┐{r}"
        out = [top]
        for line in lines:
            out.append(f"{b}│{r}{fit(line, inner)}{r}{b}│{r}")
        out.append(f"{b}└{'─' * inner}┘{r}")
        return out

    def _rule(self):
        return f"{Colors.BORDER}{'─' * self.params.display_width}{Colors.RESET}{self.base}"

    @staticmethod
    def _window_start(pos: int, n: int, height: int) -> int:
        """First index of a height-row window over n rows keeping pos in view."""
        if n <= height:
            return 0
        return max(0, min(pos - height // 2, n - height))
