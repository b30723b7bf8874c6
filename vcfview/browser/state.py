
from typing import List, Optional, Tuple, Union
from dataclasses import dataclass, field
from pathlib import Path

from vcfview.catalog import FileCatalog
from vcfview.filters import FilterCriteria, FilterField, apply_filters
from vcfview.records import Record

FILES_TAB = 0
RECORDS_TAB = 1

CLEAR_ALL = "Clear all"
CANCEL = "Cancel"

MENU_ITEMS = (FilterField.CHROM, FilterField.REF, FilterField.ALT, CLEAR_ALL, CANCEL)
MENU_ITEMS_WITH_POS = (FilterField.CHROM, FilterField.REF, FilterField.ALT, FilterField.POS, CLEAR_ALL, CANCEL)


def menu_label(item: Union[FilterField, str]) -> str:
    if isinstance(item, FilterField):
        return item.label
    return item


@dataclass
class MenuModal:
    """Filter menu: a list of actions with one highlighted entry."""
    items: Tuple[Union[FilterField, str], ...] = MENU_ITEMS_WITH_POS
    highlighted: int = 0

    @property
    def title(self):
        return "Filter Menu (Up/Down, Enter)"

    def move(self, delta: int):
        self.highlighted = max(0, min(len(self.items) - 1, self.highlighted + delta))

    @property
    def current(self) -> Union[FilterField, str]:
        return self.items[self.highlighted]


@dataclass
class TextInputModal:
    """Text entry for one filter field."""
    target: FilterField
    buffer: str = ""

    @property
    def title(self):
        return f"{self.target.label} filter (Esc cancel, Enter accept)"


Modal = Optional[Union[MenuModal, TextInputModal]]


@dataclass
class VcfViewState:
    """Records of the loaded file plus the record cursor and filter criteria."""
    records: List[Record] = field(default_factory=list)
    selected: Optional[int] = None
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    source: Optional[Path] = None

    def filtered(self) -> List[Record]:
        # recomputed on every read; record counts are small
        return apply_filters(self.records, self.criteria)

    @property
    def selected_record(self) -> Optional[Record]:
        if self.selected is None:
            return None
        view = self.filtered()
        if self.selected < len(view):
            return view[self.selected]
        return None

    def replace(self, records: List[Record], source: Optional[Path] = None):
        self.records = records
        self.source = source
        self.selected = None

    def clamp_selection(self):
        """Keep the record cursor inside the filtered view."""
        if self.selected is None:
            return
        n = len(self.filtered())
        if n == 0:
            self.selected = None
        elif self.selected >= n:
            self.selected = n - 1


@dataclass
class AppState:
    """Root state of the viewer: one owner, mutated only between key events."""
    catalog: FileCatalog = field(default_factory=FileCatalog)
    vcf: VcfViewState = field(default_factory=VcfViewState)
    tab: int = FILES_TAB
    tab_titles: Tuple[str, ...] = ("Files", "VCF Viewer")
    modal: Modal = None
    show_help: bool = False
    position_filter: bool = True

    def next_tab(self):
        self.tab = (self.tab + 1) % len(self.tab_titles)

    @property
    def menu_items(self):
        return MENU_ITEMS_WITH_POS if self.position_filter else MENU_ITEMS
