
from typing import TYPE_CHECKING

from . import register_bindings
from vcfview.browser.commands import CommandRegistry
from vcfview.browser.state import FILES_TAB, MenuModal

if TYPE_CHECKING:
    from vcfview.browser.vcf_browser import VcfBrowser
    from vcfview.browser.state import AppState


def record_up(brws: 'VcfBrowser', state: 'AppState'):
    sel = state.vcf.selected
    if sel is not None and sel > 0:
        state.vcf.selected = sel - 1


def record_down(brws: 'VcfBrowser', state: 'AppState'):
    n = len(state.vcf.filtered())
    sel = state.vcf.selected
    if sel is None:
        if n > 0:
            state.vcf.selected = 0
    elif sel + 1 < n:
        state.vcf.selected = sel + 1


def open_filter_menu(brws: 'VcfBrowser', state: 'AppState'):
    state.modal = MenuModal(items=state.menu_items)


def back_to_files(brws: 'VcfBrowser', state: 'AppState'):
    state.tab = FILES_TAB


records_bindings = {
    "up":{
        "key":"up_arrow",
        "name":"record_up",
        "method":record_up.__name__,
        "description":"Previous variant",
        "category":"records",
        "_bound_method": record_up
    },
    "down":{
        "key":"down_arrow",
        "name":"record_down",
        "method":record_down.__name__,
        "description":"Next variant",
        "category":"records",
        "_bound_method": record_down
    },
    "f":{
        "key":"f",
        "name":"open_filter_menu",
        "method":open_filter_menu.__name__,
        "description":"Filter menu",
        "category":"records",
        "_bound_method": open_filter_menu
    },
    "escape":{
        "key":["escape", "q"],
        "name":"back_to_files",
        "method":back_to_files.__name__,
        "description":"Back to files",
        "category":"records",
        "_bound_method": back_to_files
    },
}


def bind_records_commands(registry: CommandRegistry):
    return register_bindings(registry, records_bindings)
