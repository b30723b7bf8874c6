
from typing import TYPE_CHECKING

from . import register_bindings
from vcfview.browser.commands import CommandRegistry

if TYPE_CHECKING:
    from vcfview.browser.vcf_browser import VcfBrowser
    from vcfview.browser.state import AppState


def next_tab(brws: 'VcfBrowser', state: 'AppState'):
    state.next_tab()


def show_help(brws: 'VcfBrowser', state: 'AppState'):
    state.show_help = True


general_bindings = {
    "tab":{
        "key":"tab",
        "name":"next_tab",
        "method":next_tab.__name__,
        "description":"Switch tab",
        "category":"general",
        "_bound_method": next_tab
    },
    "?":{
        "key":"?",
        "name":"show_help",
        "method":show_help.__name__,
        "description":"Show help",
        "category":"general",
        "_bound_method": show_help
    },
}


def bind_general_commands(registry: CommandRegistry):
    return register_bindings(registry, general_bindings)
