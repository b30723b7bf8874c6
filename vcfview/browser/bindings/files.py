
from typing import TYPE_CHECKING

from . import register_bindings
from vcfview.browser.commands import CommandRegistry
from vcfview.browser.state import RECORDS_TAB

if TYPE_CHECKING:
    from vcfview.browser.vcf_browser import VcfBrowser
    from vcfview.browser.state import AppState


def move_up(brws: 'VcfBrowser', state: 'AppState'):
    state.catalog.move(-1)


def move_down(brws: 'VcfBrowser', state: 'AppState'):
    state.catalog.move(1)


def open_file(brws: 'VcfBrowser', state: 'AppState'):
    brws.load_selected()
    state.tab = RECORDS_TAB


def filter_backspace(brws: 'VcfBrowser', state: 'AppState'):
    state.catalog.pop_filter_char()


def quit(brws: 'VcfBrowser', state: 'AppState'):
    return "quit"


files_bindings = {
    "up":{
        "key":"up_arrow",
        "name":"move_up",
        "method":move_up.__name__,
        "description":"Previous file",
        "category":"files",
        "_bound_method": move_up
    },
    "down":{
        "key":"down_arrow",
        "name":"move_down",
        "method":move_down.__name__,
        "description":"Next file",
        "category":"files",
        "_bound_method": move_down
    },
    "enter":{
        "key":"enter",
        "name":"open_file",
        "method":open_file.__name__,
        "description":"Open selected file",
        "category":"files",
        "_bound_method": open_file
    },
    "backspace":{
        "key":"backspace",
        "name":"filter_backspace",
        "method":filter_backspace.__name__,
        "description":"Delete last filter character",
        "category":"files",
        "_bound_method": filter_backspace
    },
    "q":{
        "key":"q",
        "name":"quit",
        "method":quit.__name__,
        "description":"Quit",
        "category":"files",
        "_bound_method": quit
    },
}


def bind_files_commands(registry: CommandRegistry):
    return register_bindings(registry, files_bindings)
