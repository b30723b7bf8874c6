"""Tests for key normalisation and keybinding management."""

import json

import pytest

from vcfview.browser.commands import (Command, CommandRegistry, KeybindingManager, normalize_key,
                                      get_readable_key, is_printable)


def noop(browser, state):
    return "done"


def make_registry():
    registry = CommandRegistry()
    registry.add(Command(name="noop", method=noop.__name__, description="Do nothing",
                         category="test", _bound_method=noop))
    return registry


def test_normalize_key():
    assert normalize_key('enter') == '\r'
    assert normalize_key('\n') == '\r'
    assert normalize_key('up_arrow') == '\x1b[A'
    assert normalize_key('backspace') == '\x7f'
    assert normalize_key('\x08') == '\x7f'
    assert normalize_key('ctrl_s') == '\x13'
    assert normalize_key('q') == 'q'


def test_readable_key():
    assert get_readable_key('\x1b[B') == 'down_arrow'
    assert get_readable_key('\x1b') == 'escape'
    assert get_readable_key('x') == 'x'


def test_is_printable():
    assert is_printable('a')
    assert is_printable(' ')
    assert is_printable('é')
    assert not is_printable('\x1b[A')
    assert not is_printable('\t')


def test_add_and_call():
    registry = make_registry()
    cmd = registry.get_command("noop")
    assert cmd.method == "noop"
    assert cmd(None, None) == "done"
    assert registry.get_command("missing") is None


def test_bind_and_lookup():
    manager = KeybindingManager(make_registry(), context="files")
    manager.bind('enter', 'noop')
    assert manager.get_command_for_key('\r') == 'noop'
    assert manager.get_command_for_key('\n') == 'noop'
    assert manager.get_command_for_key('x') is None


def test_bind_unknown_command():
    manager = KeybindingManager(make_registry())
    with pytest.raises(ValueError):
        manager.bind('x', 'missing')


def test_load_from_yaml_reads_own_section(tmp_path):
    path = tmp_path / "keys.yml"
    path.write_text("bindings:\n  files:\n    x: noop\n  records:\n    y: noop\n")

    manager = KeybindingManager(make_registry(), context="files")
    manager.load_from_file(str(path))
    assert manager.bindings == {'x': 'noop'}


def test_load_from_json(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text(json.dumps({"bindings": {"records": {"down_arrow": "noop"}}}))

    manager = KeybindingManager(make_registry(), context="records")
    manager.load_from_file(str(path))
    assert manager.get_command_for_key('\x1b[B') == 'noop'


def test_load_unsupported_format(tmp_path):
    path = tmp_path / "keys.txt"
    path.write_text("")
    with pytest.raises(ValueError):
        KeybindingManager(make_registry()).load_from_file(str(path))


def test_help_and_footer_text():
    manager = KeybindingManager(make_registry(), context="files")
    manager.bind('escape', 'noop')
    manager.bind('n', 'noop')
    assert manager.generate_help_lines()[0] == "FILES:"
    assert "Esc" in manager.generate_help_lines()[1]
    assert manager.get_footer_text() == "Esc: Do nothing"
