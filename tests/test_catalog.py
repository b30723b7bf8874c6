"""Tests for file discovery and the file catalog cursor."""

import os
from pathlib import Path

import pytest

from vcfview.catalog import FileCatalog, discover


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    return path


def test_discover_descends_and_matches_extension(tmp_path):
    expected = {
        touch(tmp_path / "a.vcf"),
        touch(tmp_path / "sub" / "b.vcf"),
        touch(tmp_path / "sub" / "deep" / "deeper" / "c.vcf"),
    }
    touch(tmp_path / "x.vcf.gz")
    touch(tmp_path / "notes.txt")
    touch(tmp_path / "upper.VCF")
    (tmp_path / "folder.vcf").mkdir()

    found = discover(tmp_path)
    assert set(found) == expected
    assert len(found) == len(expected)


def test_discover_other_extension(tmp_path):
    touch(tmp_path / "a.vcf")
    bed = touch(tmp_path / "b.bed")
    assert discover(tmp_path, "bed") == [bed]
    assert discover(tmp_path, ".bed") == [bed]


def test_discover_missing_root(tmp_path):
    assert discover(tmp_path / "nope") == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_discover_ignores_broken_links(tmp_path):
    good = touch(tmp_path / "good.vcf")
    os.symlink(tmp_path / "gone.vcf", tmp_path / "broken.vcf")
    assert discover(tmp_path) == [good]


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="permissions are not enforced")
def test_discover_skips_unreadable_directory(tmp_path):
    good = touch(tmp_path / "good.vcf")
    locked = tmp_path / "locked"
    touch(locked / "hidden.vcf")
    locked.chmod(0)
    try:
        assert discover(tmp_path) == [good]
    finally:
        locked.chmod(0o755)


def test_empty_catalog_has_no_selection():
    catalog = FileCatalog([])
    assert catalog.selected is None
    assert catalog.selected_path is None
    catalog.move(1)
    catalog.select(0)
    assert catalog.selected is None


def test_select_ignores_out_of_range():
    catalog = FileCatalog([Path("a.vcf"), Path("b.vcf"), Path("c.vcf")])
    assert catalog.selected == 0

    catalog.select(2)
    assert catalog.selected == 2
    catalog.select(3)
    catalog.select(-1)
    assert catalog.selected == 2


def test_move_is_clamped():
    catalog = FileCatalog([Path("a.vcf"), Path("b.vcf"), Path("c.vcf")])
    catalog.select(2)
    catalog.move(1)
    assert catalog.selected == 2
    catalog.move(-1)
    assert catalog.selected == 1
    catalog.move(-1)
    catalog.move(-1)
    assert catalog.selected == 0


def test_name_filter_limits_visible_entries_and_movement():
    catalog = FileCatalog([Path("sub/sample1.vcf"), Path("other.vcf"), Path("SUB/sample2.vcf")])

    for ch in "sample":
        catalog.push_filter_char(ch)
    assert catalog.visible() == [0, 2]

    catalog.move(1)
    assert catalog.selected == 2
    catalog.move(1)
    assert catalog.selected == 2

    catalog.pop_filter_char()
    assert catalog.filter == "sampl"


def test_filter_matches_full_path_case_insensitive():
    catalog = FileCatalog([Path("Data/x.vcf"), Path("y.vcf")])
    catalog.filter = "data"
    assert catalog.visible() == [0]


def test_from_directory(tmp_path):
    touch(tmp_path / "one.vcf")
    catalog = FileCatalog.from_directory(tmp_path)
    assert len(catalog) == 1
    assert catalog.selected_path == tmp_path / "one.vcf"
