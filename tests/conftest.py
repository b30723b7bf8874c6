"""Shared fixtures: small VCF files on disk and browsers built over them."""

import pytest

from vcfview.catalog import FileCatalog
from vcfview.browser.vcf_browser import VcfBrowser
from vcfview.display.renderer import VcfRenderer, RenderParams

UP = '\x1b[A'
DOWN = '\x1b[B'
ENTER = '\r'
ESC = '\x1b'
TAB = '\t'
BACKSPACE = '\x7f'

HEADER = "##fileformat=VCFv4.2\n#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\n"

SAMPLE_LINES = [
    "chr1\t100\trs1\tA\tG\t50\tPASS\tDP=10",
    "chr1\t250\trs2\tA\tT\t40\tPASS\tDP=12",
    "chr2\t100\trs3\tC\tG\t30\tq10\tDP=3",
]


def write_vcf(path, lines, header=HEADER):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(header + "\n".join(lines) + "\n")
    return path


@pytest.fixture
def vcf_files(tmp_path):
    first = write_vcf(tmp_path / "a.vcf", SAMPLE_LINES)
    second = write_vcf(tmp_path / "b.vcf", ["chrX\t5\t.\tG\tGA"])
    third = write_vcf(tmp_path / "c.vcf", [])
    return [first, second, third]


def make_browser(paths, **kwargs):
    renderer = VcfRenderer(RenderParams(display_width=100, display_height=30))
    return VcfBrowser(FileCatalog(paths), renderer=renderer, **kwargs)


@pytest.fixture
def browser(vcf_files):
    return make_browser(vcf_files)


def press(brws, *keys):
    result = None
    for key in keys:
        result = brws.handle_input(key)
    return result
