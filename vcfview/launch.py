import argparse
import logging
import sys

from vcfview.config import get_config
from vcfview.catalog import FileCatalog
from vcfview.browser.vcf_browser import VcfBrowser
from vcfview.display.renderer import VcfRenderer, RenderParams


def setup_logging(log_file=None, debug=False):
    """Send logs to a file; the terminal belongs to the viewer."""
    pkg_logger = logging.getLogger("vcfview")
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        pkg_logger.addHandler(handler)
        pkg_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    else:
        pkg_logger.addHandler(logging.NullHandler())
    pkg_logger.propagate = False


def build_parser():

    parser = argparse.ArgumentParser(prog="vcfview",
                                     description="Browse and filter VCF files in the terminal")
    parser.add_argument("--root", "-r", default = ".", type = str,
                        help="Directory searched for files (default: current directory)")
    parser.add_argument("--extension", "-e", default = None, type = str,
                        help="File extension to look for (default from config: vcf)")
    parser.add_argument("--no-position-filter", default = False, action = "store_true",
                        help="Hide the POS entry of the filter menu")
    parser.add_argument("--keybindings", "-k", default = None, type = str, dest = "keybinding_file",
                        help="YAML or JSON file with extra key bindings")
    parser.add_argument("--config", "-c", default = None, type = str,
                        help="YAML config file (default: ./local.yaml if present)")
    parser.add_argument("--log-file", default = None, type = str,
                        help="Write log messages to this file")
    parser.add_argument("--debug", "-d", default = False, action = "store_true",
                        help="Debug mode")
    return parser


def get_browser(args, cfg) -> VcfBrowser:

    extension = args.extension or cfg.get("extension", "vcf")
    position_filter = cfg.get("position_filter", True) and not args.no_position_filter

    catalog = FileCatalog.from_directory(args.root, extension)
    renderer = VcfRenderer(RenderParams.from_config(cfg))

    return VcfBrowser(
        catalog,
        renderer = renderer,
        position_filter = position_filter,
        tab_titles = cfg.get("tab_titles"),
        keybinding_file = args.keybinding_file or cfg.get("keybinding_file"),
        debug = args.debug,
    )


def main(argv=None):

    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.debug)
    cfg = get_config(args.config)

    brws = get_browser(args, cfg)
    brws.start()
    return 0


if __name__=="__main__":
    sys.exit(main())
