
from typing import List, Optional, Union
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "vcf"


def discover(root: Union[str, Path] = ".", extension: str = DEFAULT_EXTENSION) -> List[Path]:
    """Find files ending in ``.<extension>`` below root, in directory order.

    Entries that cannot be read (permissions, broken links) are skipped, so a
    partial listing is returned rather than an error. Symlinked directories
    are not descended.
    """
    suffix = "." + extension.lstrip(".")
    return _walk(Path(root), suffix)


def _walk(parent_dir: Path, suffix: str) -> List[Path]:

    outfs = []

    try:
        entries = list(parent_dir.iterdir())
    except OSError as e:
        logger.debug(f"Skipping unreadable directory {parent_dir}: {e}")
        return outfs

    for f in entries:
        try:
            if f.is_dir() and not f.is_symlink():
                outfs.extend(_walk(f, suffix))
            elif f.suffix == suffix and f.is_file():
                outfs.append(f)
        except OSError as e:
            logger.debug(f"Skipping {f}: {e}")
            continue

    return outfs


class FileCatalog:
    """Ordered list of discovered files with a cursor and a name filter."""

    def __init__(self, items: Optional[List[Path]] = None):
        self.items: List[Path] = list(items or [])
        self.selected: Optional[int] = 0 if self.items else None
        self.filter: str = ""

    @classmethod
    def from_directory(cls, root: Union[str, Path] = ".", extension: str = DEFAULT_EXTENSION) -> "FileCatalog":
        items = discover(root, extension)
        logger.info(f"Discovered {len(items)} .{extension} files under {root}")
        return cls(items)

    def __len__(self):
        return len(self.items)

    @property
    def selected_path(self) -> Optional[Path]:
        if self.selected is None:
            return None
        return self.items[self.selected]

    def select(self, index: int):
        """Move the cursor to index; out-of-range requests are ignored."""
        if 0 <= index < len(self.items):
            self.selected = index

    def matches(self, path: Path) -> bool:
        return not self.filter or self.filter.lower() in str(path).lower()

    def visible(self) -> List[int]:
        """Catalog indices of the entries passing the name filter."""
        return [i for i, p in enumerate(self.items) if self.matches(p)]

    def move(self, delta: int):
        """Step the cursor to the next visible entry in the direction of delta.

        Stays put at either end. With no name filter this is a plain +/-1
        clamped to the catalog bounds.
        """
        if self.selected is None or delta == 0:
            return

        step = 1 if delta > 0 else -1
        idx = self.selected + step
        while 0 <= idx < len(self.items):
            if self.matches(self.items[idx]):
                self.select(idx)
                return
            idx += step

    def push_filter_char(self, char: str):
        self.filter += char

    def pop_filter_char(self):
        self.filter = self.filter[:-1]
