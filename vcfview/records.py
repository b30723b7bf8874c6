
from typing import List, Optional, Union
from dataclasses import dataclass
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
MIN_FIELDS = 5
MISSING = "."


@dataclass(frozen=True)
class Record:
    """One variant line of a VCF file.

    All fields are kept as text, position included, so the original
    formatting survives and non-numeric values are tolerated.
    """
    chromosome: str
    position: str
    identifier: str
    reference_allele: str
    alternate_allele: str
    quality: str = MISSING
    filter_status: str = MISSING
    info: str = MISSING

    @property
    def label(self) -> str:
        return f"{self.chromosome}:{self.position} {self.reference_allele}>{self.alternate_allele}"

    def to_row(self) -> List[str]:
        return [self.chromosome, self.position, self.identifier, self.reference_allele,
                self.alternate_allele, self.quality, self.filter_status, self.info]


def decode_line(line: str) -> Optional[Record]:
    """Decode one line of text into a Record.

    Returns None for comment lines and for lines with fewer than five
    tab-separated fields. Field content is not validated.
    """
    line = line.rstrip("\r\n")
    if line.startswith(COMMENT_MARKER):
        return None

    fields = line.split('\t')
    if len(fields) < MIN_FIELDS:
        return None

    optional = fields[5:8] + [MISSING] * (8 - max(len(fields), 5))

    return Record(
        chromosome=fields[0],
        position=fields[1],
        identifier=fields[2],
        reference_allele=fields[3],
        alternate_allele=fields[4],
        quality=optional[0],
        filter_status=optional[1],
        info=optional[2],
    )


def read_records(path: Union[str, Path]) -> List[Record]:
    """Decode every record of a file.

    A file that cannot be opened, read or decoded degrades to an empty list;
    the failure is only logged.
    """
    records = []
    try:
        with open(path, 'r', encoding='utf-8', newline='\n') as f:
            for line in f:
                record = decode_line(line)
                if record is not None:
                    records.append(record)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read records from {path}: {e}")
        return []

    logger.debug(f"Loaded {len(records)} records from {path}")
    return records
