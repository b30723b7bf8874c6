
"""Terminal VCF Viewer.

An interactive, keyboard-driven terminal browser for variant-call files:
discovers VCF files under a directory, loads their records and filters them
by chromosome, alleles and position.
"""

import logging

from vcfview.records import Record, decode_line, read_records
from vcfview.catalog import FileCatalog, discover
from vcfview.filters import FilterCriteria, Unconstrained, Exact, Range, parse_position_filter, apply_filters
from vcfview.config import get_config

__all__ = ['logger',
            'get_config',
            'Record', 'decode_line', 'read_records',
            'FileCatalog', 'discover',
            'FilterCriteria', 'Unconstrained', 'Exact', 'Range', 'parse_position_filter', 'apply_filters']

# Configure logging
logger = logging.getLogger(__name__)


# End of module
