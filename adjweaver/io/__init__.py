"""
AdjWeaver I/O module.

Sequence record streaming from FASTA/FASTQ files and standard input.
"""

from .io_core_module import (
    SequenceRecord,
    InputStreamError,
    STDIN_PATH,
    is_gzipped,
    open_file,
    read_sequences,
    sniff_format,
)

__all__ = [
    'SequenceRecord',
    'InputStreamError',
    'STDIN_PATH',
    'is_gzipped',
    'open_file',
    'read_sequences',
    'sniff_format',
]
