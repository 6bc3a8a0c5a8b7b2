"""
Dictionary Manager: TSV export/import utilities.

Word lists are exchanged as tab-separated files:
    drow<TAB>common[<TAB>notes]
Lines starting with # are comments.
"""
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Tuple

from drow_translator.db import add_entries, get_entries

TSV_HEADER = '# drow\tcommon\tnotes'
IMPORT_BATCH_SIZE = 500


def export_tsv(db_path: Path, output: TextIO = None) -> int:
    """Export the dictionary to TSV format. Returns number of entries exported."""
    out = output or sys.stdout
    entries = get_entries(db_path)
    out.write(TSV_HEADER + '\n')
    for entry in entries:
        out.write(f"{entry['drow']}\t{entry['common']}\t{entry['notes']}\n")
    return len(entries)


def read_tsv(tsv_path: Path) -> List[Tuple[str, str, str]]:
    """Parse a TSV word list into (drow, common, notes) rows.

    Blank lines, comments and lines with fewer than two columns are skipped.
    """
    rows = []
    with open(tsv_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.rstrip('\n')
            if not line.strip() or line.startswith('#'):
                continue
            parts = line.split('\t')
            if len(parts) < 2:
                continue  # skip malformed lines
            drow = parts[0].strip()
            common = parts[1].strip()
            notes = parts[2].strip() if len(parts) > 2 else ''
            if drow and common:
                rows.append((drow, common, notes))
    return rows


def import_rows(
    db_path: Path,
    rows: List[Tuple[str, str, str]],
    on_progress: Optional[Callable[[int], None]] = None,
) -> int:
    """Write parsed (drow, common, notes) rows to the dictionary in batches.

    `on_progress` is called with the size of each committed batch.
    Returns: number of entries imported
    """
    count = 0
    for start in range(0, len(rows), IMPORT_BATCH_SIZE):
        written = add_entries(db_path, rows[start:start + IMPORT_BATCH_SIZE])
        count += written
        if on_progress:
            on_progress(written)
    return count


def import_tsv(
    db_path: Path,
    tsv_path: Path,
    on_progress: Optional[Callable[[int], None]] = None,
) -> int:
    """Import a TSV word list into the dictionary database."""
    return import_rows(db_path, read_tsv(tsv_path), on_progress)
