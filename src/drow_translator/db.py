"""
Database layer for drow-translator.

One SQLite database holds the bilingual dictionary:
- drow_dictionary(Drow, Common, Notes): one row per word or phrase pair,
  searchable from either column.

The table layout matches dictionaries built for the hosted translator, so an
existing drow_dictionary.db can be used as-is. PRAGMA user_version tracks the
schema version of databases created here.
"""
import sqlite3
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple
from contextlib import contextmanager

from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

DICTIONARY_SCHEMA_VERSION = 1
TABLE_NAME = 'drow_dictionary'
LANGUAGE_COLUMNS = ('Drow', 'Common')


@contextmanager
def connection(db_path: Path):
    """Open a read-write SQLite connection for maintenance work.

    The default rollback journal is kept so the file can later be opened
    read-only without -wal/-shm side files.
    """
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def readonly_connection(db_path: Path):
    """Open the dictionary read-only.

    Raises FileNotFoundError instead of letting SQLite create an empty
    database at a mistyped path.
    """
    db_path = Path(db_path)
    if not db_path.is_file():
        raise FileNotFoundError(f"Dictionary database can't be found at {db_path}")
    conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


def init_dictionary_db(db_path: Path) -> None:
    """Initialize the dictionary database with schema version 1.

    Idempotent: safe to call multiple times, and safe on a legacy dictionary
    that already has the table. Does not drop existing data.

    Schema:
        drow_dictionary(Drow, Common, Notes)
        UNIQUE(Drow, Common), indexed on both language columns
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with connection(db_path) as conn:
        version = conn.execute('PRAGMA user_version').fetchone()[0]
        if version == 0:
            conn.executescript(f'''
                CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                    Drow TEXT NOT NULL,
                    Common TEXT NOT NULL,
                    Notes TEXT DEFAULT '',
                    UNIQUE(Drow, Common)
                );
                CREATE INDEX IF NOT EXISTS idx_{TABLE_NAME}_drow ON {TABLE_NAME}(Drow);
                CREATE INDEX IF NOT EXISTS idx_{TABLE_NAME}_common ON {TABLE_NAME}(Common);
                PRAGMA user_version = {DICTIONARY_SCHEMA_VERSION};
            ''')


def _column(language: str) -> str:
    if language not in LANGUAGE_COLUMNS:
        raise ValueError(f"Invalid language id: {language}")
    return language


# ─────────────────────────────────────────────────────────────────────────────
# Lookups
# ─────────────────────────────────────────────────────────────────────────────

def lookup_entry(
    conn: sqlite3.Connection,
    word: str,
    source_lang: str,
    target_lang: str,
) -> Optional[Dict[str, Any]]:
    """Return {'translation', 'notes'} for the first row whose source column
    equals `word`, or None. Takes an open connection so one request can reuse it.
    """
    source = _column(source_lang)
    target = _column(target_lang)
    row = conn.execute(
        f'SELECT {target} AS translation, Notes AS notes FROM {TABLE_NAME} '
        f'WHERE {source} = ? ORDER BY rowid LIMIT 1',
        (word,),
    ).fetchone()
    if row is None:
        return None
    return {'translation': row['translation'] or '', 'notes': row['notes'] or ''}


def get_entries(db_path: Path) -> List[Dict[str, Any]]:
    """Return all dictionary rows, ordered by the Common word."""
    with connection(db_path) as conn:
        rows = conn.execute(
            f'SELECT Drow, Common, Notes FROM {TABLE_NAME} ORDER BY Common, Drow'
        ).fetchall()
    return [{'drow': r['Drow'], 'common': r['Common'], 'notes': r['Notes'] or ''} for r in rows]


def get_entry_count(db_path: Path) -> int:
    with connection(db_path) as conn:
        row = conn.execute(f'SELECT COUNT(*) FROM {TABLE_NAME}').fetchone()
    return row[0]


# ─────────────────────────────────────────────────────────────────────────────
# Maintenance
# ─────────────────────────────────────────────────────────────────────────────

def add_entry(db_path: Path, drow: str, common: str, notes: str = '') -> None:
    """Insert or replace a word pair (upsert semantics).

    If the (Drow, Common) pair exists its notes are replaced.
    """
    add_entries(db_path, [(drow, common, notes)])


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    retry=retry_if_exception_type(sqlite3.OperationalError),
    reraise=True
)
def add_entries(db_path: Path, entries: Iterable[Tuple[str, str, str]]) -> int:
    """Upsert many (drow, common, notes) rows in a single transaction.

    Retried when the database is locked by another writer.
    Returns the number of rows written.
    """
    rows = list(entries)
    with connection(db_path) as conn:
        conn.executemany(
            f'''
            INSERT OR REPLACE INTO {TABLE_NAME} (Drow, Common, Notes)
            VALUES (?, ?, ?)
            ''',
            rows,
        )
        conn.commit()
    return len(rows)


def delete_entry(db_path: Path, drow: str, common: str) -> bool:
    """Delete a word pair. Returns True if a row was deleted."""
    with connection(db_path) as conn:
        cursor = conn.execute(
            f'DELETE FROM {TABLE_NAME} WHERE Drow = ? AND Common = ?',
            (drow, common),
        )
        conn.commit()
    return cursor.rowcount > 0
