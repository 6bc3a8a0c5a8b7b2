"""
Dictionary lookup capability used by the translation engine.

The engine depends only on DictionaryLookup.lookup(word, direction); words
arrive lowercased and are matched exactly against the source column.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, Iterator, NamedTuple, Optional, Protocol, Tuple

from drow_translator import db
from drow_translator.languages import Direction, Language


class DictionaryEntry(NamedTuple):
    translation: str
    notes: str = ''


class DictionaryLookup(Protocol):
    def lookup(self, word: str, direction: Direction) -> Optional[DictionaryEntry]:
        ...


class SqliteDictionary:
    """Lookups against an open (read-only) dictionary connection."""

    def __init__(self, conn):
        self.conn = conn

    def lookup(self, word: str, direction: Direction) -> Optional[DictionaryEntry]:
        row = db.lookup_entry(self.conn, word, direction.source.value, direction.target.value)
        if row is None:
            return None
        return DictionaryEntry(row['translation'], row['notes'])


@contextmanager
def open_dictionary(db_path: Path) -> Iterator[SqliteDictionary]:
    """Open the dictionary database read-only for the duration of one request."""
    with db.readonly_connection(db_path) as conn:
        yield SqliteDictionary(conn)


class InMemoryDictionary:
    """Dictionary backed by a plain mapping, for tests and embedding.

    Entries are (drow, common) or (drow, common, notes) tuples. As with the
    SQLite store, the first entry for a given source word wins.
    """

    def __init__(self, entries: Iterable[Tuple[str, ...]] = ()):
        self._table: Dict[Tuple[Language, str], DictionaryEntry] = {}
        for entry in entries:
            self.add(*entry)

    def add(self, drow: str, common: str, notes: str = '') -> None:
        self._table.setdefault((Language.DROW, drow), DictionaryEntry(common, notes))
        self._table.setdefault((Language.COMMON, common), DictionaryEntry(drow, notes))

    def lookup(self, word: str, direction: Direction) -> Optional[DictionaryEntry]:
        return self._table.get((direction.source, word))
