import pytest
from pathlib import Path

from drow_translator.db import init_dictionary_db, add_entries
from drow_translator.dictionary import InMemoryDictionary

# (drow, common, notes)
WORDS = [
    ('oloth', 'dark', ''),
    ('ssussun', 'light', ''),
    ('jal', 'elf', ''),
    ('drow', 'dark elf', 'Compound; preferred over oloth jal'),
    ('ilharess', 'matron mother', ''),
    ('fel', 'cat', ''),
    ('velve', 'blade', ''),
    ('xyr', 'word', ''),
    ('xyrs', 'thing', ''),
    ("qu'ellar", 'house', 'Noble house'),
]


@pytest.fixture
def dictionary():
    return InMemoryDictionary(WORDS)


@pytest.fixture
def dictionary_db(tmp_path) -> Path:
    db = tmp_path / 'Data' / 'drow_dictionary.db'
    init_dictionary_db(db)
    add_entries(db, WORDS)
    return db
