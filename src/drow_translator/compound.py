"""
Compound phrase resolution.

Multi-word dictionary entries ("dark elf") take precedence over translating
their words one by one. A phrase may span up to MAX_COMPOUND_WORDS words
joined by whitespace; any visible separator (punctuation) ends it.
"""
from typing import Callable, List, NamedTuple, Optional, Sequence

from drow_translator.tokenizer import Token, has_visible_text

MAX_COMPOUND_WORDS = 4
# Words plus the separators between and after them
SCAN_WINDOW = MAX_COMPOUND_WORDS * 2


class CompoundMatch(NamedTuple):
    translation: str
    end: int  # index of the last consumed token


def phrase_ends(tokens: Sequence[Token], start: int) -> List[int]:
    """Indices of the word tokens that can close a phrase opened at `start`.

    Longest phrase first; single-word phrases are excluded.
    """
    window = tokens[start:start + SCAN_WINDOW]
    ends = []
    for offset, token in enumerate(window):
        if token.is_word:
            ends.append(start + offset)
        elif has_visible_text(token):
            break
    return [end for end in reversed(ends) if end > start]


def resolve_compound(
    tokens: Sequence[Token],
    start: int,
    lookup: Callable[[str], Optional[str]],
) -> Optional[CompoundMatch]:
    """Translate the longest phrase starting at `start` that has an entry."""
    for end in phrase_ends(tokens, start):
        phrase = ''.join(token.text for token in tokens[start:end + 1])
        translation = lookup(phrase)
        if translation:
            return CompoundMatch(translation, end)
    return None
