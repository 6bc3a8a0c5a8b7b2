"""
Morphological fallbacks tried when a word has no direct dictionary entry.

Every rule is a pure function of the word and the translation direction.
The candidate-generating steps in FALLBACK_STEPS are tried in order by the
translator; each yields TranslationAttempt records naming the form to look up
and how to rebuild the emitted text from that form's translation.
"""
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

import inflect

from drow_translator.languages import Direction, Language

_english = inflect.engine()

DROW_VOWELS = 'aeiou'

# Order matters: the first matching suffix wins
CONTRACTIONS: Tuple[Tuple[str, str], ...] = (
    ("'d", 'would'),
    ("'ve", 'have'),
    ("n't", 'not'),
    ("'ll", 'will'),
    ("'re", 'are'),
    ("'m", 'am'),
    ("'s", 'is'),
)


class TranslationAttempt(NamedTuple):
    rule: str
    candidate: str
    restore: Callable[[str], str]


# ─────────────────────────────────────────────────────────────────────────────
# Possessives
# ─────────────────────────────────────────────────────────────────────────────

def unpossessivize(word: str) -> Optional[str]:
    """Strip possessive marking: "elf's" → "elf", "elves'" → "elves".

    Returns None when the word is not possessive.
    """
    if word.endswith("'s"):
        return word[:-2]
    if word.endswith("s'"):
        return word[:-1]
    return None


def possessivize(word: str) -> str:
    if word.lower().endswith('s'):
        return word + "'"
    return word + "'s"


# ─────────────────────────────────────────────────────────────────────────────
# Plurals
# ─────────────────────────────────────────────────────────────────────────────

def unpluralize(word: str, language: Language) -> List[str]:
    """Candidate singular forms of `word`, in lookup order."""
    forms = []
    if language is Language.DROW:
        if word.endswith('n'):
            forms.append(word[:-1])
        if word.endswith('en'):
            forms.append(word[:-2])
    elif word:
        singular = _english.singular_noun(word)
        if singular and singular != word:
            forms.append(singular)
    return [form for form in forms if form]


def pluralize(word: str, language: Language) -> str:
    if language is Language.DROW:
        if word and word[-1].lower() in DROW_VOWELS:
            return word + 'n'
        return word + 'en'
    singular = _english.singular_noun(word)
    if singular and _english.plural_noun(singular) == word:
        # Already plural
        return word
    return _english.plural_noun(word)


# ─────────────────────────────────────────────────────────────────────────────
# Contractions
# ─────────────────────────────────────────────────────────────────────────────

def split_contraction(word: str, language: Language) -> List[str]:
    """Split a Common contraction into [stem, " ", expansion].

    Returns an empty list for Drow words and for words without a known
    contraction suffix.
    """
    if language is not Language.COMMON:
        return []
    for suffix, expansion in CONTRACTIONS:
        if word.endswith(suffix):
            return [word[:-len(suffix)], ' ', expansion]
    return []


# ─────────────────────────────────────────────────────────────────────────────
# Fallback steps
# ─────────────────────────────────────────────────────────────────────────────

def _unchanged(translation: str) -> str:
    return translation


def direct_attempts(word: str, direction: Direction) -> Iterator[TranslationAttempt]:
    yield TranslationAttempt('direct', word, _unchanged)


def possessive_attempts(word: str, direction: Direction) -> Iterator[TranslationAttempt]:
    base = unpossessivize(word)
    if base:
        yield TranslationAttempt('possessive', base, possessivize)


def plural_attempts(word: str, direction: Direction) -> Iterator[TranslationAttempt]:
    def restore(translation: str) -> str:
        return pluralize(translation, direction.target)

    for candidate in unpluralize(word, direction.source):
        yield TranslationAttempt('plural', candidate, restore)


def plural_possessive_attempts(word: str, direction: Direction) -> Iterator[TranslationAttempt]:
    base = unpossessivize(word)
    if not base:
        return

    def restore(translation: str) -> str:
        return possessivize(pluralize(translation, direction.target))

    for candidate in unpluralize(base, direction.source):
        yield TranslationAttempt('plural-possessive', candidate, restore)


FALLBACK_STEPS: Tuple[Callable[[str, Direction], Iterator[TranslationAttempt]], ...] = (
    direct_attempts,
    possessive_attempts,
    plural_attempts,
    plural_possessive_attempts,
)
