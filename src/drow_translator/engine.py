"""
Translation dispatcher.

Walks the token stream once, left to right. At each word it tries, in order:
a multi-word compound entry, the morphological fallback chain for the single
word, and finally passthrough. Separators are emitted verbatim.
"""
import re
from functools import partial
from typing import List, Optional, Sequence

from drow_translator.casing import restore_case
from drow_translator.compound import resolve_compound
from drow_translator.dictionary import DictionaryLookup
from drow_translator.languages import Direction, Language
from drow_translator.logger import system_logger
from drow_translator.morphology import FALLBACK_STEPS, split_contraction
from drow_translator.tokenizer import Token, tokenize

WORD_CHAR_RE = re.compile(r"\w")


class Translator:
    def __init__(self, dictionary: DictionaryLookup):
        self.dictionary = dictionary

    def lookup(self, word: str, direction: Direction) -> Optional[str]:
        """Dictionary translation of `word` with its casing carried over."""
        if not word:
            return None
        entry = self.dictionary.lookup(word.lower(), direction)
        if entry is None or not entry.translation:
            return None
        return restore_case(word, entry.translation)

    def translate(self, text: str, direction: Direction) -> str:
        return ''.join(self.translate_tokens(tokenize(text), direction))

    def translate_tokens(self, tokens: Sequence[Token], direction: Direction) -> List[str]:
        """Translate a token stream into the list of emitted fragments."""
        results: List[str] = []
        lookup = partial(self.lookup, direction=direction)
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not token.is_word:
                results.append(token.text)
                i += 1
                continue

            match = resolve_compound(tokens, i, lookup)
            if match:
                system_logger.debug(f"[Translator] compound at token {i}: → '{match.translation}'")
                results.append(match.translation)
                i = match.end + 1
                continue

            pieces = self.translate_word(token.text, direction)
            results.extend(pieces if pieces is not None else [token.text])
            i += 1
        return results

    def translate_word(self, word: str, direction: Direction) -> Optional[List[str]]:
        """Run the fallback chain on a single word.

        Returns the fragments to emit, or None when nothing applies.
        """
        for step in FALLBACK_STEPS:
            for attempt in step(word, direction):
                translation = self.lookup(attempt.candidate, direction)
                if translation:
                    result = attempt.restore(translation)
                    system_logger.debug(f"[Translator] {attempt.rule}: '{word}' → '{result}'")
                    return [result]

        pieces = split_contraction(word, direction.source)
        if pieces:
            system_logger.debug(f"[Translator] contraction: '{word}' → {pieces}")
            return [self._translate_piece(piece, direction) for piece in pieces]
        return None

    def _translate_piece(self, piece: str, direction: Direction) -> str:
        if not WORD_CHAR_RE.search(piece):
            return piece
        return self.lookup(piece, direction) or piece


def translate(text: str, source: Language, target: Language, dictionary: DictionaryLookup) -> str:
    """Translate `text` from `source` to `target`. Untranslatable words pass through."""
    return Translator(dictionary).translate(text, Direction(source, target))
