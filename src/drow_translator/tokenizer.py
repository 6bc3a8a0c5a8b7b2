"""
Tokenizer: splits text into alternating word / non-word spans.

A word is a run of word characters and apostrophes, optionally joined by a
single hyphen to a second run ("drow-elf", "don't"). Everything else is a
separator. Separators made only of whitespace collapse to a single space.
"""
import re
from dataclasses import dataclass
from typing import List

WORD_RE = re.compile(r"[\w']+-?[\w']*")
NON_WORD_RE = re.compile(r"\W+|\s+")
VISIBLE_RE = re.compile(r"\S")


@dataclass(frozen=True)
class Token:
    text: str
    is_word: bool


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    index = 0
    while index < len(text):
        match = WORD_RE.match(text, index)
        if match:
            tokens.append(Token(match.group(), True))
            index = match.end()
            continue

        match = NON_WORD_RE.match(text, index)
        if match:
            separator = match.group()
            if not VISIBLE_RE.search(separator):
                separator = ' '
            tokens.append(Token(separator, False))
            index = match.end()
        else:
            # Unmatched character: emit it alone so the scan always advances
            tokens.append(Token(text[index], False))
            index += 1
    return tokens


def has_visible_text(token: Token) -> bool:
    return bool(VISIBLE_RE.search(token.text))
