"""
Supported languages and translation directions.

Language values double as wire identifiers (the `lang` request parameter)
and as column names in the dictionary database.
"""
from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    DROW = 'Drow'
    COMMON = 'Common'

    @classmethod
    def parse(cls, name: str) -> 'Language':
        """Return the language for an exact identifier ('Drow' or 'Common')."""
        for language in cls:
            if language.value == name:
                return language
        raise ValueError(f"Invalid language id: {name}")

    def other(self) -> 'Language':
        return Language.COMMON if self is Language.DROW else Language.DROW


@dataclass(frozen=True)
class Direction:
    source: Language
    target: Language

    def __post_init__(self):
        if self.source == self.target:
            raise ValueError(f"Source and target language must differ (got {self.source.value})")

    @classmethod
    def to(cls, target: Language) -> 'Direction':
        """Direction that translates into `target` from the other language."""
        return cls(source=target.other(), target=target)

    def __str__(self) -> str:
        return f"{self.source.value} → {self.target.value}"
