"""Capitalization transfer from a source word onto its translation."""
from typing import NamedTuple


class CaseProfile(NamedTuple):
    first_capital: bool
    all_capital: bool


def case_profile(word: str) -> CaseProfile:
    # all_capital is vacuously true for words without letters ("42", "'")
    return CaseProfile(
        first_capital=bool(word) and word[0].isupper(),
        all_capital=all(not c.isalpha() or c.isupper() for c in word),
    )


def restore_case(original: str, translated: str) -> str:
    """Reapply the casing of `original` to `translated`.

    First-capital is applied before all-capital, so an all-caps source
    always yields an all-caps translation.
    """
    if not original or not translated:
        return translated
    profile = case_profile(original)
    if profile.first_capital:
        translated = translated[0].upper() + translated[1:]
    if profile.all_capital:
        translated = translated.upper()
    return translated
