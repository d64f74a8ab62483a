"""Translator Selection Rules.

Decides which FunTranslations translator rewrites a pokemon description.

Rules:
- Pokemon living in caves are described by Yoda
- Legendary pokemon are described by Yoda
- Every other pokemon is described by Shakespeare

Either condition alone is enough for Yoda. The habitat comparison is an
exact match against the lowercase label PokeAPI returns.
"""

import enum

from ..core.constants import TranslationRules


class TranslationStyle(str, enum.Enum):
    """Translators offered by FunTranslations, valued by their API path name."""
    YODA = "yoda"
    SHAKESPEARE = "shakespeare"


def select_translation_style(habitat: str | None, is_legendary: bool) -> TranslationStyle:
    """Pick the translator for a pokemon.

    Args:
        habitat: PokeAPI habitat label, if any
        is_legendary: Whether the pokemon is legendary

    Returns:
        TranslationStyle.YODA for cave dwellers and legendaries,
        TranslationStyle.SHAKESPEARE otherwise
    """
    if habitat == TranslationRules.YODA_HABITAT or is_legendary:
        return TranslationStyle.YODA
    return TranslationStyle.SHAKESPEARE
