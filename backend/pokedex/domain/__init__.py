"""Domain layer.

Contains pure business logic without external dependencies:
- translation: translator selection rules
"""

from .translation import TranslationStyle, select_translation_style

__all__ = [
    "TranslationStyle",
    "select_translation_style",
]
